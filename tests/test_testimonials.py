"""Tests for the testimonial service."""
import asyncio

from portfolio_api.app.schemas.testimonial import TestimonialCreate
from portfolio_api.app.services.testimonial_service import TestimonialService


def test_create_testimonial(testimonial_data):
    testimonial = asyncio.run(
        TestimonialService.create_testimonial(TestimonialCreate(**testimonial_data))
    )

    assert testimonial.id
    assert testimonial.rating == 5
    assert testimonial.created_at is not None


def test_list_testimonials_newest_first(testimonial_data):
    for name in ["First", "Second", "Third"]:
        testimonial_data["client_name"] = name
        asyncio.run(TestimonialService.create_testimonial(TestimonialCreate(**testimonial_data)))

    testimonials = asyncio.run(TestimonialService.list_testimonials())

    assert [t.client_name for t in testimonials] == ["Third", "Second", "First"]
