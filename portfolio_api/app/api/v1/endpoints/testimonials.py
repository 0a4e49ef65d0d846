"""
Testimonial endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, status

from portfolio_api.app.schemas.testimonial import TestimonialCreate, TestimonialRead
from portfolio_api.app.services.testimonial_service import TestimonialService

router = APIRouter()


@router.get("", response_model=List[TestimonialRead], operation_id="getTestimonials")
async def list_testimonials() -> List[TestimonialRead]:
    return await TestimonialService.list_testimonials()


@router.post(
    "",
    response_model=TestimonialRead,
    status_code=status.HTTP_201_CREATED,
    operation_id="createTestimonial",
)
async def create_testimonial(testimonial_in: TestimonialCreate) -> TestimonialRead:
    return await TestimonialService.create_testimonial(testimonial_in)
