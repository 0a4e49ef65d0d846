"""
Top-level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.  When
a new entity is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    certificates,
    contact,
    experience,
    health,
    newsletter,
    projects,
    skills,
    testimonials,
    users,
)

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(users.router, prefix="/user", tags=["user"])
router.include_router(skills.router, prefix="/skills", tags=["skills"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(certificates.router, prefix="/certificates", tags=["certificates"])
router.include_router(experience.router, prefix="/experience", tags=["experience"])
router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])
