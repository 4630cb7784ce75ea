"""
Top-level router for version 1 of the API.

This router aggregates the domain routers.  None of them uses a path
prefix: every route is declared with its full legacy path.
"""

from fastapi import APIRouter

from .endpoints import bookings, categories, health, reviews, tutors, users


router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(categories.router, tags=["categories"])
router.include_router(users.router, tags=["users"])
router.include_router(tutors.router, tags=["tutors"])
router.include_router(reviews.router, tags=["reviews"])
router.include_router(bookings.router, tags=["bookings"])
