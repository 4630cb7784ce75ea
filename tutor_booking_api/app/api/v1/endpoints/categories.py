"""Language category endpoint for API v1."""

from typing import List

from fastapi import APIRouter

from tutor_booking_api.app.schemas.category import LanguageCategory
from tutor_booking_api.app.services.category_service import CategoryService


router = APIRouter()


@router.get("/language_categories", response_model=List[LanguageCategory], summary="List language categories")
async def language_categories() -> List[LanguageCategory]:
    return CategoryService.list_categories()
