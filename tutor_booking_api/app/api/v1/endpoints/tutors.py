"""
Tutor listing endpoints for API v1.

Creating a listing and reading one's own listings require the caller to
own the email involved.  Browsing all listings and viewing details
require a valid credential.  Search, replace and delete are open, as
they were in the original service (see DESIGN.md, open questions).
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Path, Query

from tutor_booking_api.app.api.deps import get_tutor_service
from tutor_booking_api.app.core.errors import ForbiddenError, StorageError, UnauthorizedError
from tutor_booking_api.app.core.security import enforce_owner, get_current_user
from tutor_booking_api.app.schemas.common import DeleteAck, InsertAck, UpdateAck
from tutor_booking_api.app.schemas.tutor import TutorCreate, TutorUpdate
from tutor_booking_api.app.services.tutor_service import TutorService


router = APIRouter()


@router.post("/addTutor", response_model=InsertAck, summary="Create a tutor listing")
async def add_tutor(
    listing: TutorCreate,
    current_user: dict = Depends(get_current_user),
    service: TutorService = Depends(get_tutor_service),
) -> InsertAck:
    """Create a listing owned by the caller.

    The ``email`` in the body must equal the authenticated email,
    otherwise 403 is returned.
    """
    enforce_owner(current_user, listing.email, ForbiddenError, "You are not authorized to perform this action")
    return await service.create(listing)


@router.get("/allTutors", response_model=List[Dict[str, Any]], summary="List all tutor listings")
async def all_tutors(
    current_user: dict = Depends(get_current_user),
    service: TutorService = Depends(get_tutor_service),
):
    return await service.list_all()


@router.get("/myAddedTutorials", response_model=List[Dict[str, Any]], summary="List the caller's listings")
async def my_added_tutorials(
    email: Optional[str] = Query(None, description="Email of the caller"),
    current_user: dict = Depends(get_current_user),
    service: TutorService = Depends(get_tutor_service),
):
    """Return the listings owned by ``email``.

    Asking for someone else's listings is answered with 401.
    """
    enforce_owner(current_user, email, UnauthorizedError)
    return await service.list_by_owner(email)


@router.get("/tutorDetails/{tutor_id}", response_model=Dict[str, Any], summary="Get a single listing")
async def tutor_details(
    tutor_id: str = Path(..., description="ID of the listing"),
    current_user: dict = Depends(get_current_user),
    service: TutorService = Depends(get_tutor_service),
):
    return await service.get_by_id(tutor_id)


@router.put("/updateTutorialData/{tutor_id}", response_model=UpdateAck, summary="Replace listing fields")
async def update_tutorial_data(
    fields: TutorUpdate,
    tutor_id: str = Path(..., description="ID of the listing"),
    service: TutorService = Depends(get_tutor_service),
) -> UpdateAck:
    """Overwrite the fields present in the body on one listing."""
    return await service.replace(tutor_id, fields)


@router.delete("/deleteTutorial/{tutor_id}", response_model=DeleteAck, summary="Delete a listing")
async def delete_tutorial(
    tutor_id: str = Path(..., description="ID of the listing"),
    service: TutorService = Depends(get_tutor_service),
) -> DeleteAck:
    return await service.delete(tutor_id)


@router.get("/searchTutors", response_model=List[Dict[str, Any]], summary="Search listings by language")
async def search_tutors(
    language: Optional[str] = Query(None, description="Substring of the language, case-insensitive"),
    service: TutorService = Depends(get_tutor_service),
):
    """Search listings; an empty query returns every listing."""
    try:
        return await service.search(language)
    except StorageError as e:
        raise StorageError("Search failed") from e
