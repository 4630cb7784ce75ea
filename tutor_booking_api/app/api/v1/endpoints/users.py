"""
User account endpoint for API v1.

Accounts live in the identity provider; this route lists them so the
web client can show tutor profiles.  It is unauthenticated, as in the
original service.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from tutor_booking_api.app.api.deps import get_identity_provider


router = APIRouter()


@router.get("/allFirebaseUsers", response_model=List[Dict[str, Any]], summary="List provider accounts")
async def all_firebase_users(provider: Any = Depends(get_identity_provider)) -> List[Dict[str, Any]]:
    """Return every account known to the identity provider.

    A provider failure is answered with 500 and ``{"error": ...}``.
    """
    return await provider.list_users()
