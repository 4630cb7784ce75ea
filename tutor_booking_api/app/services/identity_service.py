"""
Identity provider integration.

Bearer credentials are Firebase ID tokens.  ``FirebaseIdentityProvider``
verifies them with the Firebase Admin SDK and lists the provider's user
accounts.  The SDK is synchronous and performs network I/O (public key
fetches, admin API calls), so every call is moved to a worker thread
to keep the event loop free for other requests.
"""

import logging
from email.utils import formatdate
from typing import Any, Dict, List, Optional

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError
from starlette.concurrency import run_in_threadpool

from ..core.errors import IdentityProviderError, UnauthorizedError


logger = logging.getLogger(__name__)


def _utc_string(timestamp_ms: Optional[int]) -> Optional[str]:
    """Format a millisecond timestamp like JavaScript's ``Date.toUTCString``."""
    if timestamp_ms is None:
        return None
    return formatdate(timestamp_ms / 1000, usegmt=True)


def user_record_to_dict(user: Any) -> Dict[str, Any]:
    """Render a Firebase user record in the camelCase JSON shape clients expect."""
    metadata = user.user_metadata
    return {
        "uid": user.uid,
        "email": user.email,
        "emailVerified": user.email_verified,
        "displayName": user.display_name,
        "photoURL": user.photo_url,
        "phoneNumber": user.phone_number,
        "disabled": user.disabled,
        "metadata": {
            "creationTime": _utc_string(metadata.creation_timestamp) if metadata else None,
            "lastSignInTime": _utc_string(metadata.last_sign_in_timestamp) if metadata else None,
        },
        "customClaims": user.custom_claims,
        "tenantId": user.tenant_id,
        "providerData": [
            {
                "uid": info.uid,
                "email": info.email,
                "displayName": info.display_name,
                "photoURL": info.photo_url,
                "phoneNumber": info.phone_number,
                "providerId": info.provider_id,
            }
            for info in (user.provider_data or [])
        ],
    }


class FirebaseIdentityProvider:
    """Verify ID tokens and list accounts through one Firebase app instance."""

    app_name = "tutor-booking-api"

    def __init__(self, app: firebase_admin.App) -> None:
        self._app = app

    @classmethod
    def from_service_account(cls, path: str) -> "FirebaseIdentityProvider":
        """Initialise a named Firebase app from a service account file."""
        credential = credentials.Certificate(path)
        app = firebase_admin.initialize_app(credential, name=cls.app_name)
        return cls(app)

    async def verify(self, token: str) -> Dict[str, Any]:
        """Return the decoded claims of ``token``.

        Raises
        ------
        UnauthorizedError
            If the token is empty, malformed, expired, revoked or otherwise
            rejected by the provider.
        """
        try:
            return await run_in_threadpool(auth.verify_id_token, token, app=self._app)
        except (ValueError, FirebaseError) as exc:
            logger.warning("Rejected identity token: %s", type(exc).__name__)
            raise UnauthorizedError() from exc

    async def list_users(self) -> List[Dict[str, Any]]:
        """Return every user account known to the provider."""

        def _collect() -> List[Dict[str, Any]]:
            page = auth.list_users(app=self._app)
            return [user_record_to_dict(user) for user in page.iterate_all()]

        try:
            return await run_in_threadpool(_collect)
        except FirebaseError as exc:
            logger.error("Listing provider users failed: %s", exc)
            raise IdentityProviderError(str(exc)) from exc

    async def close(self) -> None:
        """Release the Firebase app."""
        app: Optional[firebase_admin.App] = self._app
        if app is not None:
            firebase_admin.delete_app(app)
            self._app = None
