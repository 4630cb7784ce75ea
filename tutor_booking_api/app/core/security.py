"""
Access guard for protected routes.

``get_current_user`` is the FastAPI dependency guarding authenticated
routes: it extracts the bearer credential from the ``Authorization``
header, asks the identity provider to verify it and attaches the decoded
claims to ``request.state.user``.  Owner-scoped routes then call
``enforce_owner`` to compare the authenticated email with the email the
request targets.

The ownership check itself is a pure function (``check_owner``)
returning an :class:`AccessDecision`, so the same rule backs every route
while each route chooses which error a denial maps to (``Forbidden`` on
create and booking reads, ``Unauthorized`` on listing one's own tutorials).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import ServiceError, UnauthorizedError


logger = logging.getLogger(__name__)

# ``auto_error=False`` lets us answer missing or non-Bearer headers with
# our own 401 body instead of FastAPI's default 403.
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an ownership check."""

    allowed: bool
    identity: Dict[str, Any]
    reason: Optional[str] = None


def check_owner(identity: Dict[str, Any], email: Optional[str]) -> AccessDecision:
    """Allow only when ``email`` equals the authenticated identity's email."""
    owner = identity.get("email")
    if owner is not None and email == owner:
        return AccessDecision(allowed=True, identity=identity)
    return AccessDecision(
        allowed=False,
        identity=identity,
        reason=f"{owner!r} may not act on behalf of {email!r}",
    )


def enforce_owner(
    identity: Dict[str, Any],
    email: Optional[str],
    denial: Type[ServiceError],
    message: Optional[str] = None,
) -> Dict[str, Any]:
    """Return ``identity`` if it owns ``email``; otherwise raise ``denial``."""
    decision = check_owner(identity, email)
    if not decision.allowed:
        logger.info("Ownership check denied: %s", decision.reason)
        raise denial(message)
    return decision.identity


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency that returns the verified claims of the caller.

    Raises ``UnauthorizedError`` if the header is absent, uses another
    scheme, or the provider rejects the token.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()
    provider = request.app.state.context.identity
    claims = await provider.verify(credentials.credentials)
    request.state.user = claims
    return claims
