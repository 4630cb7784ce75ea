"""
Process-scoped resources.

``AppContext`` owns the long-lived storage client, the collections
resolved from it and the identity provider.  One context is opened at
startup, stored on ``app.state.context`` and shared by every request;
``close`` releases both connections at shutdown.  Tests build a context
directly with in-memory collaborators.
"""

import logging
from dataclasses import dataclass
from typing import Any

from .config import Settings
from .db import Collections, create_client, get_collections, ping


logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    client: Any
    collections: Collections
    identity: Any

    @classmethod
    async def open(cls, settings: Settings) -> "AppContext":
        """Connect to the storage engine and the identity provider."""
        from ..services.identity_service import FirebaseIdentityProvider

        client = create_client(settings)
        await ping(client)
        identity = FirebaseIdentityProvider.from_service_account(settings.firebase_credentials)
        return cls(client=client, collections=get_collections(client, settings), identity=identity)

    async def close(self) -> None:
        self.client.close()
        await self.identity.close()
        logger.info("Released storage and identity provider connections")
