"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from environment
variables.  Defaults are provided for all fields so that the service can
start against a local MongoDB instance.  Credentials for the storage
engine and the identity provider are never part of the code base: they
are supplied through the environment (``MONGO_USER``/``MONGO_PASS`` or a
full ``MONGO_URI``) and a Firebase service account file referenced by
``FIREBASE_CREDENTIALS``.
"""

import os
from dataclasses import dataclass, field
from typing import List
from urllib.parse import quote_plus


DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173,"
    "https://assignment-11-19334.web.app,"
    "https://tutor-booking-jade.vercel.app"
)


def _split_origins(raw: str) -> List[str]:
    """Parse a comma-separated list of origins, dropping blanks."""
    return [part.strip() for part in raw.split(",") if part.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Tutor Booking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    # Routes are served from the root by default so that existing
    # frontends keep working (``/allTutors``, ``/bookTutor`` ...).
    api_prefix: str = os.getenv("API_PREFIX", "")
    cors_origins: List[str] = field(
        default_factory=lambda: _split_origins(os.getenv("CORS_ORIGINS", DEFAULT_CORS_ORIGINS))
    )

    # A full connection string takes precedence over the individual
    # pieces below.  See ``mongo_connection_uri``.
    mongo_uri: str = os.getenv("MONGO_URI", "")
    mongo_user: str = os.getenv("MONGO_USER", "")
    mongo_pass: str = os.getenv("MONGO_PASS", "")
    mongo_host: str = os.getenv("MONGO_HOST", "localhost:27017")
    mongo_app_name: str = os.getenv("MONGO_APP_NAME", "Cluster0")

    tutors_db: str = os.getenv("TUTORS_DB", "tutors")
    tutors_collection: str = os.getenv("TUTORS_COLLECTION", "tutors")
    bookings_db: str = os.getenv("BOOKINGS_DB", "bookings")
    bookings_collection: str = os.getenv("BOOKINGS_COLLECTION", "bookings")

    # Path to the Firebase service account JSON used to verify ID tokens.
    firebase_credentials: str = os.getenv("FIREBASE_CREDENTIALS", "firebase/serviceAccountKey.json")

    def mongo_connection_uri(self) -> str:
        """Return the MongoDB connection string for these settings.

        An explicit ``mongo_uri`` is used verbatim.  When a user name is
        configured an SRV URI for a hosted cluster is built, with the
        credentials percent-escaped.  Otherwise a plain URI pointing at
        ``mongo_host`` is returned.
        """
        if self.mongo_uri:
            return self.mongo_uri
        if self.mongo_user:
            user = quote_plus(self.mongo_user)
            password = quote_plus(self.mongo_pass)
            return (
                f"mongodb+srv://{user}:{password}@{self.mongo_host}/"
                f"?retryWrites=true&w=majority&appName={self.mongo_app_name}"
            )
        return f"mongodb://{self.mongo_host}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
