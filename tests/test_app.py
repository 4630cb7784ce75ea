from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from conftest import FailingCollection, FakeIdentityProvider, bearer
from tutor_booking_api.app.core.context import AppContext
from tutor_booking_api.app.core.db import Collections, get_collections
from tutor_booking_api.app.main import create_app


def test_root_is_alive(client) -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello World!"


def test_language_categories(client) -> None:
    response = client.get("/language_categories")
    assert response.status_code == 200
    categories = response.json()
    assert len(categories) == 9
    assert categories[0]["language"] == "english"
    assert {"id", "language", "title", "teachers", "icon"} <= set(categories[0])


def test_unknown_route(client) -> None:
    response = client.get("/does/not/exist")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


def test_unsupported_method_is_route_not_found(client) -> None:
    response = client.post("/allTutors")
    assert response.status_code == 404
    assert response.json() == {"error": "Route not found"}


def test_all_firebase_users(client) -> None:
    response = client.get("/allFirebaseUsers")
    assert response.status_code == 200
    assert [user["email"] for user in response.json()] == ["a@x.com", "t@x.com", "b@x.com"]


def test_all_firebase_users_provider_failure(client, identity) -> None:
    identity.fail_listing = True
    response = client.get("/allFirebaseUsers")
    assert response.status_code == 500
    assert response.json() == {"error": "provider unavailable"}


def _failing_client(settings, identity) -> TestClient:
    context = AppContext(
        client=None,
        collections=Collections(tutors=FailingCollection(), bookings=FailingCollection()),
        identity=identity,
    )
    return TestClient(create_app(settings=settings, context=context))


def test_storage_failure_is_reported(settings, identity) -> None:
    client = _failing_client(settings, identity)

    response = client.get("/allTutors", headers=bearer("a@x.com"))
    assert response.status_code == 500
    assert response.json() == {"error": "no servers available"}

    response = client.post("/bookTutor", json={"selfBooking": "a@x.com", "email": "t@x.com"})
    assert response.status_code == 500


def test_search_failure_message(settings, identity) -> None:
    client = _failing_client(settings, identity)
    response = client.get("/searchTutors", params={"language": "en"})
    assert response.status_code == 500
    assert response.json() == {"error": "Search failed"}


def test_cors_preflight(client) -> None:
    response = client.options(
        "/addTutor",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


class _ClosableClient:
    def __init__(self) -> None:
        self.mongo = AsyncMongoMockClient()
        self.closed = False

    def __getitem__(self, name):
        return self.mongo[name]

    def close(self) -> None:
        self.closed = True


def test_lifespan_opens_and_releases_context(settings, monkeypatch) -> None:
    storage = _ClosableClient()
    provider = FakeIdentityProvider(["a@x.com"])

    async def fake_open(cls, _settings):
        return cls(client=storage, collections=get_collections(storage, _settings), identity=provider)

    monkeypatch.setattr(AppContext, "open", classmethod(fake_open))
    app = create_app(settings=settings)

    with TestClient(app) as client:
        assert app.state.context is not None
        assert client.get("/allTutors", headers=bearer("a@x.com")).json() == []

    assert app.state.context is None
    assert storage.closed
    assert provider.closed
