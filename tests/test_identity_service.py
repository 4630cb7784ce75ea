from types import SimpleNamespace

import pytest
from firebase_admin import auth
from firebase_admin.exceptions import UnavailableError

from conftest import run
from tutor_booking_api.app.core.errors import IdentityProviderError, UnauthorizedError
from tutor_booking_api.app.services.identity_service import FirebaseIdentityProvider, user_record_to_dict


def _record(**overrides):
    fields = dict(
        uid="u1",
        email="a@x.com",
        email_verified=True,
        display_name="Alice",
        photo_url=None,
        phone_number=None,
        disabled=False,
        user_metadata=SimpleNamespace(creation_timestamp=1700000000000, last_sign_in_timestamp=None),
        custom_claims=None,
        tenant_id=None,
        provider_data=[
            SimpleNamespace(
                uid="a@x.com",
                email="a@x.com",
                display_name="Alice",
                photo_url=None,
                phone_number=None,
                provider_id="password",
            )
        ],
    )
    fields.update(overrides)
    return SimpleNamespace(**fields)


def test_user_record_to_dict() -> None:
    data = user_record_to_dict(_record())
    assert data["uid"] == "u1"
    assert data["emailVerified"] is True
    assert data["displayName"] == "Alice"
    assert data["metadata"] == {"creationTime": "Tue, 14 Nov 2023 22:13:20 GMT", "lastSignInTime": None}
    assert data["providerData"][0]["providerId"] == "password"


def test_verify_returns_claims(monkeypatch) -> None:
    firebase_app = object()
    seen = {}

    def fake_verify(token, app=None):
        seen.update(token=token, app=app)
        return {"uid": "u1", "email": "a@x.com"}

    monkeypatch.setattr(auth, "verify_id_token", fake_verify)
    claims = run(FirebaseIdentityProvider(firebase_app).verify("good"))
    assert claims["email"] == "a@x.com"
    assert seen == {"token": "good", "app": firebase_app}


@pytest.mark.parametrize(
    "error",
    [ValueError("empty token"), auth.InvalidIdTokenError("bad token"), auth.ExpiredIdTokenError("expired", None)],
)
def test_verify_rejections_are_unauthorized(monkeypatch, error) -> None:
    def fake_verify(token, app=None):
        raise error

    monkeypatch.setattr(auth, "verify_id_token", fake_verify)
    with pytest.raises(UnauthorizedError):
        run(FirebaseIdentityProvider(object()).verify("bad"))


def test_list_users_iterates_all_pages(monkeypatch) -> None:
    page = SimpleNamespace(iterate_all=lambda: iter([_record(uid="u1"), _record(uid="u2", email="b@x.com")]))
    monkeypatch.setattr(auth, "list_users", lambda app=None: page)

    users = run(FirebaseIdentityProvider(object()).list_users())
    assert [user["uid"] for user in users] == ["u1", "u2"]


def test_list_users_failure(monkeypatch) -> None:
    def fake_list(app=None):
        raise UnavailableError("backend down")

    monkeypatch.setattr(auth, "list_users", fake_list)
    with pytest.raises(IdentityProviderError) as excinfo:
        run(FirebaseIdentityProvider(object()).list_users())
    assert excinfo.value.message == "backend down"
