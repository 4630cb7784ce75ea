from conftest import bearer


def test_book_then_list_own_bookings(client) -> None:
    response = client.post("/bookTutor", json={"selfBooking": "a@x.com", "email": "t@x.com"})
    assert response.status_code == 200
    booking_id = response.json()["insertedId"]

    response = client.get("/allBookings", params={"email": "a@x.com"}, headers=bearer("a@x.com"))
    assert response.status_code == 200
    [booking] = response.json()
    assert booking["_id"] == booking_id
    assert booking["selfBooking"] == "a@x.com"
    assert booking["email"] == "t@x.com"


def test_booking_keeps_extra_attributes(client) -> None:
    client.post(
        "/bookTutor",
        json={"selfBooking": "a@x.com", "email": "t@x.com", "price": 15, "language": "German"},
    )
    [booking] = client.get("/allBookings", params={"email": "a@x.com"}, headers=bearer("a@x.com")).json()
    assert booking["price"] == 15
    assert booking["language"] == "German"


def test_bookings_are_scoped_to_the_requester(client) -> None:
    client.post("/bookTutor", json={"selfBooking": "a@x.com", "email": "t@x.com"})
    client.post("/bookTutor", json={"selfBooking": "b@x.com", "email": "t@x.com"})

    response = client.get("/allBookings", params={"email": "b@x.com"}, headers=bearer("b@x.com"))
    assert [booking["selfBooking"] for booking in response.json()] == ["b@x.com"]


def test_listing_another_users_bookings_is_forbidden(client) -> None:
    client.post("/bookTutor", json={"selfBooking": "a@x.com", "email": "t@x.com"})
    response = client.get("/allBookings", params={"email": "a@x.com"}, headers=bearer("b@x.com"))
    assert response.status_code == 403
    assert response.json() == {"message": "Forbidden access"}


def test_listing_bookings_without_email_is_forbidden(client) -> None:
    response = client.get("/allBookings", headers=bearer("a@x.com"))
    assert response.status_code == 403


def test_listing_bookings_requires_credential(client) -> None:
    response = client.get("/allBookings", params={"email": "a@x.com"})
    assert response.status_code == 401


def test_booking_without_tutor_fields_is_stored_as_sent(client, bookings) -> None:
    response = client.post("/bookTutor", json={"selfBooking": "a@x.com", "tutorName": "Ann"})
    assert response.status_code == 200
    booking_id = response.json()["insertedId"]

    [booking] = client.get("/allBookings", params={"email": "a@x.com"}, headers=bearer("a@x.com")).json()
    assert booking == {"_id": booking_id, "selfBooking": "a@x.com", "tutorName": "Ann"}


def test_booking_with_empty_body_is_accepted(client, bookings) -> None:
    response = client.post("/bookTutor", json={})
    assert response.status_code == 200
    assert response.json()["acknowledged"] is True
