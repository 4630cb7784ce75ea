"""
Tutor Booking API package.

The FastAPI application lives in :mod:`tutor_booking_api.app`.
"""
