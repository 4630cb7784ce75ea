"""
Application package for the Tutor Booking API.

Subpackages group configuration and infrastructure (``core``), request
and response models (``schemas``), domain logic (``services``) and the
HTTP routes (``api``).
"""
