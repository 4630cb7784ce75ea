"""
Pydantic schema definitions for API payloads.

Tutor listings and bookings are schema-less documents: the models below
validate only the fields the service reads and keep every other
attribute supplied by the client (``extra="allow"``).
"""
