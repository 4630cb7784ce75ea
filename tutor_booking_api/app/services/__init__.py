"""
Service layer abstraction.

Each service encapsulates the logic of one domain (tutor listings,
bookings, review aggregation, identities).  Services receive their
collections or collaborators at construction time, so routes never
reach for module-level connections.
"""
