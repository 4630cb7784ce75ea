"""
Version 1 of the API.

The route paths of this version are kept identical to the ones the
existing web client calls (``/addTutor``, ``/allBookings`` ...).
"""
