"""
Service layer abstraction.

Services encapsulate business logic for a domain.  By isolating logic
here the in-memory store used by this service could be swapped for a
database without changing the API handlers.
"""
