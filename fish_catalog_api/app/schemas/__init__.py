"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store so that the HTTP representation
of a fish is decoupled from how it is held in memory.
"""
