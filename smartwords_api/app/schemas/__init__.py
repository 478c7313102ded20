"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from records so that the wire
representation can evolve independently of the validated domain
values.
"""
