"""
Record layer.

Records are validated, immutable values that sit between the store
and the API.  Building a record is the single point where domain
rules are enforced.
"""
