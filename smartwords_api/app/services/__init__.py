"""
Service layer abstraction.

Each service encapsulates the use cases of a domain so that API
handlers stay thin and the storage backend can be swapped without
touching them.
"""
