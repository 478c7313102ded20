"""
Error types shared by the record, storage and API layers.

``ValidationError`` signals a problem with caller supplied data and is
translated into a 400 response.  ``StoreError`` signals that the
storage backend could not complete an operation and is translated into
a 503 response.  Neither is caught by the record layer.
"""


class ValidationError(Exception):
    """Raised when attributes do not describe a valid record."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StoreError(Exception):
    """Raised when the document store cannot complete a read or write."""
