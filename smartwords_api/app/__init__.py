"""
Application package initializer.

The package is organised into layers: ``core`` (configuration,
logging, storage), ``records`` (validated domain values), ``schemas``
(API payloads), ``services`` (use cases) and ``api`` (versioned
routes).
"""

from .main import app  # noqa: F401
