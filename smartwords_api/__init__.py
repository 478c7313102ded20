"""
Top‑level package for the SmartWords API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``smartwords_api.app.main:app``.
"""

__all__ = []
