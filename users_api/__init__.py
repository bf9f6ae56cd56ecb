"""
Top‑level package for the Users API.

The web application lives under ``users_api.app`` and can be served
with ``uvicorn users_api.app.main:app``.  ``users_api.client`` holds a
small HTTP client for talking to a running instance.
"""

__all__ = []
