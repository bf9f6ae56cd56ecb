"""
Application package initializer.

Contains the FastAPI entrypoint (``main``) and its pieces: ``api`` for
routes, ``core`` for configuration, logging, errors and the store,
``schemas`` for request/response models and ``services`` for the
business logic.
"""

from .main import app, create_app  # noqa: F401
