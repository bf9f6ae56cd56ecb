"""
Main entrypoint for the Users API.

This module assembles the FastAPI application, sets up logging,
attaches the user store and registers the error handlers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app`` so it can be served
with::

    uvicorn users_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import UsersApiError
from .core.logging_config import setup_logging
from .core.store import InMemoryUserStore, UserStore


logger = logging.getLogger(__name__)


async def users_api_error_handler(request: Request, exc: UsersApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request bodies as ``400 {"error": ...}``.

    The message names the first offending field, e.g.
    ``"Invalid request: body.name: Input should be a valid string"``.
    """
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment at import time.
    store : Optional[UserStore]
        User store to serve.  Defaults to a new ``InMemoryUserStore``
        holding the seed users, so every app starts from the same state.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description=settings.description,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.user_store = store if store is not None else InMemoryUserStore()

    app.add_exception_handler(UsersApiError, users_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(router)

    logger.info("Configured %s %s", settings.project_name, settings.api_version)
    return app


app = create_app()
