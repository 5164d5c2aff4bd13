"""
Main entrypoint for the Account API.

This module assembles the FastAPI application: it sets up logging,
the cross‑origin policy, error handlers and the API routes.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn account_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .api.router import router as api_router
from .core.config import settings
from .core.errors import AccountError
from .core.logging_config import setup_logging
from .core.store import init_store

logger = logging.getLogger(__name__)

# Headers the front‑end is allowed to send, advertised on every response.
FALLBACK_ALLOW_HEADERS = "Origin, X-Requested-With, Content-Type, Accept"


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that the setup below can already log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_fallback_cors_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("Access-Control-Allow-Headers", FALLBACK_ALLOW_HEADERS)
        return response

    @app.exception_handler(AccountError)
    async def account_error_handler(request: Request, exc: AccountError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={exc.body_key: exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
        )

    app.include_router(api_router, prefix="/api")

    @app.get("/test-cors")
    async def test_cors() -> dict:
        return {"message": "CORS is working!"}

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "Hello, World!"

    @app.on_event("startup")
    async def startup_event() -> None:
        # Create the user document on first run.
        init_store()
        logger.info("Accepting requests from origins: %s", ", ".join(settings.cors_origins))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
