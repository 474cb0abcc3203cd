"""
FastAPI server — wallet registration.

Exposes POST /register (verify ownership, reject duplicates, store the record),
the landing and registration pages, and GET /health. The record store is
injected through get_store so tests can swap it.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse

from wallet_registry import __version__
from wallet_registry.api_server.middleware import request_logging_middleware
from wallet_registry.api_server.pages import render_index, render_register
from wallet_registry.config import Settings, get_settings
from wallet_registry.core.exceptions import RegistrationError
from wallet_registry.models import MessageResponse, RegisterRequest
from wallet_registry.registration import register_wallet
from wallet_registry.registry_logging import get_logger
from wallet_registry.store import RegistrationStore, build_store

logger = get_logger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body."
SERVER_ERROR_MESSAGE = "Server error."


# -----------------------------------------------------------------------------
# Dependency
# -----------------------------------------------------------------------------


def get_store(request: Request) -> RegistrationStore:
    """Dependency: the app-scoped store built in create_app."""
    return request.app.state.store


# -----------------------------------------------------------------------------
# Error responses: every failure is {"message": ...}
# -----------------------------------------------------------------------------


def registration_error_handler(request: Request, exc: RegistrationError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=MessageResponse(message=exc.message).model_dump(exclude_none=True),
    )


def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("request_body_invalid", errors=len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content=MessageResponse(message=INVALID_BODY_MESSAGE).model_dump(exclude_none=True),
    )


# -----------------------------------------------------------------------------
# Routes
# -----------------------------------------------------------------------------


def register(body: RegisterRequest, store: RegistrationStore = Depends(get_store)) -> Any:
    """
    Register a wallet.

    400 missing/unknown fields, 401 signature from another address,
    409 address already registered, 500 malformed signature or server error.
    """
    try:
        outcome = register_wallet(body, store)
    except RegistrationError:
        raise
    except Exception as e:
        logger.exception("register_failed", error=str(e))
        return JSONResponse(
            status_code=500,
            content=MessageResponse(message=SERVER_ERROR_MESSAGE).model_dump(exclude_none=True),
        )
    return MessageResponse(message=outcome.message, verified=outcome.verified)


def index() -> HTMLResponse:
    return HTMLResponse(render_index())


def register_page() -> HTMLResponse:
    return HTMLResponse(render_register())


def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


# -----------------------------------------------------------------------------
# App factory
# -----------------------------------------------------------------------------


def create_app(settings: Settings | None = None, store: RegistrationStore | None = None) -> FastAPI:
    """
    Build the ASGI app. Without an explicit store, one is built from settings
    (environment when settings is None).
    """
    if store is None:
        store = build_store(settings or get_settings())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("api_started", store=type(app.state.store).__name__)
        yield
        logger.info("api_stopped")

    app = FastAPI(
        title="Wallet Registry API",
        description="Register wallet addresses after verifying signed ownership challenges.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.middleware("http")(request_logging_middleware)
    app.add_exception_handler(RegistrationError, registration_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.add_api_route("/", index, methods=["GET"], response_class=HTMLResponse, include_in_schema=False)
    app.add_api_route(
        "/register", register_page, methods=["GET"], response_class=HTMLResponse, include_in_schema=False
    )
    app.add_api_route(
        "/register",
        register,
        methods=["POST"],
        response_model=MessageResponse,
        response_model_exclude_none=True,
        tags=["Registration"],
    )
    app.add_api_route("/health", health, methods=["GET"])
    return app


app = create_app()
