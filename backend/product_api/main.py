"""FastAPI application bootstrap."""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from product_api import __version__
from product_api.api.routers import health, products
from product_api.core.config import Settings, get_settings
from product_api.core.errors import ProductError
from product_api.core.logging_config import setup_logging
from product_api.db.base import Base
from product_api.db.session import build_engine, build_session_factory

# Import models so Base.metadata knows them
import product_api.db.models  # noqa: F401

logger = logging.getLogger(__name__)

TAGS_METADATA = [
    {"name": "Produtos", "description": "A API para gerenciamento de produtos"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the products table and confirm the database is reachable.

    A failure here is logged and re-raised so the server never starts
    accepting requests it cannot serve.
    """
    engine = app.state.engine
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.error(f"Failed to connect to the database: {e}", exc_info=True)
        raise
    logger.info(f"Connected to the database ({engine.url.render_as_string()})")

    yield

    engine.dispose()
    logger.info("Database connections closed")


async def handle_product_error(request: Request, exc: ProductError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={exc.response_key: exc.message},
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed bodies with the same shape as missing-field errors."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return JSONResponse(
        status_code=422,
        content={"error": "; ".join(problems) or "Invalid request"},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate the FastAPI app bound to the database in ``settings``."""
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        openapi_tags=TAGS_METADATA,
        lifespan=lifespan,
    )

    engine = build_engine(settings.database_url)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    logger.info(f"[CORS] Allowed origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ProductError, handle_product_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)

    @app.get("/", summary="Boas-vindas")
    async def root() -> dict[str, str]:
        return {"message": "Bem-vindo à API de Produtos!"}

    app.include_router(health.router)
    app.include_router(products.router, prefix="/produtos", tags=["Produtos"])

    return app
