"""
Vendor Marketplace - Backend API
Multi-tenant CRUD over vendors, products and orders behind bearer tokens

Run with:
    uvicorn app.main:create_app --factory
"""
import logging
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api import orders, products, vendors
from app.core.config import Settings, get_settings
from app.core.database import Database
from app.core.errors import InternalError, MarketplaceError
from app.core.logging_config import configure_logging
from app.core.middleware import RequestLoggingMiddleware
from app.core.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    """First validation error as a single readable line"""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location)
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


def register_exception_handlers(app: FastAPI) -> None:
    """Map the error taxonomy onto fixed status codes"""

    @app.exception_handler(MarketplaceError)
    async def marketplace_error_handler(request: Request, exc: MarketplaceError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.info(f"Validation error on {request.method} {request.url.path}: {message}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": message},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": InternalError.message},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The database handle, password hasher and token service are created here
    from settings and stored on app.state; nothing is module-global.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.AUTO_CREATE_SCHEMA:
            app.state.database.create_schema()
        logger.info(f"{settings.API_TITLE} {settings.API_VERSION} started")
        yield

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = Database(
        settings.DATABASE_URL,
        connect_timeout=settings.DATABASE_CONNECT_TIMEOUT,
    )
    app.state.password_hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    app.state.token_service = TokenService(
        settings.JWT_SECRET,
        algorithm=settings.JWT_ALGORITHM,
        expires_in=timedelta(hours=settings.TOKEN_EXPIRE_HOURS),
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    prefix = settings.API_PREFIX.rstrip("/")
    app.include_router(vendors.router, prefix=f"{prefix}/vendors", tags=["Vendors"])
    app.include_router(products.router, prefix=f"{prefix}/products", tags=["Products"])
    app.include_router(orders.router, prefix=f"{prefix}/orders", tags=["Orders"])

    @app.get("/health")
    def health():
        """Health check - reports database reachability"""
        database_ok = app.state.database.ping()
        return {
            "status": "healthy" if database_ok else "degraded",
            "service": "vendor-marketplace-api",
            "version": settings.API_VERSION,
            "database": "connected" if database_ok else "disconnected",
        }

    return app


if __name__ == "__main__":
    import uvicorn
    from dotenv import load_dotenv

    load_dotenv()
    settings = get_settings()
    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=settings.API_HOST,
        port=settings.API_PORT,
    )
