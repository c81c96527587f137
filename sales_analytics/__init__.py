"""
Sales Analytics Application Factory
===================================

Pusat perakitan aplikasi FastAPI menggunakan Application Factory Pattern.
"""

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
import time
import uuid

from .routes import product_router, report_router
from .services.exceptions import (
    ValidationError, AuthenticationError, AuthorizationError
)
from .responses import APIResponse
from .config import settings

logger = logging.getLogger(__name__)

def setup_logging():
    """Konfigurasi root logger sesuai LOG_LEVEL."""
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

def setup_middleware(app: FastAPI):
    """Setup semua middleware aplikasi."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS
    )

    @app.middleware("http")
    async def add_request_id_and_process_time(request: Request, call_next):
        request_id = str(uuid.uuid4())
        start_time = time.time()

        request.state.request_id = request_id
        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Process-Time"] = str(process_time)
        response.headers["X-Request-ID"] = request_id
        return response

def setup_exception_handlers(app: FastAPI):
    """Setup semua custom exception handlers."""
    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=APIResponse.error(exc.message, exc.error_code, exc.details)
        )

    @app.exception_handler(AuthenticationError)
    async def authentication_exception_handler(request: Request, exc: AuthenticationError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=APIResponse.error(exc.message, exc.error_code),
            headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(AuthorizationError)
    async def authorization_exception_handler(request: Request, exc: AuthorizationError):
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content=APIResponse.error(exc.message, exc.error_code)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse.error("An unexpected error occurred", "INTERNAL_ERROR")
        )

def setup_routes(app: FastAPI):
    """Daftarkan (include) semua router ke aplikasi."""
    @app.get("/health", tags=["System"])
    async def health_check():
        return {"status": "healthy", "timestamp": time.time()}

    @app.get("/", tags=["System"])
    async def root():
        return {"message": "Sales Analytics API", "version": "1.0.0", "docs": "/docs"}

    app.include_router(report_router, prefix="/api/reports", tags=["Reports"])
    app.include_router(product_router, prefix="/api/products", tags=["Products"])

def create_app() -> FastAPI:
    """
    Application Factory: Membuat dan mengkonfigurasi instance FastAPI.
    """
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Sales Analytics API starting up")
        yield
        logger.info("Sales Analytics API shutting down")

    app = FastAPI(
        title="Sales Analytics API",
        description="Sales report dan inventory batch lookup",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    setup_middleware(app)
    setup_exception_handlers(app)
    setup_routes(app)

    logger.debug("FastAPI app created and configured")
    return app
