"""FastAPI application main entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from apps.api.v1.endpoints import cashiers, orders, products
from core.domain.exceptions import EntityNotFoundError
from core.infrastructure.database.config import close_database, init_database
from core.infrastructure.logging import LOG_FORMAT
from core.settings import get_app_settings

settings = get_app_settings()

# Setup logging
logging.basicConfig(level=settings.api.log_level, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


# =============================================================================
# LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema (and seed rows) on startup, release the pool on shutdown."""
    logger.info(f"🚀 {settings.api.title} starting up...")
    await init_database()
    yield
    await close_database()
    logger.info(f"👋 {settings.api.title} shutting down...")


app = FastAPI(
    title=settings.api.title,
    description="Corner store point-of-sale API: cashiers, products, categories and orders.",
    version=settings.api.version,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.api.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()
    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )
    return response


# Include routers
app.include_router(cashiers.router, prefix="/api")
app.include_router(products.router, prefix="/api")
app.include_router(products.categories_router, prefix="/api")
app.include_router(orders.router, prefix="/api")


# =============================================================================
# EXCEPTION HANDLERS
# =============================================================================

@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError) -> Response:
    """Handle id lookups that matched nothing.

    Args:
        request: FastAPI request
        exc: EntityNotFoundError exception

    Returns:
        Empty 404 response
    """
    logger.info(f"{request.method} {request.url.path}: {exc}")
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle general exceptions (integrity violations included).

    Args:
        request: FastAPI request
        exc: Exception

    Returns:
        JSONResponse with error details
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Health status
    """
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
