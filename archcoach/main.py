"""
Main FastAPI application entry point.
Architecture Interview Coach API.
"""

import logging
from contextlib import asynccontextmanager

import sqlalchemy as sa
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from archcoach.api import api_router
from archcoach.config import get_settings
from archcoach.database import get_engine, init_db
from archcoach.errors import ConfigurationError
from archcoach.middleware.rate_limiter import limiter, rate_limit_exceeded_handler
from archcoach.services.component_catalog import load_evaluation_config

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Loads the evaluation configuration once and, when persistence is enabled,
    checks the database. A missing or malformed component catalog, or a
    missing DATABASE_URL, aborts startup.
    """
    app.state.evaluation_config = load_evaluation_config(
        settings.resolve_architecture_defs_path()
    )

    if settings.persistence_enabled:
        engine = get_engine()
        try:
            with engine.connect() as conn:
                conn.execute(sa.text("SELECT 1"))
            logger.info("Database connection verified successfully")
            init_db(engine)
            logger.info("Database tables initialized")
        except sa.exc.SQLAlchemyError as e:
            logger.error(f"Database connection failed: {e}")
            logger.error("Run 'alembic upgrade head' once the database is reachable")
    else:
        logger.info("Persistence disabled, projects are not stored")

    yield


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="""
    Practice backend for system design interviews.

    Features:
    - Interview a simulated stakeholder who holds hidden requirements
    - AI-powered evaluation of architecture diagrams using Claude
    - Save and reload practice projects
    """,
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS - build origins list dynamically
cors_origins = [
    settings.frontend_origin,
]

# Add localhost origins for development
if settings.debug:
    cors_origins.extend([
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ])

# Remove duplicates and empty strings
cors_origins = list(set(origin for origin in cors_origins if origin))

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Configure rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Misconfiguration discovered at first use (e.g. no API key)."""
    logger.error(f"Configuration error: {exc}")
    return JSONResponse(
        status_code=503,
        content={"status": "error", "message": str(exc)},
    )


# Include API routes
app.include_router(api_router)


@app.get("/")
async def root():
    """Root endpoint - basic liveness check."""
    return {
        "name": settings.app_name,
        "version": "1.0.0",
        "status": "healthy",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for load balancers."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import os
    import uvicorn
    port = int(os.getenv("PORT", "8080"))
    uvicorn.run(
        "archcoach.main:app",
        host="0.0.0.0",
        port=port,
        reload=settings.debug,
    )
