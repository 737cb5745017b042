from contextlib import asynccontextmanager
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from prometheus_fastapi_instrumentator import Instrumentator, metrics
from sqlalchemy import text
from sqlmodel import SQLModel, Session

from core.config import get_settings
from core.logging_config import setup_logging
from dependencies import get_engine, log_requests, setup_error_handlers
from routers import posts_router

# Initialize settings and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


def create_db_and_tables():
    SQLModel.metadata.create_all(get_engine())

def custom_generate_unique_id(route: APIRoute):
    return f"{route.tags[0] if route.tags else ''}-{route.name}"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Setup and cleanup tasks for the application lifecycle"""
    create_db_and_tables()
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} started")
    yield

async def health_check():
    """Health check endpoint for monitoring"""
    try:
        with Session(get_engine()) as session:
            session.execute(text("SELECT 1"))

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc),
            "version": settings.APP_VERSION
        }
    except Exception as e:
        logger.error(f"Health check failed: {str(e)}")
        return JSONResponse(status_code=503, content={"msg": "Service unavailable"})

def create_application() -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url=settings.DOCS_URL,
        redoc_url=settings.REDOC_URL,
        openapi_url=settings.OPENAPI_URL,
        openapi_tags=settings.OPENAPI_TAGS,
        license_info=settings.LICENSE_INFO,
        lifespan=lifespan,
        generate_unique_id_function=custom_generate_unique_id,
    )

    # Add middleware
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add error handlers
    setup_error_handlers(app)

    if settings.METRICS_ENABLED:
        Instrumentator().instrument(app)\
            .add(metrics.request_size())\
            .add(metrics.response_size())\
            .add(metrics.latency(buckets=[0.1, 0.5, 1.0, 2.0, 3.0, 4.0, 5.0]))\
            .add(metrics.requests(should_include_handler=True))\
            .expose(app, include_in_schema=True, should_gzip=True)

    # Include routers
    app.include_router(posts_router, prefix="/posts", tags=["posts"])
    app.add_api_route("/health", health_check, methods=["GET"], tags=["health"])

    return app

# Create the FastAPI application
app = create_application()

def main():
    """Main function for direct script execution"""
    create_db_and_tables()
    try:
        from seed_data import create_test_data
        create_test_data()
    except Exception as e:
        logger.error(f"Failed to create test data: {e}")

if __name__ == "__main__":
    main()
