# ============================================================================
# FILE: teaching_app/__init__.py
# ============================================================================
"""Teaching Server API - Application Factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import httpx
import logging

from teaching_app.core.config import Settings, settings as default_settings
from teaching_app.core.errors import register_exception_handlers
from teaching_app.core.payment_gateway import PaymentGateway
from teaching_app.core.store import Store
from teaching_app.api.routes import router as api_router
from teaching_app.schemas.common import HealthCheckResponse

# Configure logging
logging.basicConfig(
    level=getattr(logging, default_settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application"""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown"""
        # Startup
        logger.info("Starting application...")
        store = Store.connect(settings)
        try:
            await store.ping()
        except Exception as e:
            logger.error(f"Failed to initialize database client: {e}")
            store.close()
            raise

        app.state.store = store
        app.state.gateway = PaymentGateway(
            httpx.AsyncClient(timeout=settings.PAYMENT_TIMEOUT_SECONDS),
            secret_key=settings.PAYMENT_METHOD_SECRET,
            api_url=settings.STRIPE_API_URL,
        )
        logger.info(f"Teaching server is running on port {settings.PORT}")

        yield

        # Shutdown
        try:
            await app.state.gateway.aclose()
        except Exception as e:
            logger.error(f"Error closing payment gateway client: {e}")
        try:
            store.close()
        except Exception as e:
            logger.error(f"Error closing database client: {e}")

    app = FastAPI(
        title=settings.API_TITLE,
        description="Classes, selections, users and payments for the teaching platform",
        version=settings.API_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(api_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "Teaching server is running"

    # Health check endpoint
    @app.get("/health", response_model=HealthCheckResponse)
    async def health_check():
        return HealthCheckResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            version=settings.API_VERSION,
        )

    logger.info("FastAPI application created")
    return app

# Create app instance
app = create_app()
