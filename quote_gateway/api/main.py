"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from quote_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from quote_gateway.api.v1 import quote, rate_cap
from quote_gateway.infrastructure.observability.logging import setup_logging
from quote_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Payment Plan Quote Gateway",
        description="Payment schedules, TAEG and usury-rate caps for consumer credit",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(quote.router, prefix="/v1", tags=["quotes"])
    app.include_router(rate_cap.router, prefix="/v1", tags=["rate-caps"])

    return app


app = create_app()
