"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from meridian_cashflow.api.middleware import RequestIDMiddleware, MetricsMiddleware
from meridian_cashflow.api.v1 import cashflow, demo, history
from meridian_cashflow.infrastructure.database.models import Base
from meridian_cashflow.infrastructure.database.session import engine
from meridian_cashflow.infrastructure.observability.logging import setup_logging
from meridian_cashflow.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Meridian Cash Flow",
        description="Transaction analytics: income streams, expense categories, risk and cash flow summaries",
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
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(cashflow.router, prefix="/v1", tags=["cashflow"])
    app.include_router(demo.router, prefix="/v1", tags=["demo"])

    return app


# Snapshot table for the configured database
Base.metadata.create_all(bind=engine)

app = create_app()
