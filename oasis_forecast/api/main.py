"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from oasis_forecast.api.middleware import RequestIDMiddleware, MetricsMiddleware
from oasis_forecast.api.v1 import forecast, history, outlook, snapshot
from oasis_forecast.infrastructure.observability.logging import setup_logging
from oasis_forecast.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Oasis Forecast Service",
        description="Cash-flow forecast and financial-health scoring",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # History must register before the {snapshot_id} route it would otherwise shadow
    app.include_router(outlook.router, prefix="/v1", tags=["outlooks"])
    app.include_router(forecast.router, prefix="/v1", tags=["forecasts"])
    app.include_router(history.router, prefix="/v1", tags=["history"])
    app.include_router(snapshot.router, prefix="/v1", tags=["outlooks"])

    return app


app = create_app()
