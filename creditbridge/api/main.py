"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from creditbridge.api.middleware import RequestIDMiddleware, MetricsMiddleware
from creditbridge.api.routes import analytics, scoring, stats, users
from creditbridge.infrastructure.database.session import init_db
from creditbridge.infrastructure.observability.logging import setup_logging
from creditbridge.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="CreditBridge API",
        description="Alternative-data credit scoring, analytics and loan offers",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
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

    app.include_router(users.router, prefix="/api", tags=["users"])
    app.include_router(scoring.router, prefix="/api", tags=["scoring"])
    app.include_router(analytics.router, prefix="/api", tags=["analytics"])
    app.include_router(stats.router, prefix="/api", tags=["stats"])

    return app


app = create_app()
