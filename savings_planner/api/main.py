"""FastAPI application factory"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from savings_planner.api.middleware import MetricsMiddleware, RequestIDMiddleware
from savings_planner.api.v1 import advisory, investments, learn, savings
from savings_planner.config import settings
from savings_planner.infrastructure.observability.logging import setup_logging

# Setup structured logging
setup_logging(settings.log_level)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject invalid bodies with 400 and the names of the offending fields"""
    fields = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"] if part != "body") or "body"
        if name not in fields:
            fields.append(name)

    return JSONResponse(
        status_code=400,
        content={"error": f"Missing or invalid required fields: {', '.join(fields)}", "fields": fields},
    )


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Savings Planner",
        description="Savings timelines, investment comparisons and financial health advisory",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(savings.router, prefix="/v1", tags=["savings"])
    app.include_router(investments.router, prefix="/v1", tags=["investments"])
    app.include_router(advisory.router, prefix="/v1", tags=["advisory"])
    app.include_router(learn.router, prefix="/v1", tags=["learn"])

    return app


app = create_app()
