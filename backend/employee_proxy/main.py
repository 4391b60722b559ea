"""Employee Proxy API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EmployeeProxyError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The pooled upstream HTTP client is created on startup and closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Upstream client kept on app.state and injected through a dependency,
      never imported as a module-level singleton
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_proxy.api.error_handlers import register_error_handlers
from employee_proxy.api.routes import employees, health
from employee_proxy.config import get_settings
from employee_proxy.infrastructure.observability import setup_logging
from employee_proxy.infrastructure.upstream_client import (
    UpstreamEmployeeClient, build_http_client,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    http_client = build_http_client(settings)
    app.state.upstream_client = UpstreamEmployeeClient(
        http_client, settings.upstream_base_url,
    )
    logger.info(f"Employee Proxy API started (upstream: {settings.upstream_base_url})")
    try:
        yield
    finally:
        await http_client.aclose()
        app.state.upstream_client = None
        logger.info("Employee Proxy API shutting down")


app = FastAPI(
    title="Employee Proxy API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(employees.router)

register_error_handlers(app)
