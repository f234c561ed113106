"""
FastAPI Application Entry Point

El Sabor restaurant website - bilingual server-rendered pages with
reservation and contact forms that notify the restaurant by email.

Endpoints:
    - GET /, /carta, /galeria: Content pages
    - GET|POST /reserva: Table reservation form and submission
    - GET|POST /contacto: Contact form and submission
    - GET|POST /{lang}/...: Same pages in a supported language
    - GET /health: System health check

Author: El Sabor Web Team
Version: 1.0.0
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from elsabor.core.config import get_settings, setup_logging
from elsabor.core.exceptions import SiteError
from elsabor.middleware import SecurityHeadersMiddleware
from elsabor.rate_limits import setup_rate_limiter
from elsabor.routes import router
from elsabor.schemas import HealthResponse
from elsabor.services.notifications import get_mail_transport

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Languages: {settings.supported_languages_list} (default: {settings.default_language})")
    logger.info("=" * 60)

    transport = get_mail_transport()
    logger.info(f"✅ Mail Transport: {transport.provider_name}")

    if settings.use_real_services:
        missing = settings.validate_production_config()
        if missing:
            logger.warning(f"⚠️ Missing production config: {missing}")

    logger.info("✅ Application ready!")

    yield  # Application runs

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description="Bilingual website for the El Sabor restaurant.",
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url=None,
)

# Rate limiting, then security headers on the outside so 429s carry them too
setup_rate_limiter(app)
app.add_middleware(
    SecurityHeadersMiddleware,
    content_security_policy=settings.content_security_policy,
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="System Health Check",
)
async def health_check() -> HealthResponse:
    """Verify the mail transport is usable."""
    transport = get_mail_transport()
    transport_ok = await transport.health_check()

    return HealthResponse(
        status="operational" if transport_ok else "degraded",
        environment=settings.env_mode.value,
        mail_transport=f"{transport.provider_name}: {'healthy' if transport_ok else 'unhealthy'}",
        timestamp=datetime.now(),
    )


# Unprefixed routes use the default language; the same table is then
# served under every /{lang} prefix.
app.include_router(router, tags=["Pages"])
app.include_router(router, prefix="/{lang}", tags=["Pages"])


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(SiteError)
async def site_error_handler(request: Request, exc: SiteError) -> PlainTextResponse:
    """Turn a site error into its plain-text status response."""
    return PlainTextResponse(exc.public_message, status_code=exc.status_code)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return PlainTextResponse(
        str(exc) if settings.debug else "Error interno del servidor.",
        status_code=500,
    )


def run() -> None:
    """Serve the site with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
