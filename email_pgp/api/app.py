"""
FastAPI application factory.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from email_pgp.api.error_handlers import register_error_handlers
from email_pgp.api.routes import router
from email_pgp.config import EmailPgpConfig
from email_pgp.crypto.pgpy_backend import PgpyBackend
from email_pgp.crypto.protocol import PGPEngine
from email_pgp.services.pgp_service import PgpService

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    config: EmailPgpConfig = app.state.config
    logger.info("PGP server started", host=config.host, port=config.port)
    yield
    logger.info("PGP server shutting down")


def create_app(
    config: EmailPgpConfig | None = None,
    *,
    engine: PGPEngine | None = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Server configuration. Uses defaults if not provided.
        engine: PGP engine to use. Defaults to PgpyBackend; tests pass doubles.

    Returns:
        The configured application.
    """
    config = config or EmailPgpConfig()

    app = FastAPI(title="email-pgp", version="0.1.0", lifespan=_lifespan)
    app.state.config = config
    app.state.pgp_service = PgpService(
        engine or PgpyBackend(),
        timeout=config.engine_timeout,
        max_concurrent=config.max_concurrent_operations,
    )

    register_error_handlers(app)
    app.include_router(router)

    # Mounted after the API routes so /api/* takes precedence.
    if config.static_dir is not None:
        static_dir = Path(config.static_dir)
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("Static directory not found, not serving it", path=str(static_dir))

    return app
