"""
Console entry point: serve the API with uvicorn.
"""

import uvicorn

from email_pgp.api.app import create_app
from email_pgp.config import EmailPgpConfig
from email_pgp.observability import configure_logging


def main() -> None:
    """Read configuration from the environment and run the server until stopped."""
    config = EmailPgpConfig.from_env()
    configure_logging(config.log_level, config.log_format)
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
