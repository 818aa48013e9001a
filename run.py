"""Entry point for the gox user directory service.

Reads the listen address from ``ADDR`` (default ``:1981``) and serves
the API with Uvicorn.  Other settings are documented in
``gox.app.core.config``.

Usage:
    python run.py
"""
import logging
import sys
from typing import Optional

from uvicorn import Config, Server

from gox.app.core.config import Settings, load_settings
from gox.app.core.logging_config import setup_logging
from gox.app.main import create_app

logger = logging.getLogger("gox.server")


def build_server(settings: Settings) -> Server:
    """Create an Uvicorn server for a freshly built application."""
    config = Config(
        app=create_app(settings),
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    return Server(config)


def main(settings: Optional[Settings] = None) -> int:
    """Serve until interrupted.  Returns the process exit status."""
    try:
        if settings is None:
            settings = load_settings()
        setup_logging(settings.log_level, settings.log_file)
        server = build_server(settings)
    except (ValueError, OSError) as exc:
        # Bad environment or unwritable LOG_FILE; settings may not exist yet.
        setup_logging()
        logger.error("failed to start server: %s", exc)
        return 1
    logger.info("server is running on %s", settings.server_address)
    try:
        server.run()
    except (OSError, SystemExit) as exc:
        # Uvicorn exits with SystemExit when it cannot bind the socket.
        logger.error("failed to start server on %s: %s", settings.server_address, exc)
        return 1
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
