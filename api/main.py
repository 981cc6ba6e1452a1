"""FastAPI application configuration.

Main entry point for the VIP exporter. Serves a landing page, a health
check and the Prometheus metrics endpoint, while a background updater keeps
the is_master gauge in sync with VIP ownership.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core import configure_logging
from core.config import (
    HTTP_HOST,
    HTTP_PORT,
    HTTP_TIMEOUT_SECONDS,
    SHUTDOWN_GRACE_SECONDS,
    ConfigError,
    ExporterConfig,
    load_config,
)
from core.metrics import MasterGauge
from core.updater import VipUpdater
from api.routes import metrics_router, status_router


logger = logging.getLogger(__name__)


def create_app(
    config: ExporterConfig,
    gauge: Optional[MasterGauge] = None,
    updater: Optional[VipUpdater] = None,
) -> FastAPI:
    """Build the exporter application.

    Args:
        config: Probe configuration
        gauge: Gauge to publish (a fresh one is created if omitted)
        updater: Background updater (built from config and gauge if omitted)

    Returns:
        FastAPI application whose lifespan runs the updater
    """
    if gauge is None:
        gauge = MasterGauge()
    if updater is None:
        updater = VipUpdater(config.vip, gauge, config.interval)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Run the updater for as long as the server is up."""
        updater.start()
        yield
        updater.stop(timeout=SHUTDOWN_GRACE_SECONDS)

    app = FastAPI(
        title="VIP Exporter",
        description="Reports whether this node holds the virtual IP (master) or not (backup).",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.gauge = gauge
    app.state.updater = updater

    app.include_router(status_router)
    app.include_router(metrics_router)
    return app


def main() -> None:
    """Load configuration and serve until SIGINT/SIGTERM."""
    configure_logging()

    try:
        config = load_config()
    except ConfigError as e:
        logger.critical("Invalid configuration: %s", e)
        sys.exit(1)

    logger.info("Using config: interval=%ss, vip=%r", config.interval, config.vip)
    if not config.detection_enabled:
        logger.warning("VIP is not set, detection disabled; is_master stays 0")

    server = uvicorn.Server(uvicorn.Config(
        create_app(config),
        host=HTTP_HOST,
        port=HTTP_PORT,
        timeout_keep_alive=HTTP_TIMEOUT_SECONDS,
        timeout_graceful_shutdown=SHUTDOWN_GRACE_SECONDS,
        log_config=None,
    ))
    logger.info("Starting web server on port %d", HTTP_PORT)
    server.run()
    logger.info("Shutting down")


if __name__ == "__main__":
    main()
