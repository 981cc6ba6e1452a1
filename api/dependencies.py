"""FastAPI dependencies.

Routes reach the exporter's configuration and gauge through app.state,
where create_app() places them.
"""

from fastapi import Request

from core.config import ExporterConfig
from core.metrics import MasterGauge


def get_config(request: Request) -> ExporterConfig:
    """Dependency returning the running exporter configuration."""
    return request.app.state.config


def get_gauge(request: Request) -> MasterGauge:
    """Dependency returning the published is_master gauge."""
    return request.app.state.gauge
