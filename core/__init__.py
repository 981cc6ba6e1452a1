"""VIP Exporter Core Package.

Provides the components behind the exporter:
- config: Centralized configuration and environment loading
- vip: Virtual IP ownership detection
- metrics: The is_master gauge and its registry
- updater: Periodic background detection
- log: Logging setup
"""

# Configuration
from core.config import (
    HTTP_HOST,
    HTTP_PORT,
    HTTP_TIMEOUT_SECONDS,
    SHUTDOWN_GRACE_SECONDS,
    DEFAULT_INTERVAL,
    ConfigError,
    ExporterConfig,
    load_config,
    parse_duration,
)

# VIP detection
from core.vip import (
    Interface,
    VipCheckError,
    check_vip,
    list_interfaces,
    to_ipv4,
)

# Metrics
from core.metrics import MasterGauge

# Updater
from core.updater import VipUpdater

# Logging
from core.log import configure_logging

__all__ = [
    # Config
    "HTTP_HOST",
    "HTTP_PORT",
    "HTTP_TIMEOUT_SECONDS",
    "SHUTDOWN_GRACE_SECONDS",
    "DEFAULT_INTERVAL",
    "ConfigError",
    "ExporterConfig",
    "load_config",
    "parse_duration",
    # VIP
    "Interface",
    "VipCheckError",
    "check_vip",
    "list_interfaces",
    "to_ipv4",
    # Metrics
    "MasterGauge",
    # Updater
    "VipUpdater",
    # Logging
    "configure_logging",
]
