"""Prometheus metrics published by the exporter.

The master/backup gauge lives in its own registry owned by a MasterGauge
instance, which is handed to both the updater and the HTTP layer.
"""

from typing import Optional

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Gauge,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
    generate_latest,
)


IS_MASTER_METRIC = "is_master"
IS_MASTER_HELP = "Is master node(1) or backup node(0)"


class MasterGauge:
    """Thread-safe holder of the is_master gauge.

    Starts at 0: a node is assumed to be backup until detection proves
    otherwise.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None, process_metrics: bool = True):
        self.registry = registry if registry is not None else CollectorRegistry()
        if process_metrics:
            ProcessCollector(registry=self.registry)
            PlatformCollector(registry=self.registry)
            GCCollector(registry=self.registry)
        self._gauge = Gauge(IS_MASTER_METRIC, IS_MASTER_HELP, registry=self.registry)
        self.reset()

    def reset(self) -> None:
        self._gauge.set(0)

    def set_master(self, is_master: bool) -> None:
        self._gauge.set(1 if is_master else 0)

    @property
    def value(self) -> int:
        return int(self.registry.get_sample_value(IS_MASTER_METRIC))

    def render(self) -> tuple[bytes, str]:
        """Render the registry in the Prometheus text exposition format.

        Returns:
            Tuple of (payload, content_type)
        """
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
