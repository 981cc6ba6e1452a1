"""Landing page and health endpoints.

Public endpoints for humans and load balancer probes.
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from api.dependencies import get_config, get_gauge
from api.models import HealthResponse
from core.config import ExporterConfig
from core.metrics import MasterGauge


router = APIRouter(tags=["Status"])

LANDING_PAGE = """<html>
<head><title>Keepalived-IPVS Checker</title></head>
<body>
<h1>Keepalived-IPVS Checker</h1>
<p><a href="/metrics">Metrics</a></p>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
async def root():
    """Static landing page linking to the metrics endpoint."""
    return LANDING_PAGE


@router.get("/health", response_model=HealthResponse)
async def health_check(
    config: ExporterConfig = Depends(get_config),
    gauge: MasterGauge = Depends(get_gauge),
):
    """Detailed health check including the current master/backup role."""
    return HealthResponse(
        timestamp=datetime.now(),
        vip=config.vip,
        detection_enabled=config.detection_enabled,
        is_master=gauge.value == 1,
    )
