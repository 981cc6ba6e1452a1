"""Prometheus scrape endpoint."""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_gauge
from core.metrics import MasterGauge


router = APIRouter(tags=["Metrics"])


@router.get("/metrics")
def metrics(gauge: MasterGauge = Depends(get_gauge)):
    """Expose is_master and process metrics in the text exposition format."""
    payload, content_type = gauge.render()
    return Response(content=payload, media_type=content_type)
