# /regflow/routes/public.py

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from prometheus_client import generate_latest
from datetime import datetime

from regflow.config.settings import settings
from regflow.utils.dependencies import get_flow_engine, verify_metrics_access
from regflow.workflows.engine import FlowEngine

# Public endpoints that need no caller authentication: service banner,
# health probes and the optionally key-protected /metrics endpoint.

router = APIRouter()

@router.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "status": "operational",
        "environment": settings.environment
    }

@router.get("/health", summary="Basic Health Check")
async def health_check():
    """Basic health check for load balancers."""
    return {"status": "healthy", "timestamp": datetime.utcnow()}

@router.get("/health/ready", summary="Readiness Probe")
def readiness_check(engine: FlowEngine = Depends(get_flow_engine)):
    """Readiness probe: the definition store must answer a lookup."""
    try:
        engine.registry.ping()
        return {"status": "ready", "definition_store": settings.definition_store}
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Service not ready: {e}")

@router.get("/health/live", summary="Liveness Probe")
async def liveness_check():
    """Kubernetes/Docker liveness probe."""
    return {"status": "alive"}

@router.get("/metrics", tags=["Monitoring"])
async def metrics(_: bool = Depends(verify_metrics_access)):
    """Prometheus metrics endpoint."""
    return PlainTextResponse(generate_latest(), media_type="text/plain")
