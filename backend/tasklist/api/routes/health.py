"""Health & Readiness Probes — liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 200 with the current task count

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from
      the load balancer; the in-memory store is always ready once imported
"""

import logging

from fastapi import APIRouter, Depends, status

from tasklist.config import get_settings
from tasklist.infrastructure.task_store import InMemoryTaskStore, get_task_store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": get_settings().app_name,
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(store: InMemoryTaskStore = Depends(get_task_store)):
    """Readiness probe — reports the store size."""
    return {"status": "ready", "checks": {"store": "healthy", "tasks": len(store)}}
