"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
It is the only router mounted in the health-only configuration.
"""

from fastapi import APIRouter

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok", "service": "workout-store-api"}
