"""Health Probe — liveness endpoint.

Invariants:
    - GET /health always returns 200 with status "OK" and the current UTC time
"""

from fastapi import APIRouter, status

from userdocs.core.users import health_status
from userdocs.schemas.user import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health", response_model=HealthResponse, status_code=status.HTTP_200_OK,
)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return health_status()
