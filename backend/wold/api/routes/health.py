"""Health check."""

from fastapi import APIRouter, Depends

from wold import __version__
from wold.api.deps import get_relay
from wold.schemas.system import HealthResponse
from wold.services.relay import WakeRelay

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(relay: WakeRelay = Depends(get_relay)):
    return HealthResponse(version=__version__, destination=str(relay.destination))


@router.get("/ping")
async def ping():
    """Liveness only; does not touch the broadcast socket."""
    return {"status": "ok", "service": "wold"}
