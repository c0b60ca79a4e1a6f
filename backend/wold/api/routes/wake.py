"""Wake-on-LAN route — POST a hardware address, get a magic packet broadcast."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from wold.api.deps import get_relay
from wold.schemas.wake import WakeRequest, WakeResponse
from wold.services.relay import WakeOutcome, WakeRelay

router = APIRouter()


@router.post("/", response_model=WakeResponse)
async def wake_on_lan(req: WakeRequest, relay: WakeRelay = Depends(get_relay)):
    """Send a Wake-on-LAN packet for ``req.target`` to the configured destination."""
    result = await relay.wake(req.target)

    if result.outcome is WakeOutcome.REJECTED:
        raise HTTPException(400, "Invalid hardware address")
    if result.outcome is WakeOutcome.FAILED:
        raise HTTPException(500, f"Failed to send magic packet: {result.error}")

    return WakeResponse(target=str(result.address), destination=str(relay.destination))
