"""Wake relay — decode token, build magic packet, dispatch it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from wold.config import Endpoint
from wold.utils.eui48 import DecodeError, HardwareAddress, decode
from wold.utils.wol import TransportError, build_magic_packet, send_magic_packet

logger = logging.getLogger(__name__)


class WakeOutcome(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    FAILED = "failed"


@dataclass(frozen=True)
class WakeResult:
    outcome: WakeOutcome
    address: HardwareAddress | None = None
    error: TransportError | None = None


class WakeRelay:
    """Per-request pipeline bound to one broadcast destination.

    Holds no mutable state, so a single instance serves any number of
    concurrent requests.
    """

    def __init__(self, destination: Endpoint):
        self._destination = destination

    @property
    def destination(self) -> Endpoint:
        return self._destination

    async def wake(self, token: bytes) -> WakeResult:
        """Run one request through decode -> build -> dispatch, stopping at the first failure."""
        logger.debug("got: %r", token)
        try:
            address = decode(token)
        except DecodeError:
            return WakeResult(WakeOutcome.REJECTED)

        packet = build_magic_packet(address)

        try:
            await send_magic_packet(self._destination, packet)
        except TransportError as e:
            logger.warning("Failed to send magic packet for %s: %s", address, e)
            return WakeResult(WakeOutcome.FAILED, address=address, error=e)

        logger.info("Magic packet sent: %s -> %s", address, self._destination)
        return WakeResult(WakeOutcome.ACCEPTED, address=address)
