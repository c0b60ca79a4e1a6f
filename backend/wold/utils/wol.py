"""Wake-on-LAN (WOL) magic packet construction and UDP dispatch."""

from __future__ import annotations

import asyncio
import logging
import socket

from wold.config import Endpoint
from wold.utils.eui48 import HardwareAddress

logger = logging.getLogger(__name__)

MAGIC_PACKET_HEADER = b"\xff" * 6
MAGIC_PACKET_REPEAT = 16
MAGIC_PACKET_SIZE = len(MAGIC_PACKET_HEADER) + 6 * MAGIC_PACKET_REPEAT  # 102


class TransportError(Exception):
    """The magic packet could not be handed to the network stack."""

    def __init__(self, destination: Endpoint, cause: OSError):
        super().__init__(f"{destination}: {cause.strerror or cause}")
        self.destination = destination
        self.cause = cause


def build_magic_packet(address: HardwareAddress) -> bytes:
    """Magic packet: 6x 0xFF + 16x MAC address."""
    packet = bytearray(MAGIC_PACKET_HEADER)
    for _ in range(MAGIC_PACKET_REPEAT):
        packet += address.octets
    return bytes(packet)


def _wildcard(family: socket.AddressFamily) -> str:
    return "::" if family == socket.AF_INET6 else "0.0.0.0"


def _send_datagram(destination: Endpoint, payload: bytes) -> None:
    family = destination.family
    with socket.socket(family, socket.SOCK_DGRAM) as sock:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
        sock.bind((_wildcard(family), 0))
        sock.sendto(payload, (destination.host, destination.port))


async def send_magic_packet(destination: Endpoint, payload: bytes) -> None:
    """
    Send one datagram carrying ``payload`` to ``destination``.

    A fresh broadcast-enabled socket bound to an ephemeral port is used per
    call. The blocking socket calls run in a worker thread so concurrent
    sends don't stall the event loop. There is no retry and no
    acknowledgement.

    Raises:
        TransportError: socket creation, bind or sendto failed.
    """
    try:
        await asyncio.to_thread(_send_datagram, destination, payload)
    except OSError as e:
        raise TransportError(destination, e) from e
