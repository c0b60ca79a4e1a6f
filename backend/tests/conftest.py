"""Test fixtures — loopback UDP receiver and FastAPI test client."""

import socket

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wold.config import Settings
from wold.main import create_app


@pytest.fixture
def udp_receiver():
    """A UDP socket on loopback standing in for the broadcast segment."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    yield sock
    sock.close()


@pytest.fixture
def settings(udp_receiver) -> Settings:
    host, port = udp_receiver.getsockname()
    return Settings(broadcast_addr=f"{host}:{port}")


@pytest_asyncio.fixture
async def client(settings: Settings):
    """Provide an async test client whose relay targets ``udp_receiver``."""
    app = create_app(settings)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
