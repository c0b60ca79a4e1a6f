"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from wold.services.relay import WakeRelay


def get_relay(request: Request) -> WakeRelay:
    return request.app.state.relay
