"""Wake request / response schemas."""

from typing import Any

from pydantic import BaseModel, field_validator


class WakeRequest(BaseModel):
    """Inbound wake request. ``target`` stays an opaque byte string here."""
    target: bytes

    @field_validator("target", mode="before")
    @classmethod
    def _target_bytes(cls, value: Any) -> Any:
        # Accept a JSON array of byte values as well as a string
        if isinstance(value, list):
            if not all(isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in value):
                raise ValueError("target array must contain byte values 0..255")
            return bytes(value)
        return value


class WakeResponse(BaseModel):
    """Magic packet handed to the network stack."""
    sent: bool = True
    target: str
    destination: str
