"""EUI-48 (MAC address) parsing from untrusted request input."""

from __future__ import annotations

from dataclasses import dataclass

ADDRESS_LENGTH = 6
TOKEN_LENGTH = 2 * ADDRESS_LENGTH + 5  # 12 hex digits + 5 separators
SEPARATORS = frozenset(b":-")


class DecodeError(ValueError):
    """Token is not a colon/hyphen separated hardware address."""


@dataclass(frozen=True)
class HardwareAddress:
    """A 6-octet hardware address. Any 6 octets are accepted."""

    octets: bytes

    def __post_init__(self) -> None:
        if len(self.octets) != ADDRESS_LENGTH:
            raise ValueError(f"Hardware address must be {ADDRESS_LENGTH} bytes, got {len(self.octets)}")

    def __bytes__(self) -> bytes:
        return self.octets

    def __str__(self) -> str:
        return ":".join(f"{b:02x}" for b in self.octets)


def _nibble(c: int) -> int | None:
    if 0x30 <= c <= 0x39:  # 0-9
        return c - 0x30
    if 0x41 <= c <= 0x46:  # A-F
        return c - 0x41 + 10
    if 0x61 <= c <= 0x66:  # a-f
        return c - 0x61 + 10
    return None


def decode(token: bytes | bytearray | memoryview) -> HardwareAddress:
    """
    Decode a token like ``aa:bb:cc:dd:ee:ff`` into a HardwareAddress.

    Each of the 5 gaps may independently be ``:`` or ``-``; hex digits are
    case-insensitive. Raises DecodeError on any deviation without saying
    which check failed.
    """
    s = bytes(token)
    if len(s) != TOKEN_LENGTH:
        raise DecodeError("Invalid hardware address")

    out = bytearray(ADDRESS_LENGTH)
    for i in range(ADDRESS_LENGTH):
        pos = 3 * i
        high = _nibble(s[pos])
        low = _nibble(s[pos + 1])
        if high is None or low is None:
            raise DecodeError("Invalid hardware address")
        # The last group is followed by end of input, checked by the length above
        if i < ADDRESS_LENGTH - 1 and s[pos + 2] not in SEPARATORS:
            raise DecodeError("Invalid hardware address")
        out[i] = high << 4 | low

    return HardwareAddress(bytes(out))
