"""Tests for the wake pipeline — outcomes and short-circuiting."""

import errno
import logging
from unittest.mock import patch

import pytest

from wold.config import Endpoint
from wold.services.relay import WakeOutcome, WakeRelay
from wold.utils.wol import TransportError

DST = Endpoint("255.255.255.255", 9)


@pytest.fixture
def relay():
    return WakeRelay(DST)


@pytest.mark.asyncio
async def test_accepted(relay):
    with patch("wold.services.relay.send_magic_packet") as mock_send:
        result = await relay.wake(b"AA:BB:CC:DD:EE:FF")

    assert result.outcome is WakeOutcome.ACCEPTED
    assert str(result.address) == "aa:bb:cc:dd:ee:ff"
    assert result.error is None
    mock_send.assert_awaited_once_with(DST, bytes.fromhex("ff" * 6 + "aabbccddeeff" * 16))


@pytest.mark.asyncio
async def test_rejected_sends_nothing(relay):
    with patch("wold.services.relay.send_magic_packet") as mock_send:
        result = await relay.wake(b"not-a-mac")

    assert result.outcome is WakeOutcome.REJECTED
    assert result.address is None
    mock_send.assert_not_called()


@pytest.mark.asyncio
async def test_failed(relay):
    err = TransportError(DST, OSError(errno.EACCES, "Permission denied"))
    with patch("wold.services.relay.send_magic_packet", side_effect=err):
        result = await relay.wake(b"01:23:45:67:89:ab")

    assert result.outcome is WakeOutcome.FAILED
    assert result.error is err
    assert str(result.address) == "01:23:45:67:89:ab"


def test_destination(relay):
    assert relay.destination == DST


@pytest.mark.asyncio
async def test_token_logged_once(relay, caplog):
    with caplog.at_level(logging.DEBUG, logger="wold"):
        await relay.wake(b"not-a-mac")

    assert sum("not-a-mac" in r.getMessage() for r in caplog.records) == 1
