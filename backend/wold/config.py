"""wold configuration — Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

import ipaddress
import socket
from functools import lru_cache
from typing import NamedTuple

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LISTEN_ADDR = "127.0.0.1:3000"
DEFAULT_BROADCAST_ADDR = "255.255.255.255:9"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(ValueError):
    """Malformed endpoint or other startup configuration."""


class Endpoint(NamedTuple):
    """IP literal + port. Usable directly as a socket address."""

    host: str
    port: int

    @property
    def family(self) -> socket.AddressFamily:
        if ipaddress.ip_address(self.host).version == 6:
            return socket.AF_INET6
        return socket.AF_INET

    def __str__(self) -> str:
        if self.family == socket.AF_INET6:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


def parse_endpoint(value: str) -> Endpoint:
    """Parse ``<ipv4>:<port>`` or ``[<ipv6>]:<port>``."""
    host, sep, port_str = value.strip().rpartition(":")
    if not sep or not host:
        raise ConfigError(f"Invalid endpoint '{value}': expected <address>:<port>")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
        try:
            addr = ipaddress.IPv6Address(host)
        except ValueError:
            raise ConfigError(f"Invalid endpoint '{value}': bad IPv6 address")
    else:
        try:
            addr = ipaddress.IPv4Address(host)
        except ValueError:
            raise ConfigError(f"Invalid endpoint '{value}': bad IPv4 address")

    if not (port_str.isascii() and port_str.isdigit()) or int(port_str) > 65535:
        raise ConfigError(f"Invalid endpoint '{value}': bad port")

    return Endpoint(str(addr), int(port_str))


class Settings(BaseSettings):
    """Process-wide settings, read once at startup and never mutated."""

    app_name: str = "wold"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Network
    listen_addr: str = DEFAULT_LISTEN_ADDR
    broadcast_addr: str = DEFAULT_BROADCAST_ADDR

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WOLD_",
        extra="ignore",
        frozen=True,
    )

    @field_validator("listen_addr", "broadcast_addr")
    @classmethod
    def _validate_endpoint(cls, value: str) -> str:
        return str(parse_endpoint(value))

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level '{value}': expected one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def listen(self) -> Endpoint:
        return parse_endpoint(self.listen_addr)

    @property
    def destination(self) -> Endpoint:
        return parse_endpoint(self.broadcast_addr)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
