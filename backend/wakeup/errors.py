"""Error type shared by every stage of the wake pipeline."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_MAC_FORMAT = "invalid_mac_format"
    INVALID_IP_FORMAT = "invalid_ip_format"
    UNKNOWN_HOST = "unknown_host"
    CONFIG_UNAVAILABLE = "config_unavailable"
    PACKET_CONSTRUCTION = "packet_construction"
    TRANSMISSION_ERROR = "transmission_error"


class WakeError(Exception):
    """Failure of one wake invocation, tagged with its kind."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    def __repr__(self) -> str:
        return f"WakeError({self.kind.value!r}, {self.message!r})"
