"""Hardware (MAC) and IPv4 address checks."""

from __future__ import annotations

import re

from wakeup.errors import ErrorKind, WakeError

MAC_PATTERN = re.compile(r"[0-9A-Fa-f]{2}(?::[0-9A-Fa-f]{2}){5}")
IPV4_PATTERN = re.compile(r"[0-9]+(?:\.[0-9]+){3}")

LIMITED_BROADCAST = "255.255.255.255"
MAC_LENGTH = 6


def validate_hardware_address_syntax(text: str) -> bool:
    """Return True for ``aa:bb:cc:dd:ee:ff`` style addresses (any case)."""
    return MAC_PATTERN.fullmatch(text) is not None


def validate_ipv4_syntax(text: str) -> bool:
    """Return True for four dot-separated decimal groups.

    Octet ranges are not checked here; ``999.1.1.1`` passes and is rejected
    later by the socket layer.
    """
    return IPV4_PATTERN.fullmatch(text) is not None


def decode_hardware_address(text: str) -> bytes:
    """Decode a colon-separated MAC address into exactly 6 bytes.

    Raises:
        WakeError: INVALID_MAC_FORMAT unless there are exactly 6 groups of
            two hex digits each.
    """
    groups = text.split(":")
    if len(groups) != MAC_LENGTH:
        raise WakeError(ErrorKind.INVALID_MAC_FORMAT, _mac_message(text))

    decoded = bytearray()
    for group in groups:
        # fromhex skips whitespace, a MAC group may not contain any
        if len(group) != 2 or any(c.isspace() for c in group):
            raise WakeError(ErrorKind.INVALID_MAC_FORMAT, _mac_message(text))
        try:
            decoded += bytes.fromhex(group)
        except ValueError:
            raise WakeError(ErrorKind.INVALID_MAC_FORMAT, _mac_message(text)) from None

    if len(decoded) != MAC_LENGTH:
        raise WakeError(ErrorKind.INVALID_MAC_FORMAT, _mac_message(text))
    return bytes(decoded)


def is_broadcast_address(address: str) -> bool:
    """Limited broadcast, or a directed broadcast ending in ``.255``."""
    if address == LIMITED_BROADCAST:
        return True
    return address.rsplit(".", 1)[-1] == "255"


def format_mac(mac_bytes: bytes) -> str:
    return ":".join(f"{b:02x}" for b in mac_bytes)


def _mac_message(text: str) -> str:
    return f"Invalid format for mac address. Please use ':' as separator: {text!r}"
