"""Wake-on-LAN (WOL) magic packet construction and UDP transmission."""

from __future__ import annotations

import logging
import socket
from typing import Iterable

from wakeup.errors import ErrorKind, WakeError
from wakeup.utils.validation import (
    MAC_LENGTH,
    format_mac,
    is_broadcast_address,
    validate_ipv4_syntax,
)

logger = logging.getLogger(__name__)

BROADCAST_ADDRESS = "255.255.255.255"
WOL_PORT = 9

SYNC_STREAM = b"\xff" * 6
MAC_REPETITIONS = 16
PACKET_LENGTH = len(SYNC_STREAM) + MAC_LENGTH * MAC_REPETITIONS  # 102


def encode_magic_packet(mac_bytes: bytes) -> bytes:
    """
    Build the magic packet for one hardware address.

    The sync stream lets a listening NIC find the pattern anywhere inside a
    frame payload; the 16 repetitions of the address stand in for a checksum.

    Args:
        mac_bytes: decoded hardware address, exactly 6 bytes

    Returns:
        102-byte packet: 6x 0xFF followed by 16x the address
    """
    if len(mac_bytes) != MAC_LENGTH:
        raise WakeError(
            ErrorKind.PACKET_CONSTRUCTION,
            f"hardware address must be {MAC_LENGTH} bytes, got {len(mac_bytes)}",
        )

    packet = SYNC_STREAM + bytes(mac_bytes) * MAC_REPETITIONS
    if len(packet) != PACKET_LENGTH:
        raise WakeError(
            ErrorKind.PACKET_CONSTRUCTION,
            f"magic packet is {len(packet)} bytes, expected {PACKET_LENGTH}",
        )
    return packet


def send_packets(
    packets: Iterable[bytes],
    address: str = BROADCAST_ADDRESS,
    port: int = WOL_PORT,
) -> int:
    """
    Send packets, in order, through a single UDP socket.

    Broadcast is enabled on the socket when ``address`` is a broadcast-class
    address. The socket is closed whether or not every send succeeds.

    Returns:
        number of packets sent
    """
    if not validate_ipv4_syntax(address):
        raise WakeError(ErrorKind.INVALID_IP_FORMAT, f"Invalid format for ip address: {address!r}")

    sent = 0
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            if is_broadcast_address(address):
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            for packet in packets:
                sock.sendto(packet, (address, port))
                sent += 1
                logger.debug("Magic packet for %s sent to %s:%s", format_mac(packet[6:12]), address, port)
    except OSError as e:
        raise WakeError(
            ErrorKind.TRANSMISSION_ERROR,
            f"sending to {address}:{port} failed after {sent} packet(s): {e}",
        ) from e
    return sent
