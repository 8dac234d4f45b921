"""Wake dispatcher: resolve target, encode packets, send them over UDP."""

from __future__ import annotations

import logging
from typing import Callable

from wakeup.errors import ErrorKind, WakeError
from wakeup.schemas.host import Host
from wakeup.schemas.wake import WakeRequest, WakeResult
from wakeup.services.registry import HostRegistry
from wakeup.utils.validation import decode_hardware_address, validate_hardware_address_syntax
from wakeup.utils.wol import encode_magic_packet, send_packets

logger = logging.getLogger(__name__)

DIRECT_HOST_NAME = "<direct>"


class Dispatcher:
    """Runs one wake request through resolve -> validate -> encode -> transmit.

    The registry is only built when a name lookup needs it, and at most once
    per dispatcher.
    """

    def __init__(
        self,
        registry_loader: Callable[[], HostRegistry],
        dry_run: bool = False,
    ):
        self._registry_loader = registry_loader
        self._registry: HostRegistry | None = None
        self._dry_run = dry_run

    @property
    def registry(self) -> HostRegistry:
        if self._registry is None:
            self._registry = self._registry_loader()
        return self._registry

    def wake(self, request: WakeRequest) -> WakeResult:
        host = self.resolve(request)
        packets = [self._encode(mac) for mac in host.mac_addresses]

        logger.info(
            "Waking up < %s > (%d address(es)) via %s:%s",
            host.name, len(packets), request.destination_address, request.destination_port,
        )
        if self._dry_run:
            for mac in host.mac_addresses:
                logger.info("[DEV] Magic packet (not sent): %s", mac)
            sent = 0
        else:
            sent = send_packets(
                packets,
                address=request.destination_address,
                port=request.destination_port,
            )

        return WakeResult(
            host=host.name,
            mac_addresses=list(host.mac_addresses),
            destination_address=request.destination_address,
            destination_port=request.destination_port,
            packets_sent=sent,
            dry_run=self._dry_run,
        )

    def resolve(self, request: WakeRequest) -> Host:
        if request.host_name is not None:
            return self.registry.resolve_by_name(request.host_name)
        return Host(name=self._label_for(request.mac_address), mac_addresses=[request.mac_address])

    def _label_for(self, mac_address: str) -> str:
        """Known host name for a direct address, if the registry has one."""
        try:
            known = self.registry.find_by_mac(mac_address)
        except WakeError as e:
            if e.kind != ErrorKind.CONFIG_UNAVAILABLE:
                raise
            logger.info("Host registry unavailable, sending to address directly: %s", e.message)
            return DIRECT_HOST_NAME
        return known.name if known else DIRECT_HOST_NAME

    @staticmethod
    def _encode(mac_address: str) -> bytes:
        if not validate_hardware_address_syntax(mac_address):
            raise WakeError(
                ErrorKind.INVALID_MAC_FORMAT,
                f"Invalid format for mac address. Please use ':' as separator: {mac_address!r}",
            )
        return encode_magic_packet(decode_hardware_address(mac_address))
