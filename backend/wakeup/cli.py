"""Command-line entry point: wake a machine by name or hardware address.

Usage:
    wakeup desktop
    wakeup -m aa:bb:cc:dd:ee:ff -i 192.168.1.255 -p 7
    wakeup --list
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from wakeup import __version__
from wakeup.config import settings
from wakeup.errors import WakeError
from wakeup.logging_config import setup_logging
from wakeup.schemas.wake import WakeRequest
from wakeup.services import build_registry, new_dispatcher
from wakeup.services.registry import DirectoryConfigSource
from wakeup.utils.validation import validate_ipv4_syntax
from wakeup.utils.wol import BROADCAST_ADDRESS, WOL_PORT

logger = logging.getLogger(__name__)


def _ip_address(value: str) -> str:
    if not validate_ipv4_syntax(value):
        raise argparse.ArgumentTypeError(f"Invalid format for ip address: {value!r}")
    return value


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {value!r}") from None
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range 0-65535: {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wakeup",
        description="Wake up a machine in the network with (a) magic (packet)",
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "hostname",
        nargs="?",
        help="name of the machine to wake up, as listed in the hosts file",
    )
    target.add_argument(
        "-m", "--mac",
        metavar="MAC_ADDRESS",
        help="hardware address to wake directly (aa:bb:cc:dd:ee:ff)",
    )
    parser.add_argument(
        "-i", "--ip",
        type=_ip_address,
        default=BROADCAST_ADDRESS,
        help=f"destination address (default: {BROADCAST_ADDRESS})",
    )
    parser.add_argument(
        "-p", "--port",
        type=_port,
        default=WOL_PORT,
        help=f"destination UDP port (default: {WOL_PORT})",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help=f"directory holding {settings.hosts_file} (default: {settings.config_dir})",
    )
    parser.add_argument("--list", action="store_true", help="list known hosts and exit")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="resolve and encode, but do not send anything",
    )
    parser.add_argument("--debug", action="store_true", help="print debug output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _list_hosts(source: DirectoryConfigSource) -> None:
    registry = build_registry(source)
    if not len(registry):
        print(f"No hosts defined in {source.hosts_path()}")
        return
    width = max(len(name) for name in registry.names())
    for host in registry.hosts():
        print(f"{host.name:<{width}}  {', '.join(host.mac_addresses)}")


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.list and args.hostname is None and args.mac is None:
        parser.error("one of the arguments hostname -m/--mac is required")

    setup_logging("DEBUG" if args.debug else settings.log_level)
    source = DirectoryConfigSource(args.config_dir or settings.config_dir, settings.hosts_file)
    logger.debug("args: %s, hosts file: %s", vars(args), source.hosts_path())

    try:
        if args.list:
            _list_hosts(source)
            return 0

        request = WakeRequest(
            host_name=args.hostname,
            mac_address=args.mac,
            destination_address=args.ip,
            destination_port=args.port,
        )
        dry_run = True if args.dry_run else None
        result = new_dispatcher(source, dry_run=dry_run).wake(request)
    except WakeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"error: invalid request: {e}", file=sys.stderr)
        return 1

    print(f"Waking up < {result.host} >")
    if result.dry_run:
        print(f"Dry run: {len(result.mac_addresses)} packet(s) not sent")
    else:
        print("Check back in a few minutes")
    return 0


if __name__ == "__main__":
    sys.exit(main())
