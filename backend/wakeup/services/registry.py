"""Host registry: name -> Host lookup, loaded from the persisted hosts file."""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Iterator, Protocol

from pydantic import ValidationError

from wakeup.errors import ErrorKind, WakeError
from wakeup.schemas.host import Host, HostFile

logger = logging.getLogger(__name__)


class DuplicatePolicy(str, Enum):
    ERROR = "error"
    LAST_WINS = "last_wins"
    FIRST_WINS = "first_wins"


class ConfigSource(Protocol):
    """Tells the loader where persisted host definitions live."""

    def hosts_path(self) -> Path: ...


class DirectoryConfigSource:
    """Hosts file inside a fixed configuration directory."""

    def __init__(self, config_dir: str | Path, hosts_file: str = "hosts.json"):
        self._config_dir = Path(config_dir)
        self._hosts_file = hosts_file

    def hosts_path(self) -> Path:
        return self._config_dir / self._hosts_file

    def __repr__(self) -> str:
        return f"DirectoryConfigSource({str(self.hosts_path())!r})"


class HostRegistry:
    """Read-only mapping of host name to Host."""

    def __init__(self, hosts: dict[str, Host] | None = None):
        self._hosts = MappingProxyType(dict(hosts or {}))

    @classmethod
    def from_hosts(
        cls,
        hosts: Iterable[Host],
        policy: DuplicatePolicy = DuplicatePolicy.ERROR,
    ) -> HostRegistry:
        """Build a registry, resolving repeated names according to ``policy``."""
        mapping: dict[str, Host] = {}
        for host in hosts:
            if host.name in mapping:
                if policy == DuplicatePolicy.ERROR:
                    raise WakeError(
                        ErrorKind.CONFIG_UNAVAILABLE,
                        f"duplicate host name in configuration: {host.name!r}",
                    )
                logger.warning("Duplicate host %r (%s)", host.name, policy.value)
                if policy == DuplicatePolicy.FIRST_WINS:
                    continue
            mapping[host.name] = host
        return cls(mapping)

    def resolve_by_name(self, name: str) -> Host:
        """Exact, case-sensitive lookup."""
        try:
            return self._hosts[name]
        except KeyError:
            raise WakeError(ErrorKind.UNKNOWN_HOST, f"Not a known host: {name!r}") from None

    def find_by_mac(self, mac_address: str) -> Host | None:
        """First host carrying ``mac_address`` (case-insensitive), if any."""
        wanted = mac_address.lower()
        for host in self._hosts.values():
            if any(m.lower() == wanted for m in host.mac_addresses):
                return host
        return None

    def names(self) -> list[str]:
        return sorted(self._hosts)

    def hosts(self) -> list[Host]:
        return [self._hosts[name] for name in self.names()]

    def __contains__(self, name: object) -> bool:
        return name in self._hosts

    def __len__(self) -> int:
        return len(self._hosts)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())


def resolve_by_name(registry: HostRegistry, name: str) -> Host:
    return registry.resolve_by_name(name)


def load_registry(
    source: ConfigSource,
    policy: DuplicatePolicy = DuplicatePolicy.ERROR,
) -> HostRegistry:
    """Read and parse the hosts file named by ``source``.

    Raises:
        WakeError: CONFIG_UNAVAILABLE if the file is missing, unreadable,
            not UTF-8, not JSON, or does not match the hosts schema.
    """
    path = source.hosts_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise WakeError(ErrorKind.CONFIG_UNAVAILABLE, f"cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise WakeError(ErrorKind.CONFIG_UNAVAILABLE, f"{path} is not UTF-8 text: {e}") from e

    try:
        host_file = HostFile.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise WakeError(ErrorKind.CONFIG_UNAVAILABLE, f"{path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise WakeError(
            ErrorKind.CONFIG_UNAVAILABLE,
            f"invalid host definitions in {path}: {e.error_count()} error(s)\n{e}",
        ) from e

    registry = HostRegistry.from_hosts(host_file.hosts, policy)
    logger.debug("Loaded %d host(s) from %s", len(registry), path)
    return registry
