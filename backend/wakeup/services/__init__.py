"""Service wiring: config source singleton and per-request dispatchers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wakeup.config import settings

if TYPE_CHECKING:
    from wakeup.services.dispatcher import Dispatcher
    from wakeup.services.registry import ConfigSource, HostRegistry

logger = logging.getLogger(__name__)

_config_source: ConfigSource | None = None


def init_services(config_source: ConfigSource | None = None) -> None:
    """Create the config source shared by every request."""
    global _config_source

    from wakeup.services.registry import DirectoryConfigSource

    _config_source = config_source or DirectoryConfigSource(
        settings.config_dir, settings.hosts_file
    )
    logger.info("Host definitions: %s", _config_source.hosts_path())
    if settings.is_dev_mode:
        logger.warning("Dev mode (WAKEUP_MODE=dev): magic packets are logged, not sent")


def shutdown_services() -> None:
    global _config_source
    _config_source = None


def get_config_source() -> ConfigSource:
    if _config_source is None:
        raise RuntimeError("Services not initialized, call init_services() first")
    return _config_source


def build_registry(source: ConfigSource) -> HostRegistry:
    """Load the registry using the configured duplicate-name policy."""
    from wakeup.services.registry import DuplicatePolicy, load_registry

    return load_registry(source, DuplicatePolicy(settings.duplicate_host_policy))


def new_dispatcher(source: ConfigSource, dry_run: bool | None = None) -> Dispatcher:
    """Dispatcher for one invocation; the registry is read on first use."""
    from wakeup.services.dispatcher import Dispatcher

    if dry_run is None:
        dry_run = settings.is_dev_mode
    return Dispatcher(lambda: build_registry(source), dry_run=dry_run)
