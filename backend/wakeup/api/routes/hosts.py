"""Host registry routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from wakeup.api.deps import get_registry, http_error
from wakeup.errors import WakeError
from wakeup.schemas.host import Host
from wakeup.services.registry import HostRegistry

router = APIRouter()


@router.get("", response_model=list[Host])
def list_hosts(registry: HostRegistry = Depends(get_registry)):
    """All configured hosts, sorted by name."""
    return registry.hosts()


@router.get("/{name}", response_model=Host)
def get_host(name: str, registry: HostRegistry = Depends(get_registry)):
    try:
        return registry.resolve_by_name(name)
    except WakeError as e:
        raise http_error(e)
