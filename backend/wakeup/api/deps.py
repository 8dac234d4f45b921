"""FastAPI dependency injection: config source, registry and dispatcher."""

from __future__ import annotations

from fastapi import Depends, HTTPException

from wakeup.errors import ErrorKind, WakeError
from wakeup.services import build_registry, get_config_source, new_dispatcher
from wakeup.services.dispatcher import Dispatcher
from wakeup.services.registry import ConfigSource, HostRegistry

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.INVALID_MAC_FORMAT: 400,
    ErrorKind.INVALID_IP_FORMAT: 400,
    ErrorKind.UNKNOWN_HOST: 404,
    ErrorKind.CONFIG_UNAVAILABLE: 503,
    ErrorKind.PACKET_CONSTRUCTION: 500,
    ErrorKind.TRANSMISSION_ERROR: 502,
}


def http_error(error: WakeError) -> HTTPException:
    return HTTPException(
        ERROR_STATUS[error.kind],
        {"kind": error.kind.value, "message": error.message},
    )


def get_registry(source: ConfigSource = Depends(get_config_source)) -> HostRegistry:
    try:
        return build_registry(source)
    except WakeError as e:
        raise http_error(e)


def get_dispatcher(source: ConfigSource = Depends(get_config_source)) -> Dispatcher:
    return new_dispatcher(source)
