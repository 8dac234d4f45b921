"""Wake request/result schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from wakeup.utils.validation import validate_ipv4_syntax
from wakeup.utils.wol import BROADCAST_ADDRESS, WOL_PORT


class WakeRequest(BaseModel):
    """What to wake and where to send it. Exactly one of host_name / mac_address."""

    host_name: str | None = None
    mac_address: str | None = None
    destination_address: str = BROADCAST_ADDRESS
    destination_port: int = Field(default=WOL_PORT, ge=0, le=65535)

    @field_validator("destination_address")
    @classmethod
    def _check_ip(cls, value: str) -> str:
        if not validate_ipv4_syntax(value):
            raise ValueError("Invalid format for ip address")
        return value

    @model_validator(mode="after")
    def _one_target(self) -> "WakeRequest":
        if (self.host_name is None) == (self.mac_address is None):
            raise ValueError("exactly one of host_name or mac_address is required")
        return self


class WakeResult(BaseModel):
    host: str
    mac_addresses: list[str]
    destination_address: str
    destination_port: int
    packets_sent: int
    dry_run: bool = False


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    service: str = "wakeup"
