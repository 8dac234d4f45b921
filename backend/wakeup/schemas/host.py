"""Host definitions as stored in the hosts file."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Host(BaseModel):
    """One machine, reachable through one or more network interfaces."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    mac_addresses: list[str] = Field(min_length=1)
    ip_address: str | None = None  # informational, never a send target


class HostFile(BaseModel):
    """Top-level layout of ``hosts.json``."""

    hosts: list[Host] = []
