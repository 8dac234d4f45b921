"""wakeup configuration: Pydantic BaseSettings loaded from env / .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings shared by the CLI and the HTTP API."""

    app_name: str = "wakeup"
    debug: bool = False
    log_level: str = "INFO"

    # HTTP API
    host: str = "127.0.0.1"
    port: int = 8000
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:5173"]
    uvicorn_workers: int = 1

    # Host registry
    config_dir: str = ""  # empty -> ~/.config/wakeup
    hosts_file: str = "hosts.json"
    duplicate_host_policy: str = "error"  # error | last_wins | first_wins

    # Mode: dev = log packets instead of sending them
    mode: str = "prod"

    @property
    def is_dev_mode(self) -> bool:
        return self.mode == "dev"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="WAKEUP_",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and not value.startswith("["):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, list):
            return value
        return ["http://localhost:5173"]

    @field_validator("duplicate_host_policy")
    @classmethod
    def _check_policy(cls, value: str) -> str:
        value = value.lower()
        if value not in ("error", "last_wins", "first_wins"):
            raise ValueError(f"unknown duplicate host policy: {value}")
        return value

    @model_validator(mode="after")
    def _resolve_config_dir(self) -> "Settings":
        """Default to ~/.config/wakeup and make the path absolute."""
        if not self.config_dir:
            self.config_dir = str(Path.home() / ".config" / "wakeup")
        self.config_dir = str(Path(self.config_dir).expanduser().resolve())
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
