"""Mini README: Centralised configuration models and helpers for VIP Finance.

Structure:
    * VipFinanceSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to pick the storage backend, the key namespace,
    the record id strategy and the default field-worker roster. Every value can
    be overridden with a ``VIPFINANCE_`` prefixed environment variable or a
    ``.env`` file. The configuration is cached so validation runs once per
    process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_ROSTER = ["Shlomo", "Avi", "Shaked", "Meir", "Mai", "Yaakov"]


class VipFinanceSettings(BaseSettings):
    """Runtime configuration for the finance dashboard back end."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the local JSON documents when using the local backend.",
    )
    storage_backend: str = Field(
        "memory",
        description="Persistence backend name: 'memory' (mock API) or 'local' (JSON documents).",
    )
    storage_namespace: str = Field(
        "vip-finance",
        description="Prefix for storage keys, producing keys such as 'vip-finance-income'.",
    )
    id_strategy: str = Field(
        "sequential",
        description="Record id assignment: 'sequential' integers or 'token' strings.",
    )
    seed_demo_data: bool = Field(
        True,
        description="Populate the memory backend with sample records on start-up.",
    )
    default_roster: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ROSTER),
        description="Field workers shown on a month that has no saved salary table.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the API service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the API service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "VIPFINANCE_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @validator("id_strategy")
    def _check_id_strategy(cls, value: str) -> str:
        normalised = value.strip().lower()
        if normalised not in {"sequential", "token"}:
            raise ValueError(f"Unsupported id strategy: {value}")
        return normalised

    @validator("default_roster")
    def _check_roster(cls, value: List[str]) -> List[str]:
        names = [name.strip() for name in value if name and name.strip()]
        if len(set(names)) != len(names):
            raise ValueError("Default roster names must be unique.")
        return names


@lru_cache()
def get_settings() -> VipFinanceSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return VipFinanceSettings()
