"""Configuration loading for the user data-access layer."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

import yaml

_PROJECT_ROOT = Path(__file__).resolve().parent.parent


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    database_path: Path

    @staticmethod
    def from_dict(data: Dict[str, object], base_path: Path | None = None) -> "Settings":
        """Create :class:`Settings` from the raw YAML document."""
        database = data.get("database") or {}
        if not isinstance(database, dict):
            raise ValueError("The 'database' section must be a mapping")

        raw_path = database.get("path")
        if not raw_path:
            return Settings(database_path=resolve_database_path(None))

        candidate = Path(str(raw_path)).expanduser()
        if not candidate.is_absolute() and base_path is not None:
            candidate = base_path / candidate
        return Settings(database_path=candidate.resolve(strict=False))


def resolve_database_path(env_value: Optional[str]) -> Path:
    """Resolve the on-disk path for the users database."""

    if env_value:
        return Path(env_value).expanduser().resolve(strict=False)
    return (_PROJECT_ROOT / "data" / "userdao.sqlite3").resolve(strict=False)


def resolve_config_path(env_value: Optional[str]) -> Path:
    """Resolve the path to the configuration file."""
    if env_value:
        return Path(env_value).expanduser().resolve(strict=False)
    return (_PROJECT_ROOT / "config" / "userdao.yaml").resolve(strict=False)


def load_settings(config_path: Path) -> Settings:
    """Load settings from a YAML file, falling back to defaults when it is absent."""
    if not config_path.exists():
        return Settings(database_path=resolve_database_path(None))

    with config_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    return Settings.from_dict(raw, base_path=config_path.parent)


__all__ = ["Settings", "load_settings", "resolve_config_path", "resolve_database_path"]
