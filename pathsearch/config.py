"""Validated settings for the search driver."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ConfigDict, Field

CONFIG_FILENAME = "search.toml"


def default_config_path() -> Path:
    """Return the per-user location of ``search.toml``."""

    return Path(user_config_dir("pathsearch")) / CONFIG_FILENAME


class SearchSettings(BaseModel):
    """Tunables shared by every search run with a driver."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_expansions: int | None = Field(default=None, ge=1)
    validate_costs: bool = Field(default=True)
    trace_updates: bool = Field(default=False)

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> SearchSettings:
        """Build settings from a parsed ``[search]`` table."""

        return cls.model_validate(data or {})


def load_settings(path: Path | str | None = None) -> SearchSettings:
    """Load settings from a TOML file.

    With no ``path`` the per-user config directory is consulted. A missing
    file yields the defaults; malformed TOML and invalid values propagate.
    """

    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        return SearchSettings()
    with config_path.open("rb") as handle:
        document = tomllib.load(handle)
    return SearchSettings.from_mapping(document.get("search"))


__all__ = ["CONFIG_FILENAME", "SearchSettings", "default_config_path", "load_settings"]
