"""Configuration models and YAML loader for the advocate directory search."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from src.core.schemas import DEFAULT_LIMIT


class DataConfig(BaseModel):
    """Where the advocate roster is loaded from."""

    path: str = "data/advocates.json"

    @field_validator("path")
    @classmethod
    def path_not_empty(cls, v: str) -> str:
        if not v.strip():
            msg = "data path must not be empty"
            raise ValueError(msg)
        return v.strip()


class ServerConfig(BaseModel):
    """HTTP server binding."""

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)


class SearchDefaults(BaseModel):
    """Defaults applied during request normalization."""

    default_limit: int = Field(default=DEFAULT_LIMIT, ge=1)


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    data: DataConfig = Field(default_factory=DataConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    search: SearchDefaults = Field(default_factory=SearchDefaults)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(raw)

    def validation_context(self) -> dict[str, Any]:
        """Context passed to SearchRequest validation."""
        return {"default_limit": self.search.default_limit}
