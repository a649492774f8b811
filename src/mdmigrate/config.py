"""Application configuration: settings schema and mdmigrate.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "mdmigrate.yaml"


class Settings(BaseModel):
    source_dir:         str = Field(default="posts",        description="Root of the legacy markdown posts")
    dest_dir:           str = Field(default="content/blog", description="Root of the migrated slug directories")
    index_name:         str = Field(default="index.md",     description="File written inside each slug directory")
    description_length: int = Field(default=160, ge=4,     description="Max description length, ellipsis included")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from mdmigrate.yaml, then MDMIGRATE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDMIGRATE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
