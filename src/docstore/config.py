"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "docstore"
    data_file:     str = Field(default="documents.yaml", description="YAML seed file loaded into the store")
    output_format: str = Field(default="json", pattern="^(json|yaml)$", description="json or yaml")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from the config file, then DOCSTORE_<FIELD> env vars, then non-None CLI overrides.

    The config file is config.yaml in the working directory unless DOCSTORE_CONFIG
    names another one. A relative data_file given in that file is resolved
    against the file's directory; env and CLI values stay relative to the cwd.
    """
    config_path = Path(os.getenv("DOCSTORE_CONFIG") or CONFIG_FILE)
    data: dict[str, Any] = {}
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {config_path}: expected a mapping of settings")
        if data.get("data_file") and not Path(data["data_file"]).is_absolute():
            data["data_file"] = str(config_path.parent / data["data_file"])
    elif "DOCSTORE_CONFIG" in os.environ:
        raise ValueError(f"Config file not found: {config_path}")

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCSTORE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
