"""Client configuration using Pydantic with YAML support."""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from am_api.tls import TlsBackend

BASE_URL = "https://api.music.apple.com"
DEFAULT_STOREFRONT = "us"
DEFAULT_LOCALIZATION = "en-US"

STOREFRONT_PATTERN = re.compile(r"^[A-Za-z]{2}$")
LOCALIZATION_PATTERN = re.compile(r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$")
ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def normalize_storefront(value: str) -> str:
    """Validate a two-letter storefront country code and lowercase it."""
    if not isinstance(value, str) or not STOREFRONT_PATTERN.match(value):
        raise ValueError(f"Storefront must be a two-letter country code, got {value!r}")
    return value.lower()


def validate_localization(value: str) -> str:
    """Validate an RFC 4646 style language tag such as ``en-US``."""
    if not isinstance(value, str) or not LOCALIZATION_PATTERN.match(value):
        raise ValueError(f"Invalid localization tag: {value!r}")
    return value


class ClientConfig(BaseModel):
    """Apple Music API client configuration."""

    developer_token: str = ""
    media_user_token: str = ""
    storefront: str = DEFAULT_STOREFRONT
    localization: str = DEFAULT_LOCALIZATION
    tls_backend: TlsBackend = TlsBackend.BUNDLED
    timeout: float | None = None
    base_url: str = BASE_URL

    @field_validator("storefront")
    @classmethod
    def validate_storefront(cls, v: str) -> str:
        return normalize_storefront(v)

    @field_validator("localization")
    @classmethod
    def validate_localization_tag(cls, v: str) -> str:
        return validate_localization(v)

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    def __repr__(self) -> str:
        return (
            f"ClientConfig(storefront={self.storefront!r}, "
            f"localization={self.localization!r}, tls_backend={self.tls_backend.value!r})"
        )


def load_config(config_path: Path | str = "am-api.yaml") -> ClientConfig:
    """Load client configuration from a YAML file.

    ``${VAR}`` references inside string values are expanded from the
    environment, so tokens can be kept out of the file itself.
    """
    path = Path(config_path)

    if path.exists():
        with open(path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    yaml_config = _expand_env_vars(yaml_config)

    return ClientConfig(**yaml_config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand ${VAR} patterns in config values."""
    if isinstance(obj, str):
        for var in ENV_VAR_PATTERN.findall(obj):
            obj = obj.replace(f"${{{var}}}", os.environ.get(var, ""))
        return obj
    elif isinstance(obj, dict):
        return {k: _expand_env_vars(v) for k, v in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    return obj
