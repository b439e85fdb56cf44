"""Configuration management using Pydantic Settings.

Priority: explicit overrides > env vars (``EBAY_*``) > config file > defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import model_validator
from pydantic_settings import BaseSettings

PRODUCTION_URL = "https://svcs.ebay.com"
SANDBOX_URL = "https://svcs.sandbox.ebay.com"


class FindingConfig(BaseSettings):
    """Client configuration. ``app_id`` is the eBay application identifier."""

    # === Credentials ===
    app_id: str = ""

    # === Service ===
    global_id: str = "EBAY-US"
    service_version: str = "1.13.0"
    sandbox: bool = False
    base_url: str = ""

    # === Transport ===
    timeout: int = 30
    verify_ssl: bool = True

    model_config = {
        "env_prefix": "EBAY_",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def endpoint_url(self) -> str:
        """Explicit ``base_url``, else the sandbox or production host."""
        if self.base_url:
            return self.base_url
        return SANDBOX_URL if self.sandbox else PRODUCTION_URL

    @model_validator(mode="after")
    def validate_startup(self) -> "FindingConfig":
        errors: list[str] = []

        if not self.app_id.strip():
            errors.append("app_id is required (eBay application identifier)")

        if self.base_url:
            url = self.base_url.rstrip("/")
            self.base_url = url
            if not url.startswith(("http://", "https://")):
                errors.append(f"base_url must start with http:// or https://, got: {url}")

        if self.timeout <= 0:
            errors.append(f"timeout must be > 0, got: {self.timeout}")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n  - " + "\n  - ".join(errors)
            )

        return self


def load_config(overrides: dict[str, Any] | None = None) -> FindingConfig:
    """Load configuration with priority: overrides > env > config file > defaults."""
    values = dict(overrides or {})

    config_path = values.pop("_config_path", None) or os.environ.get("EBAY_FINDING_CONFIG")

    file_values: dict[str, Any] = {}
    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path) as f:
                file_values = json.load(f)
        else:
            raise FileNotFoundError(f"Config file not found: {config_path}")

    # Init kwargs outrank env vars in pydantic-settings, so file values are
    # only passed for keys the environment does not set.
    env_keys = {k.lower() for k in os.environ}
    file_values = {
        k: v for k, v in file_values.items()
        if f"ebay_{k}".lower() not in env_keys
    }

    return FindingConfig(**{**file_values, **values})
