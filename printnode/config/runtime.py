"""
Runtime Configuration

Client settings: API location, credentials, timeouts, pagination and
impersonation defaults.
"""

from __future__ import annotations

import copy
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from printnode.http.transport import DEFAULT_TIMEOUT

from .endpoints import DEFAULT_API_URL

load_dotenv()

ENV_PREFIX = "PRINTNODE_"

_DEFAULT_USER_AGENT = "printnode-python/0.1.0"


@dataclass
class ClientConfig:
    """
    Complete client configuration.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    api_url: str = DEFAULT_API_URL
    api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    offset: int = 0
    limit: int = 10
    child_account_id: Optional[str] = None
    child_account_email: Optional[str] = None
    user_agent: str = _DEFAULT_USER_AGENT
    proxy: Optional[str] = None
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        Supported variables:
        - PRINTNODE_API_URL: API base URL
        - PRINTNODE_API_KEY: API key
        - PRINTNODE_TIMEOUT: Per-call timeout in seconds
        - PRINTNODE_VERIFY_SSL: Verify TLS certificates (true/false)
        - PRINTNODE_CHILD_ACCOUNT_ID: Impersonate a child account by id
        - PRINTNODE_CHILD_ACCOUNT_EMAIL: Impersonate a child account by email
        - PRINTNODE_HTTP_PROXY: HTTP proxy URL
        - PRINTNODE_LOG_LEVEL: Log level
        """
        overrides: dict[str, Any] = {}

        if os.getenv(f"{ENV_PREFIX}API_URL"):
            overrides["api_url"] = os.getenv(f"{ENV_PREFIX}API_URL")
        if os.getenv(f"{ENV_PREFIX}API_KEY"):
            overrides["api_key"] = os.getenv(f"{ENV_PREFIX}API_KEY")
        if os.getenv(f"{ENV_PREFIX}TIMEOUT"):
            overrides["timeout"] = float(os.getenv(f"{ENV_PREFIX}TIMEOUT", DEFAULT_TIMEOUT))
        if os.getenv(f"{ENV_PREFIX}VERIFY_SSL"):
            overrides["verify_ssl"] = (
                os.getenv(f"{ENV_PREFIX}VERIFY_SSL", "true").lower() == "true"
            )
        if os.getenv(f"{ENV_PREFIX}CHILD_ACCOUNT_ID"):
            overrides["child_account_id"] = os.getenv(f"{ENV_PREFIX}CHILD_ACCOUNT_ID")
        if os.getenv(f"{ENV_PREFIX}CHILD_ACCOUNT_EMAIL"):
            overrides["child_account_email"] = os.getenv(f"{ENV_PREFIX}CHILD_ACCOUNT_EMAIL")
        if os.getenv(f"{ENV_PREFIX}HTTP_PROXY"):
            overrides["proxy"] = os.getenv(f"{ENV_PREFIX}HTTP_PROXY")
        if os.getenv(f"{ENV_PREFIX}LOG_LEVEL"):
            overrides["log_level"] = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")

        return overrides

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ClientConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ClientConfig":
        """Load configuration from a dictionary (unknown keys are ignored)."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})

    def with_env_overrides(self) -> "ClientConfig":
        """
        Return a new config with environment variable overrides applied.

        Allows loading from a file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        new_config = copy.deepcopy(self)
        for key, value in overrides.items():
            setattr(new_config, key, value)
        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary. The API key is redacted."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if data["api_key"]:
            data["api_key"] = "***"
        return data
