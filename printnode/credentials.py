"""
Credentials

Renders an authentication secret into the `user:secret` string used for
HTTP Basic authentication.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """Username/password credentials."""
    username: str
    password: str = field(default="", repr=False)

    def __str__(self) -> str:
        return f"{self.username}:{self.password}"

    def basic_auth_header(self) -> str:
        """Value for the Authorization header."""
        token = base64.b64encode(str(self).encode("utf-8")).decode("ascii")
        return f"Basic {token}"


class ApiKeyCredentials(Credentials):
    """An API key sent as the Basic auth username with an empty password."""

    def __init__(self, api_key: str) -> None:
        super().__init__(username=api_key, password="")

    def __repr__(self) -> str:
        return "ApiKeyCredentials(api_key=***)"
