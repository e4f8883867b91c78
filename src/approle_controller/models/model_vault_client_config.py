# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Vault Client Configuration Model.

Security Note:
    The token field uses SecretStr to prevent accidental logging of
    sensitive credentials. Tokens should come from the environment
    (VAULT_TOKEN), never from role declaration files.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ModelVaultClientConfig(BaseModel):
    """Connection settings for the Vault logical API client.

    Attributes:
        url: Vault server URL (e.g., "https://vault.example.com:8200")
        token: Vault authentication token (SecretStr)
        namespace: Vault namespace for Vault Enterprise (optional)
        timeout_seconds: Per-request timeout in seconds (1.0-300.0, default 30.0)
        verify_ssl: Whether to verify SSL certificates (default True)

    Example:
        >>> config = ModelVaultClientConfig(
        ...     url="https://vault.example.com:8200",
        ...     token=SecretStr("s.1234567890abcdefghijklmnopqrstuv"),
        ... )
        >>> print(config.token)
        **********
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    url: str = Field(
        min_length=1,
        description="Vault server URL (e.g., 'https://vault.example.com:8200')",
    )
    token: SecretStr | None = Field(
        default=None,
        description="Vault authentication token",
    )
    namespace: str | None = Field(
        default=None,
        description="Vault namespace for Vault Enterprise",
    )
    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Per-request timeout in seconds",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Whether to verify SSL certificates",
    )


__all__: list[str] = ["ModelVaultClientConfig"]
