# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HashiCorp Vault Logical API Handler using the hvac client.

Implements ProtocolVaultLogicalClient on top of ``hvac.Client``'s generic
logical calls (``read``, ``write_data``, ``delete``).

Security Features:
    - SecretStr protection for tokens (prevents accidental logging)
    - Paths and operation names are logged; payloads and tokens never are
    - SSL verification enabled by default

Timeouts:
    Each call runs inside the hvac client's request timeout
    (``timeout_seconds`` in ModelVaultClientConfig). The handler does not
    retry; hvac exceptions propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import hvac
from pydantic import ValidationError

from approle_controller.errors import (
    ModelRoleErrorContext,
    ProtocolConfigurationError,
)
from approle_controller.models import ModelVaultClientConfig

logger = logging.getLogger(__name__)


class HandlerVaultLogical:
    """Vault logical API access through an hvac client.

    Example:
        >>> handler = HandlerVaultLogical.from_config(
        ...     {"url": "https://vault.example.com:8200", "token": "s.abc"}
        ... )
        >>> handler.write("auth/approle/role/web", {"secret_id_ttl": 600})
        >>> handler.read("auth/approle/role/web")
        {'secret_id_ttl': 600, ...}
    """

    def __init__(self, client: hvac.Client) -> None:
        """Initialize the handler around an existing hvac client.

        Args:
            client: Configured and authenticated hvac client
        """
        self._client = client

    @classmethod
    def from_config(
        cls, config: ModelVaultClientConfig | Mapping[str, object]
    ) -> HandlerVaultLogical:
        """Create a handler from connection settings.

        Args:
            config: ModelVaultClientConfig or a raw mapping to validate into one

        Returns:
            Handler wrapping a new hvac client.

        Raises:
            ProtocolConfigurationError: If the configuration is invalid
        """
        if not isinstance(config, ModelVaultClientConfig):
            try:
                config = ModelVaultClientConfig.model_validate(dict(config))
            except ValidationError as e:
                raise ProtocolConfigurationError(
                    f"Invalid Vault configuration: {e}",
                    context=ModelRoleErrorContext(operation="configure"),
                ) from e

        client = hvac.Client(
            url=config.url,
            token=config.token.get_secret_value() if config.token else None,
            namespace=config.namespace,
            verify=config.verify_ssl,
            timeout=config.timeout_seconds,
        )
        logger.debug(
            "Vault logical client created",
            extra={
                "url": config.url,
                "namespace": config.namespace,
                "timeout_seconds": config.timeout_seconds,
                "verify_ssl": config.verify_ssl,
            },
        )
        return cls(client)

    def read(self, path: str) -> dict[str, object] | None:
        """Read the data stored at a path.

        Returns:
            The response's ``data`` mapping, or None when Vault has nothing
            at the path.
        """
        try:
            response = self._client.read(path)
        except hvac.exceptions.InvalidPath:
            response = None
        if response is None:
            logger.debug("Vault read found nothing", extra={"path": path})
            return None
        data = response.get("data") if isinstance(response, Mapping) else None
        return dict(data) if isinstance(data, Mapping) else {}

    def write(self, path: str, data: Mapping[str, object]) -> None:
        """Create or overwrite the resource at a path."""
        self._client.write_data(path, data=dict(data))

    def delete(self, path: str) -> None:
        """Delete the resource at a path.

        Raises:
            hvac.exceptions.InvalidPath: If there is nothing at the path
        """
        self._client.delete(path)


__all__: list[str] = ["HandlerVaultLogical"]
