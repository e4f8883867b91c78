# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole Auth Backend Role Controller.

Reconciles one declared AppRole role against Vault through the create, read,
update, delete, exists and import lifecycle.

Lifecycle:
    UNMANAGED -> create/import -> SYNCED -> update* -> SYNCED -> delete -> UNMANAGED

    A read that finds the role gone also moves the controller back to
    UNMANAGED. That is how roles deleted outside the controller are
    reconciled away; it is not an error.

Call Sequencing:
    Every operation issues its Vault calls strictly in order and never
    overlaps them:

    - create: role write -> optional RoleID write -> read
    - update: role write -> optional RoleID write -> read
    - read: role read -> RoleID read

    Role writes are upserts, so re-running create or update after a failure
    converges. The controller never retries on its own. Creation is not
    atomic: when the RoleID write fails after the role write succeeded, the
    role exists with a Vault-generated RoleID and the error is raised.

Thread Safety:
    A controller owns exactly one role and holds unsynchronized state.
    Callers must not run operations for the same path concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping
from uuid import UUID, uuid4

from approle_controller.adapters import AdapterTokenFields
from approle_controller.enums import EnumRoleSyncState
from approle_controller.errors import (
    ModelRoleErrorContext,
    PathFormatError,
    ProtocolConfigurationError,
    RemoteDeleteError,
    RemoteReadError,
    RemoteWriteError,
    RoleControllerError,
    RoleNotFoundError,
)
from approle_controller.models import ModelRoleConfig, ModelRoleIdentity
from approle_controller.projectors import IDENTITY_FIELDS, ProjectorRoleFields
from approle_controller.protocols import ProtocolVaultLogicalClient
from approle_controller.utils import encode_role_path, is_not_found, role_id_path

logger = logging.getLogger(__name__)


class ControllerAppRoleRole:
    """Lifecycle controller for a single AppRole auth backend role.

    Local State:
        resource_id: Vault path of the managed role, None when unmanaged
        config: Configuration as of the last successful sync

    Example:
        >>> controller = ControllerAppRoleRole(HandlerVaultLogical.from_config(cfg))
        >>> identity = controller.create(
        ...     ModelRoleConfig(role_name="web", secret_id_num_uses=5)
        ... )
        >>> identity.path
        'auth/approle/role/web'
        >>> desired = controller.config.model_copy(update={"secret_id_ttl": 3600})
        >>> controller.update(desired, changed_fields={"secret_id_ttl"})
    """

    def __init__(
        self,
        client: ProtocolVaultLogicalClient,
        resource_id: str | None = None,
        projector: ProjectorRoleFields | None = None,
        token_fields: AdapterTokenFields | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            client: Vault logical API client
            resource_id: Path of an already managed role, if any. No Vault
                call is made; use read() to load its configuration.
            projector: Role field projector (default ProjectorRoleFields())
            token_fields: Token field adapter (default AdapterTokenFields())
        """
        self._client = client
        self._projector = projector or ProjectorRoleFields()
        self._token_fields = token_fields or AdapterTokenFields()
        self._resource_id: str | None = resource_id
        self._config: ModelRoleConfig | None = None

    @property
    def resource_id(self) -> str | None:
        """Return the Vault path of the managed role."""
        return self._resource_id

    @property
    def config(self) -> ModelRoleConfig | None:
        """Return a copy of the configuration as of the last sync."""
        return self._config.model_copy(deep=True) if self._config is not None else None

    @property
    def state(self) -> EnumRoleSyncState:
        """Return whether the controller currently manages a role."""
        if self._resource_id is None:
            return EnumRoleSyncState.UNMANAGED
        return EnumRoleSyncState.SYNCED

    # -------------------------------------------------------------------------
    # Lifecycle operations
    # -------------------------------------------------------------------------

    def create(
        self,
        config: ModelRoleConfig,
        correlation_id: UUID | None = None,
    ) -> ModelRoleIdentity:
        """Create (or overwrite) the role and sync local state from Vault.

        Args:
            config: Declared role configuration
            correlation_id: Optional correlation ID for tracing

        Returns:
            Identity of the created role.

        Raises:
            RemoteWriteError: If the role or RoleID write fails
            RemoteReadError: If the trailing read fails
        """
        corr_id = correlation_id or uuid4()
        path = encode_role_path(config.mount, config.role_name)

        payload = self._token_fields.project_fields(config, create=True)
        payload.update(self._projector.project_for_create(config))

        logger.debug(
            "Writing AppRole auth backend role",
            extra={"path": path, "operation": "create", "correlation_id": str(corr_id)},
        )
        self._write(path, payload, "create", corr_id)
        self._resource_id = path
        self._config = config.model_copy(deep=True)
        logger.debug(
            "Wrote AppRole auth backend role",
            extra={"path": path, "operation": "create", "correlation_id": str(corr_id)},
        )

        if config.is_set("role_id") and config.role_id is not None:
            self._write_role_id(path, config.role_id, "create", corr_id)

        self.read(correlation_id=corr_id)
        logger.info(
            "AppRole auth backend role created",
            extra={"path": path, "correlation_id": str(corr_id)},
        )
        return config.identity

    def read(self, correlation_id: UUID | None = None) -> ModelRoleConfig | None:
        """Refresh local state from Vault.

        Returns:
            The synced configuration, or None when the role no longer exists
            in Vault. In that case local state is cleared.

        Raises:
            ProtocolConfigurationError: If no role is managed
            PathFormatError: If the managed path is not a role path
            RemoteReadError: If a Vault read fails
        """
        corr_id = correlation_id or uuid4()
        path = self._require_resource_id("read", corr_id)
        identity = self._decode(path, "read", corr_id)

        logger.debug(
            "Reading AppRole auth backend role",
            extra={"path": path, "operation": "read", "correlation_id": str(corr_id)},
        )
        data = self._read(path, "read", corr_id)
        if data is None:
            logger.warning(
                "AppRole auth backend role not found, removing from state",
                extra={"path": path, "correlation_id": str(corr_id)},
            )
            self._clear()
            return None

        snapshot = self._config or ModelRoleConfig(
            mount=identity.mount, role_name=identity.role_name
        )
        config = snapshot.model_copy(deep=True)
        self._apply_response(config, snapshot, data)
        config.set_field("mount", identity.mount.strip("/"))
        config.set_field("role_name", identity.role_name.strip("/"))

        logger.debug(
            "Reading AppRole auth backend role RoleID",
            extra={"path": path, "operation": "read", "correlation_id": str(corr_id)},
        )
        role_id_data = self._read(role_id_path(path), "read", corr_id)
        if role_id_data is not None:
            config.apply_updates({"role_id": role_id_data.get("role_id")})

        self._config = config
        return config.model_copy(deep=True)

    def update(
        self,
        config: ModelRoleConfig,
        changed_fields: Collection[str] | None = None,
        correlation_id: UUID | None = None,
    ) -> ModelRoleConfig | None:
        """Write the changed fields of the role and sync local state.

        Args:
            config: Desired role configuration
            changed_fields: Fields to write. Defaults to the fields whose
                value differs from the last synced configuration.
            correlation_id: Optional correlation ID for tracing

        Returns:
            The synced configuration, or None if the role vanished.

        Raises:
            ProtocolConfigurationError: If no role is managed, or the desired
                configuration addresses a different role
            RemoteWriteError: If the role or RoleID write fails
            RemoteReadError: If the trailing read fails
        """
        corr_id = correlation_id or uuid4()
        path = self._require_resource_id("update", corr_id)
        identity = self._decode(path, "update", corr_id)
        if encode_role_path(config.mount, config.role_name) != identity.path:
            raise ProtocolConfigurationError(
                "mount and role_name cannot change on an existing role; "
                "delete and create it instead",
                context=ModelRoleErrorContext(
                    operation="update", path=path, correlation_id=corr_id
                ),
            )

        if changed_fields is None:
            changed = self._projector.changed_fields(self._config, config)
        else:
            changed = set(changed_fields) - IDENTITY_FIELDS

        payload = self._token_fields.project_fields(
            config, create=False, changed_fields=changed
        )
        payload.update(self._projector.project_for_update(config, changed))

        logger.debug(
            "Updating AppRole auth backend role",
            extra={
                "path": path,
                "operation": "update",
                "changed_fields": sorted(changed),
                "correlation_id": str(corr_id),
            },
        )
        self._write(path, payload, "update", corr_id)
        self._config = config.model_copy(deep=True)
        logger.debug(
            "Updated AppRole auth backend role",
            extra={"path": path, "operation": "update", "correlation_id": str(corr_id)},
        )

        if "role_id" in changed and config.role_id is not None:
            self._write_role_id(path, config.role_id, "update", corr_id)

        return self.read(correlation_id=corr_id)

    def delete(self, correlation_id: UUID | None = None) -> None:
        """Delete the role from Vault and clear local state.

        A role that is already gone counts as deleted.

        Raises:
            ProtocolConfigurationError: If no role is managed
            RemoteDeleteError: If Vault rejects the delete for any reason
                other than not-found
        """
        corr_id = correlation_id or uuid4()
        path = self._require_resource_id("delete", corr_id)

        logger.debug(
            "Deleting AppRole auth backend role",
            extra={"path": path, "operation": "delete", "correlation_id": str(corr_id)},
        )
        try:
            self._client.delete(path)
        except Exception as e:
            if not is_not_found(e):
                raise RemoteDeleteError(
                    f"Error deleting AppRole auth backend role {path!r}: "
                    f"{type(e).__name__}: {e}",
                    context=ModelRoleErrorContext(
                        operation="delete", path=path, correlation_id=corr_id
                    ),
                ) from e
            logger.debug(
                "AppRole auth backend role not found, removing from state",
                extra={"path": path, "correlation_id": str(corr_id)},
            )
        else:
            logger.debug(
                "Deleted AppRole auth backend role",
                extra={"path": path, "correlation_id": str(corr_id)},
            )
        self._clear()

    def exists(
        self,
        path: str | None = None,
        correlation_id: UUID | None = None,
    ) -> bool:
        """Check whether a role exists in Vault.

        Args:
            path: Role path to probe. Defaults to the managed role's path.
            correlation_id: Optional correlation ID for tracing

        Returns:
            True if Vault returns the role. False if it does not, or if
            there is neither a path argument nor a managed role.

        Raises:
            RemoteReadError: If the Vault read fails
        """
        corr_id = correlation_id or uuid4()
        target = path if path is not None else self._resource_id
        if target is None:
            return False

        logger.debug(
            "Checking if AppRole auth backend role exists",
            extra={"path": target, "operation": "exists", "correlation_id": str(corr_id)},
        )
        data = self._read(target, "exists", corr_id)
        logger.debug(
            "Checked if AppRole auth backend role exists",
            extra={"path": target, "exists": data is not None, "correlation_id": str(corr_id)},
        )
        return data is not None

    def import_role(
        self,
        raw_path: str,
        correlation_id: UUID | None = None,
    ) -> ModelRoleIdentity:
        """Adopt an existing role by its path and load its configuration.

        The path is kept verbatim as the resource ID. When the import fails,
        the previously managed role and its configuration are kept.

        Args:
            raw_path: Path of the role, ``auth/<mount>/role/<role_name>``
            correlation_id: Optional correlation ID for tracing

        Returns:
            Identity parsed from the path.

        Raises:
            PathFormatError: If the path is not a role path
            RoleNotFoundError: If there is no role at the path
            RemoteReadError: If a Vault read fails
        """
        corr_id = correlation_id or uuid4()
        identity = self._decode(raw_path, "import", corr_id)

        previous_resource_id, previous_config = self._resource_id, self._config
        self._resource_id = raw_path
        self._config = None
        try:
            if self.read(correlation_id=corr_id) is None:
                raise RoleNotFoundError(
                    f"Cannot import non-existent AppRole auth backend role {raw_path!r}",
                    context=ModelRoleErrorContext(
                        operation="import", path=raw_path, correlation_id=corr_id
                    ),
                )
        except RoleControllerError:
            # A failed import leaves the previously managed role in place.
            self._resource_id = previous_resource_id
            self._config = previous_config
            raise
        logger.info(
            "AppRole auth backend role imported",
            extra={"path": raw_path, "correlation_id": str(corr_id)},
        )
        return identity

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _apply_response(
        self,
        config: ModelRoleConfig,
        snapshot: ModelRoleConfig,
        data: Mapping[str, object],
    ) -> None:
        """Fold a role read response into config.

        Token fields go first so that deprecated-field resolution can clear
        the token field it shadows.
        """
        updates = self._token_fields.read_fields(data)
        updates.update(self._projector.resolve_on_read(snapshot, data))
        config.apply_updates(updates)

    def _require_resource_id(self, operation: str, correlation_id: UUID) -> str:
        if self._resource_id is None:
            raise ProtocolConfigurationError(
                f"Cannot {operation} AppRole auth backend role: no role is managed",
                context=ModelRoleErrorContext(
                    operation=operation, correlation_id=correlation_id
                ),
            )
        return self._resource_id

    def _decode(
        self, path: str, operation: str, correlation_id: UUID
    ) -> ModelRoleIdentity:
        context = ModelRoleErrorContext(
            operation=operation, path=path, correlation_id=correlation_id
        )
        try:
            identity = ModelRoleIdentity.from_path(path)
        except PathFormatError as e:
            raise PathFormatError(
                f"Invalid path {path!r} for AppRole auth backend role: {e.message}",
                path=path,
                context=context,
            ) from e
        # Components made only of slashes decode but trim to nothing.
        if not identity.mount.strip("/") or not identity.role_name.strip("/"):
            raise PathFormatError(
                f"Invalid path {path!r} for AppRole auth backend role: "
                "empty mount or role name",
                path=path,
                context=context,
            )
        return identity

    def _read(
        self, path: str, operation: str, correlation_id: UUID
    ) -> dict[str, object] | None:
        try:
            return self._client.read(path)
        except Exception as e:
            raise RemoteReadError(
                f"Error reading AppRole auth backend role {path!r}: "
                f"{type(e).__name__}: {e}",
                context=ModelRoleErrorContext(
                    operation=operation, path=path, correlation_id=correlation_id
                ),
            ) from e

    def _write(
        self,
        path: str,
        payload: Mapping[str, object],
        operation: str,
        correlation_id: UUID,
    ) -> None:
        try:
            self._client.write(path, payload)
        except Exception as e:
            raise RemoteWriteError(
                f"Error writing AppRole auth backend role {path!r}: "
                f"{type(e).__name__}: {e}",
                context=ModelRoleErrorContext(
                    operation=operation, path=path, correlation_id=correlation_id
                ),
            ) from e

    def _write_role_id(
        self, path: str, role_id: str, operation: str, correlation_id: UUID
    ) -> None:
        target = role_id_path(path)
        logger.debug(
            "Writing AppRole auth backend role RoleID",
            extra={"path": path, "operation": operation, "correlation_id": str(correlation_id)},
        )
        try:
            self._client.write(target, {"role_id": role_id})
        except Exception as e:
            raise RemoteWriteError(
                f"Error writing AppRole auth backend role {path!r} RoleID: "
                f"{type(e).__name__}: {e}",
                context=ModelRoleErrorContext(
                    operation=operation, path=target, correlation_id=correlation_id
                ),
            ) from e
        logger.debug(
            "Wrote AppRole auth backend role RoleID",
            extra={"path": path, "operation": operation, "correlation_id": str(correlation_id)},
        )

    def _clear(self) -> None:
        self._resource_id = None
        self._config = None


__all__: list[str] = ["ControllerAppRoleRole"]
