# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Role declaration loader.

Role declarations are YAML mappings whose keys are ModelRoleConfig fields::

    mount: approle
    role_name: web
    bind_secret_id: false
    secret_id_num_uses: 0
    token_policies: [web-read]

Only keys present in the file count as declared, so a file can manage a
subset of a role's fields.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from approle_controller.errors import ModelRoleErrorContext, ProtocolConfigurationError
from approle_controller.models import ModelRoleConfig


def load_role_declaration(source: Path | str) -> ModelRoleConfig:
    """Load and validate a role declaration.

    Args:
        source: Path to a YAML file, or the YAML text itself

    Returns:
        Validated role configuration.

    Raises:
        ProtocolConfigurationError: If the file cannot be read or parsed, or
            the declaration fails validation
    """
    context = ModelRoleErrorContext(operation="load_declaration")
    try:
        text = source.read_text(encoding="utf-8") if isinstance(source, Path) else source
        raw = yaml.safe_load(text)
    except (OSError, yaml.YAMLError) as e:
        raise ProtocolConfigurationError(
            f"Failed to load role declaration: {type(e).__name__}: {e}",
            context=context,
        ) from e

    if not isinstance(raw, dict):
        raise ProtocolConfigurationError(
            "Role declaration must be a YAML mapping",
            context=context,
        )

    try:
        return ModelRoleConfig.model_validate(raw)
    except ValidationError as e:
        raise ProtocolConfigurationError(
            f"Invalid role declaration: {e}",
            context=context,
        ) from e


__all__: list[str] = ["load_role_declaration"]
