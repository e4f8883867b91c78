# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""AppRole role path encoding and decoding utilities.

Every AppRole role lives at a canonical Vault path derived from the auth mount
and the role name::

    auth/<mount>/role/<role_name>

The RoleID of a role is managed through a separate sub-path::

    auth/<mount>/role/<role_name>/role-id

Decoding is a structured parser rather than a regular expression. It accepts
exactly the paths matched by the anchored greedy patterns
``^auth/(.+)/role/.+$`` (mount) and ``^auth/.+/role/(.+)$`` (role name):

    - the path starts with ``auth/``
    - the separator is the last ``/role/`` that leaves a non-empty mount
      before it and a non-empty role name after it
    - the path contains no newline

Example:
    >>> encode_role_path("/approle/", "web/")
    'auth/approle/role/web'
    >>> decode_role_path("auth/approle/role/web")
    ('approle', 'web')
    >>> decode_role_path("auth/role/bar")  # Raises PathFormatError
"""

from __future__ import annotations

from approle_controller.errors import PathFormatError

ROLE_PATH_PREFIX: str = "auth/"
ROLE_PATH_SEPARATOR: str = "/role/"
ROLE_ID_SUFFIX: str = "/role-id"


def encode_role_path(mount: str, role_name: str) -> str:
    """Build the canonical role path from a mount and role name.

    Leading and trailing slashes are trimmed from both components.

    Args:
        mount: Auth mount the AppRole backend is enabled at.
        role_name: Name of the role.

    Returns:
        The canonical path ``auth/<mount>/role/<role_name>``.
    """
    return (
        ROLE_PATH_PREFIX
        + mount.strip("/")
        + ROLE_PATH_SEPARATOR
        + role_name.strip("/")
    )


def role_id_path(path: str) -> str:
    """Return the RoleID sub-path for a role path."""
    return path + ROLE_ID_SUFFIX


def decode_role_path(path: str) -> tuple[str, str]:
    """Split a role path into its mount and role name.

    Args:
        path: Path expected to match ``auth/<mount>/role/<role_name>``.

    Returns:
        Tuple of (mount, role_name) exactly as they appear in the path.

    Raises:
        PathFormatError: If the path does not match the template.
    """
    if not path.startswith(ROLE_PATH_PREFIX) or "\n" in path:
        raise PathFormatError(f"no backend found in path {path!r}", path=path)

    # The mount capture starts right after the prefix and must be non-empty,
    # so the separator can begin no earlier than one character past it.
    earliest = len(ROLE_PATH_PREFIX) + 1
    index = path.rfind(ROLE_PATH_SEPARATOR)
    while index >= earliest:
        mount = path[len(ROLE_PATH_PREFIX) : index]
        role_name = path[index + len(ROLE_PATH_SEPARATOR) :]
        if role_name:
            return mount, role_name
        index = path.rfind(ROLE_PATH_SEPARATOR, 0, index + len(ROLE_PATH_SEPARATOR) - 1)

    raise PathFormatError(f"no role found in path {path!r}", path=path)


__all__: list[str] = [
    "ROLE_ID_SUFFIX",
    "ROLE_PATH_PREFIX",
    "ROLE_PATH_SEPARATOR",
    "decode_role_path",
    "encode_role_path",
    "role_id_path",
]
