"""Role-based permission checks.

The caller's role is always passed in explicitly; nothing here reads
an ambient "current user" flag.
"""

from workshop_queue.utils.constants import (
    DEFAULT_ROLE_PERMISSIONS, FULL_ACCESS_ROLES, PERMISSION_KEYS,
    SETTINGS_PERMISSIONS,
)


def get_role_permissions(role: str) -> set[str]:
    """Get the effective permissions for a role.

    Full access roles get every permission. Unknown roles get none.
    """
    if role in FULL_ACCESS_ROLES:
        return set(PERMISSION_KEYS)
    return set(DEFAULT_ROLE_PERMISSIONS.get(role, []))


def has_permission(role: str, permission: str) -> bool:
    """Check if a role has a specific permission."""
    return permission in get_role_permissions(role)


def can_manage_settings(role: str) -> bool:
    """Check if a role may open the settings screen."""
    return all(has_permission(role, p) for p in SETTINGS_PERMISSIONS)
