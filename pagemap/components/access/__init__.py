"""
Access package.
"""

from .permission_comp import PermissionChecker, actor_satisfies, expand_wildcard_permissions

__all__ = [
    "PermissionChecker",
    "actor_satisfies",
    "expand_wildcard_permissions",
]
