"""Permission checkers standing in for an authenticated user."""

from collections.abc import Iterable


class FakeActor:
    """Holds an explicit set of permissions and roles."""

    def __init__(self, permissions: Iterable[str] = (), roles: Iterable[str] = ()) -> None:
        self.permissions = list(permissions)
        self.roles = list(roles)

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        return any(p in self.permissions for p in permissions)

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        return all(p in self.permissions for p in permissions)

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return any(r in self.roles for r in roles)

    def has_all_roles(self, roles: Iterable[str]) -> bool:
        return all(r in self.roles for r in roles)

    def all_granted_permissions(self) -> Iterable[str]:
        return list(self.permissions)


class BrokenActor(FakeActor):
    """Every capability check blows up."""

    def has_any_permission(self, permissions: Iterable[str]) -> bool:
        raise RuntimeError("permission backend down")

    def has_all_permissions(self, permissions: Iterable[str]) -> bool:
        raise RuntimeError("permission backend down")
