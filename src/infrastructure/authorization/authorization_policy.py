"""Catalog-backed implementation of AuthorizationProtocol.

The decision core. Everything here is a pure function of the identity, the
injected role resolver, and the immutable permission catalog: no I/O, no
locks, no logging. Auditing happens one layer up, in AuthorizationGuard.

Resource ownership rule (evaluated in order):
    1. identity.id == owner_id          -> allow (any role, any action)
    2. action == READ and role >= ADMIN -> allow
    3. role >= SUPER_ADMIN              -> allow
    4. otherwise                        -> deny

Admins get read-only visibility into other users' data. Only super admins
may write or delete it.

Reference:
    - src/domain/protocols/authorization_protocol.py
"""

from collections.abc import Callable, Iterable

from src.core.result import Failure, Result, Success
from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import Permission, ResourceAction, UserRole
from src.domain.errors import AuthorizationError
from src.domain.protocols import RoleResolverProtocol
from src.domain.value_objects import AuthorizationContext
from src.infrastructure.authorization.permission_catalog import PermissionCatalog


class AuthorizationPolicy:
    """RBAC decision engine.

    Three API tiers share the same predicates so they cannot drift:
        - predicates (``has_*``, ``role_at_least``, ``can_access_resource``)
        - ``check_*``: Result, treats ``None`` identity as AUTH_REQUIRED
        - ``require_*``: raises the Failure's AuthorizationError

    Attributes:
        _catalog: Immutable role -> permission table.
        _role_resolver: Strategy deriving a role from an identity.
    """

    def __init__(
        self,
        catalog: PermissionCatalog,
        role_resolver: RoleResolverProtocol,
    ) -> None:
        """Initialize policy with its collaborators.

        Args:
            catalog: Permission catalog built at startup.
            role_resolver: Role derivation strategy.
        """
        self._catalog = catalog
        self._role_resolver = role_resolver

    # =========================================================================
    # Role and permission lookup
    # =========================================================================

    def get_role(self, identity: AuthenticatedIdentity) -> UserRole:
        return self._role_resolver.resolve_role(identity)

    def get_permissions(self, identity: AuthenticatedIdentity) -> frozenset[Permission]:
        return self._catalog.permissions_for(self.get_role(identity))

    def describe(
        self, identity: AuthenticatedIdentity | None
    ) -> AuthorizationContext | None:
        """Resolve role and permissions for ``identity``.

        Returns:
            AuthorizationContext, or None when no identity is supplied.
        """
        if identity is None:
            return None
        role = self.get_role(identity)
        return AuthorizationContext(
            identity_id=identity.id,
            role=role,
            permissions=self._catalog.permissions_for(role),
        )

    # =========================================================================
    # Predicates
    # =========================================================================

    def has_permission(
        self, identity: AuthenticatedIdentity, permission: Permission
    ) -> bool:
        return permission in self.get_permissions(identity)

    def has_any_permission(
        self, identity: AuthenticatedIdentity, permissions: Iterable[Permission]
    ) -> bool:
        """True iff the role's permission set intersects ``permissions``.

        An empty ``permissions`` is never satisfied.
        """
        return not self.get_permissions(identity).isdisjoint(permissions)

    def has_all_permissions(
        self, identity: AuthenticatedIdentity, permissions: Iterable[Permission]
    ) -> bool:
        """True iff ``permissions`` is a subset of the role's permission set.

        An empty ``permissions`` is always satisfied.
        """
        return self.get_permissions(identity).issuperset(permissions)

    def role_at_least(self, identity: AuthenticatedIdentity, minimum: UserRole) -> bool:
        return self.get_role(identity).at_least(minimum)

    def is_admin(self, identity: AuthenticatedIdentity) -> bool:
        return self.role_at_least(identity, UserRole.ADMIN)

    def is_super_admin(self, identity: AuthenticatedIdentity) -> bool:
        return self.role_at_least(identity, UserRole.SUPER_ADMIN)

    def can_access_resource(
        self,
        identity: AuthenticatedIdentity,
        owner_id: int,
        action: ResourceAction,
    ) -> bool:
        action = ResourceAction(action)
        if identity.id == owner_id:
            return True
        role = self.get_role(identity)
        if action is ResourceAction.READ and role.at_least(UserRole.ADMIN):
            return True
        return role.at_least(UserRole.SUPER_ADMIN)

    # =========================================================================
    # Non-raising checks
    # =========================================================================

    def check_permission(
        self, identity: AuthenticatedIdentity | None, permission: Permission
    ) -> Result[None, AuthorizationError]:
        return _evaluate(
            identity,
            lambda i: self.has_permission(i, permission),
            lambda _: AuthorizationError.permission_denied(permission),
        )

    def check_any_permission(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> Result[None, AuthorizationError]:
        wanted = tuple(permissions)
        return _evaluate(
            identity,
            lambda i: self.has_any_permission(i, wanted),
            lambda _: AuthorizationError.any_permission_denied(wanted),
        )

    def check_all_permissions(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> Result[None, AuthorizationError]:
        wanted = tuple(permissions)

        def first_missing(known: AuthenticatedIdentity) -> AuthorizationError:
            granted = self.get_permissions(known)
            missing = next(p for p in wanted if p not in granted)
            return AuthorizationError.permission_denied(missing)

        return _evaluate(
            identity,
            lambda i: self.has_all_permissions(i, wanted),
            first_missing,
        )

    def check_role(
        self, identity: AuthenticatedIdentity | None, minimum: UserRole
    ) -> Result[None, AuthorizationError]:
        return _evaluate(
            identity,
            lambda i: self.role_at_least(i, minimum),
            lambda _: AuthorizationError.insufficient_role(minimum),
        )

    def check_resource_access(
        self,
        identity: AuthenticatedIdentity | None,
        owner_id: int,
        action: ResourceAction,
    ) -> Result[None, AuthorizationError]:
        return _evaluate(
            identity,
            lambda i: self.can_access_resource(i, owner_id, action),
            lambda _: AuthorizationError.resource_access_denied(
                owner_id, ResourceAction(action)
            ),
        )

    def check_self_or_admin(
        self, identity: AuthenticatedIdentity | None, target_user_id: int
    ) -> Result[None, AuthorizationError]:
        return _evaluate(
            identity,
            lambda i: i.id == target_user_id or self.is_admin(i),
            lambda _: AuthorizationError.self_or_admin_required(),
        )

    # =========================================================================
    # Raising assertions
    # =========================================================================

    def require_permission(
        self, identity: AuthenticatedIdentity | None, permission: Permission
    ) -> None:
        _raise_on_failure(self.check_permission(identity, permission))

    def require_any_permission(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> None:
        _raise_on_failure(self.check_any_permission(identity, permissions))

    def require_all_permissions(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> None:
        _raise_on_failure(self.check_all_permissions(identity, permissions))

    def require_role(
        self, identity: AuthenticatedIdentity | None, minimum: UserRole
    ) -> None:
        _raise_on_failure(self.check_role(identity, minimum))

    def require_admin(self, identity: AuthenticatedIdentity | None) -> None:
        _raise_on_failure(self.check_role(identity, UserRole.ADMIN))

    def require_super_admin(self, identity: AuthenticatedIdentity | None) -> None:
        _raise_on_failure(self.check_role(identity, UserRole.SUPER_ADMIN))

    def require_resource_access(
        self,
        identity: AuthenticatedIdentity | None,
        owner_id: int,
        action: ResourceAction,
    ) -> None:
        _raise_on_failure(self.check_resource_access(identity, owner_id, action))

    def require_self_or_admin(
        self, identity: AuthenticatedIdentity | None, target_user_id: int
    ) -> None:
        _raise_on_failure(self.check_self_or_admin(identity, target_user_id))


def _evaluate(
    identity: AuthenticatedIdentity | None,
    allowed: Callable[[AuthenticatedIdentity], bool],
    denial: Callable[[AuthenticatedIdentity], AuthorizationError],
) -> Result[None, AuthorizationError]:
    if identity is None:
        return Failure(error=AuthorizationError.auth_required())
    if allowed(identity):
        return Success(value=None)
    return Failure(error=denial(identity))


def _raise_on_failure(result: Result[None, AuthorizationError]) -> None:
    match result:
        case Failure(error=error):
            raise error
