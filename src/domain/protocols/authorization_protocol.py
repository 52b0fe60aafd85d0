"""Authorization protocol (port) for RBAC access control.

Defines the decision API used by enforcement guards and request handlers.
All methods are synchronous and side-effect free: they read only the
immutable permission catalog and the identity passed in, so they are safe to
call concurrently from any number of threads or tasks.

Following hexagonal architecture:
- Domain defines the PORT (this protocol)
- Infrastructure provides the ADAPTER (AuthorizationPolicy)
- Application guards use the protocol

Usage:
    from src.domain.protocols import AuthorizationProtocol

    policy: AuthorizationProtocol = get_authorization_policy()

    if policy.has_permission(identity, Permission.VIEW_ANALYTICS):
        ...

    policy.require_resource_access(identity, owner_id, ResourceAction.DELETE)
"""

from collections.abc import Iterable
from typing import Protocol

from src.core.result import Result
from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import Permission, ResourceAction, UserRole
from src.domain.errors import AuthorizationError
from src.domain.value_objects import AuthorizationContext


class AuthorizationProtocol(Protocol):
    """Protocol for authorization decision engines.

    Predicates return bool and require an identity. ``check_*`` methods
    accept ``None`` (unauthenticated) and return a Result. ``require_*``
    methods raise AuthorizationError exactly when the matching ``check_*``
    returns Failure.
    """

    # Role and permission lookup

    def get_role(self, identity: AuthenticatedIdentity) -> UserRole: ...

    def get_permissions(
        self, identity: AuthenticatedIdentity
    ) -> frozenset[Permission]: ...

    def describe(
        self, identity: AuthenticatedIdentity | None
    ) -> AuthorizationContext | None: ...

    # Predicates

    def has_permission(
        self, identity: AuthenticatedIdentity, permission: Permission
    ) -> bool: ...

    def has_any_permission(
        self, identity: AuthenticatedIdentity, permissions: Iterable[Permission]
    ) -> bool: ...

    def has_all_permissions(
        self, identity: AuthenticatedIdentity, permissions: Iterable[Permission]
    ) -> bool: ...

    def role_at_least(
        self, identity: AuthenticatedIdentity, minimum: UserRole
    ) -> bool: ...

    def is_admin(self, identity: AuthenticatedIdentity) -> bool: ...

    def is_super_admin(self, identity: AuthenticatedIdentity) -> bool: ...

    def can_access_resource(
        self,
        identity: AuthenticatedIdentity,
        owner_id: int,
        action: ResourceAction,
    ) -> bool: ...

    # Non-raising checks

    def check_permission(
        self, identity: AuthenticatedIdentity | None, permission: Permission
    ) -> Result[None, AuthorizationError]: ...

    def check_any_permission(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> Result[None, AuthorizationError]: ...

    def check_all_permissions(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> Result[None, AuthorizationError]: ...

    def check_role(
        self, identity: AuthenticatedIdentity | None, minimum: UserRole
    ) -> Result[None, AuthorizationError]: ...

    def check_resource_access(
        self,
        identity: AuthenticatedIdentity | None,
        owner_id: int,
        action: ResourceAction,
    ) -> Result[None, AuthorizationError]: ...

    def check_self_or_admin(
        self, identity: AuthenticatedIdentity | None, target_user_id: int
    ) -> Result[None, AuthorizationError]: ...

    # Raising assertions

    def require_permission(
        self, identity: AuthenticatedIdentity | None, permission: Permission
    ) -> None: ...

    def require_any_permission(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> None: ...

    def require_all_permissions(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> None: ...

    def require_role(
        self, identity: AuthenticatedIdentity | None, minimum: UserRole
    ) -> None: ...

    def require_admin(self, identity: AuthenticatedIdentity | None) -> None: ...

    def require_super_admin(self, identity: AuthenticatedIdentity | None) -> None: ...

    def require_resource_access(
        self,
        identity: AuthenticatedIdentity | None,
        owner_id: int,
        action: ResourceAction,
    ) -> None: ...

    def require_self_or_admin(
        self, identity: AuthenticatedIdentity | None, target_user_id: int
    ) -> None: ...
