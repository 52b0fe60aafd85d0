"""Authorization enforcement guards.

Boundary-level assertions built on AuthorizationPolicy. Each guard:
    1. Fails with AUTH_REQUIRED (401) when no identity is supplied.
    2. Extracts and validates resource identifiers (400 class) where needed.
    3. Delegates the yes/no decision to the policy (403 class).
    4. Records an AuthorizationEvaluated event, granted or denied.
    5. Raises AuthorizationError on denial, returns normally otherwise.

The guard never loads resources. Ownership is checked against an id taken
from the request or against a resource object the caller already loaded.

Usage:
    from src.core.container import get_authorization_guard

    guard = get_authorization_guard()
    guard.require_permission(identity, Permission.MANAGE_USERS)
    owner_id = guard.validate_resource_ownership(
        identity, params, action=ResourceAction.WRITE
    )

Reference:
    - src/infrastructure/authorization/authorization_policy.py
    - src/application/services/resource_identifier.py
"""

from collections.abc import Iterable, Mapping
from typing import Any

from src.application.services.resource_identifier import (
    RequestParameters,
    extract_owner_id,
    parse_identifier,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import (
    DEFAULT_IDENTIFIER_SOURCES,
    AuditAction,
    IdentifierSource,
    Permission,
    ResourceAction,
    UserRole,
)
from src.domain.errors import AuthorizationError
from src.domain.events import AuthorizationEvaluated
from src.domain.protocols import AuthorizationProtocol, LoggerProtocol
from src.domain.value_objects import AuthorizationContext, AuthorizationDecision
from src.infrastructure.audit.audit_logger import AuditLogger


class AuthorizationGuard:
    """Audited enforcement guards over an AuthorizationProtocol.

    Attributes:
        _policy: Decision engine.
        _audit_logger: Non-blocking audit dispatcher.
        _logger: Logger bound with ``component="authorization_guard"``.
    """

    def __init__(
        self,
        policy: AuthorizationProtocol,
        audit_logger: AuditLogger,
        logger: LoggerProtocol,
    ) -> None:
        self._policy = policy
        self._audit_logger = audit_logger
        self._logger = logger.bind(component="authorization_guard")

    def describe(
        self, identity: AuthenticatedIdentity | None
    ) -> AuthorizationContext | None:
        """Role and permissions of ``identity`` (None when unauthenticated)."""
        return self._policy.describe(identity)

    # =========================================================================
    # Permission and role guards
    # =========================================================================

    def require_permission(
        self, identity: AuthenticatedIdentity | None, permission: Permission
    ) -> None:
        self._enforce(
            f"require_permission:{permission.value}",
            identity,
            self._policy.check_permission(identity, permission),
        )

    def require_any_permission(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> None:
        wanted = tuple(permissions)
        self._enforce(
            "require_any_permission:" + ",".join(p.value for p in wanted),
            identity,
            self._policy.check_any_permission(identity, wanted),
        )

    def require_all_permissions(
        self,
        identity: AuthenticatedIdentity | None,
        permissions: Iterable[Permission],
    ) -> None:
        wanted = tuple(permissions)
        self._enforce(
            "require_all_permissions:" + ",".join(p.value for p in wanted),
            identity,
            self._policy.check_all_permissions(identity, wanted),
        )

    def require_role(
        self, identity: AuthenticatedIdentity | None, minimum: UserRole
    ) -> None:
        self._enforce(
            f"require_role:{minimum.value}",
            identity,
            self._policy.check_role(identity, minimum),
        )

    def require_admin(self, identity: AuthenticatedIdentity | None) -> None:
        self.require_role(identity, UserRole.ADMIN)

    def require_super_admin(self, identity: AuthenticatedIdentity | None) -> None:
        self.require_role(identity, UserRole.SUPER_ADMIN)

    # =========================================================================
    # Ownership guards
    # =========================================================================

    def require_self_or_admin(
        self,
        identity: AuthenticatedIdentity | None,
        params: RequestParameters,
        *,
        param_name: str = "userId",
        aliases: Iterable[str] = ("id",),
    ) -> int:
        """Allow the target user themself, or any admin.

        The target id is read from path parameters only.

        Returns:
            The target user id.

        Raises:
            AuthorizationError: AUTH_REQUIRED, MISSING/MALFORMED_RESOURCE_IDENTIFIER,
                or SELF_OR_ADMIN_REQUIRED.
        """
        action = "require_self_or_admin"
        target_id = self._owner_id_from(
            action,
            identity,
            extract_owner_id(
                params,
                param_name,
                sources=(IdentifierSource.PATH,),
                aliases=aliases,
            ),
        )
        self._enforce(
            action,
            identity,
            self._policy.check_self_or_admin(identity, target_id),
            resource_ref=f"user:{target_id}",
        )
        return target_id

    def validate_resource_ownership(
        self,
        identity: AuthenticatedIdentity | None,
        params: RequestParameters,
        *,
        param_name: str = "userId",
        action: ResourceAction = ResourceAction.READ,
        sources: Iterable[IdentifierSource] = DEFAULT_IDENTIFIER_SOURCES,
    ) -> int:
        """Check ``action`` on a resource owned by the user named in the request.

        Args:
            identity: Caller, None when unauthenticated.
            params: Request parameters.
            param_name: Owner id parameter name.
            action: Attempted action.
            sources: Lookup priority for the owner id.

        Returns:
            The owner id.

        Raises:
            AuthorizationError: AUTH_REQUIRED, MISSING/MALFORMED_RESOURCE_IDENTIFIER,
                or RESOURCE_ACCESS_DENIED.
        """
        audit_action = f"validate_resource_ownership:{ResourceAction(action).value}"
        owner_id = self._owner_id_from(
            audit_action,
            identity,
            extract_owner_id(params, param_name, sources=sources),
        )
        self._enforce(
            audit_action,
            identity,
            self._policy.check_resource_access(identity, owner_id, action),
            resource_ref=f"user:{owner_id}",
        )
        return owner_id

    def validate_own_resource(
        self,
        identity: AuthenticatedIdentity | None,
        resource: Mapping[str, Any] | object | None,
        *,
        action: ResourceAction = ResourceAction.READ,
        owner_field: str = "user_id",
    ) -> int:
        """Check ``action`` on an already-loaded resource.

        Args:
            identity: Caller, None when unauthenticated.
            resource: Loaded resource, a mapping or any object with
                ``owner_field`` as an attribute.
            action: Attempted action.
            owner_field: Key or attribute holding the owner id.

        Returns:
            The owner id.

        Raises:
            AuthorizationError: AUTH_REQUIRED, RESOURCE_NOT_LOADED,
                RESOURCE_OWNERSHIP_UNKNOWN, or RESOURCE_ACCESS_DENIED.
        """
        audit_action = f"validate_own_resource:{ResourceAction(action).value}"
        owner_id = self._owner_id_from(
            audit_action, identity, _resource_owner(resource, owner_field)
        )
        self._enforce(
            audit_action,
            identity,
            self._policy.check_resource_access(identity, owner_id, action),
            resource_ref=f"user:{owner_id}",
        )
        return owner_id

    # =========================================================================
    # Internals
    # =========================================================================

    def _owner_id_from(
        self,
        action: str,
        identity: AuthenticatedIdentity | None,
        extracted: Result[int, AuthorizationError],
    ) -> int:
        """Unwrap an extracted owner id, auditing and raising on failure.

        Authentication is checked first so an anonymous caller always gets
        AUTH_REQUIRED, whatever the request parameters look like.
        """
        if identity is None:
            self._enforce(
                action, None, Failure(error=AuthorizationError.auth_required())
            )
        match extracted:
            case Success(value=owner_id):
                return owner_id
            case Failure(error=error):
                self._enforce(action, identity, Failure(error=error))
        raise AssertionError("unreachable")  # pragma: no cover

    def _enforce(
        self,
        action: str,
        identity: AuthenticatedIdentity | None,
        result: Result[None, AuthorizationError],
        *,
        resource_ref: str | None = None,
    ) -> None:
        match result:
            case Failure(error=error):
                decision = AuthorizationDecision.deny(error.code)
            case _:
                error = None
                decision = AuthorizationDecision.allow()

        identity_id = identity.id if identity is not None else None
        self._audit_logger.record(
            AuthorizationEvaluated(
                action=action,
                identity_id=identity_id,
                role=self._policy.get_role(identity) if identity is not None else None,
                decision=(
                    AuditAction.ACCESS_GRANTED
                    if decision.allowed
                    else AuditAction.ACCESS_DENIED
                ),
                error_code=decision.code,
                resource_ref=resource_ref,
            )
        )
        if error is not None:
            self._logger.debug(
                "authorization_denied",
                authz_action=action,
                identity_id=identity_id,
                error_code=error.code.value,
            )
            raise error


def _resource_owner(
    resource: Mapping[str, Any] | object | None, owner_field: str
) -> Result[int, AuthorizationError]:
    if resource is None:
        return Failure(error=AuthorizationError.resource_not_loaded())
    if isinstance(resource, Mapping):
        raw = resource.get(owner_field)
    else:
        raw = getattr(resource, owner_field, None)
    owner_id = parse_identifier(raw) if raw is not None else None
    if owner_id is None:
        return Failure(error=AuthorizationError.ownership_unknown(owner_field))
    return Success(value=owner_id)
