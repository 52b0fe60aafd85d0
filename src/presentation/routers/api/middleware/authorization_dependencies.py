"""Authorization dependencies.

FastAPI dependencies that run the AuthorizationGuard at the request
boundary. Authentication is not done here: an upstream layer puts the
verified AuthenticatedIdentity on ``request.state.identity`` and these
dependencies treat its absence as AUTH_REQUIRED.

Denials raise AuthorizationError, rendered as RFC 9457 Problem Details by
the registered exception handler.

Usage:
    # Permission-protected route
    @router.get("/admin/analytics")
    async def analytics(
        _: None = Depends(require_permission(Permission.VIEW_ANALYTICS)),
    ):
        ...

    # Owner id from the path, writes limited to self or super admin
    @router.put("/users/{userId}/ideas")
    async def update_ideas(
        owner_id: int = Depends(
            validate_resource_ownership(action=ResourceAction.WRITE)
        ),
    ):
        ...
"""

from collections.abc import Awaitable, Callable, Iterable, Mapping
from typing import Annotated, Any

from fastapi import Depends, Request

from src.application.services.authorization_guard import AuthorizationGuard
from src.application.services.resource_identifier import RequestParameters
from src.core.container import get_authorization_guard
from src.domain.entities import AuthenticatedIdentity
from src.domain.enums import (
    DEFAULT_IDENTIFIER_SOURCES,
    IdentifierSource,
    Permission,
    ResourceAction,
    UserRole,
)


async def get_current_identity(request: Request) -> AuthenticatedIdentity | None:
    """Identity placed on the request by the authentication layer, if any."""
    identity = getattr(request.state, "identity", None)
    if isinstance(identity, AuthenticatedIdentity):
        return identity
    return None


async def get_request_parameters(request: Request) -> RequestParameters:
    """Collect path, JSON body and query parameters.

    A body that is empty, not JSON, or not a JSON object contributes no
    parameters.
    """
    body: Mapping[str, Any] = {}
    if await request.body():
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            body = payload
    return RequestParameters(
        path=dict(request.path_params),
        body=body,
        query=dict(request.query_params),
    )


CurrentIdentity = Annotated[AuthenticatedIdentity | None, Depends(get_current_identity)]
Guard = Annotated[AuthorizationGuard, Depends(get_authorization_guard)]
Parameters = Annotated[RequestParameters, Depends(get_request_parameters)]


def require_permission(permission: Permission) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires ``permission``.

    Raises:
        AuthorizationError: AUTH_REQUIRED (401) or PERMISSION_DENIED (403).
    """

    async def permission_checker(identity: CurrentIdentity, guard: Guard) -> None:
        guard.require_permission(identity, permission)

    return permission_checker


def require_any_permission(
    *permissions: Permission,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires at least one of ``permissions``."""

    async def permission_checker(identity: CurrentIdentity, guard: Guard) -> None:
        guard.require_any_permission(identity, permissions)

    return permission_checker


def require_all_permissions(
    *permissions: Permission,
) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires every one of ``permissions``."""

    async def permission_checker(identity: CurrentIdentity, guard: Guard) -> None:
        guard.require_all_permissions(identity, permissions)

    return permission_checker


def require_role(minimum: UserRole) -> Callable[..., Awaitable[None]]:
    """Create a dependency that requires ``minimum`` role or higher.

    Raises:
        AuthorizationError: AUTH_REQUIRED (401) or INSUFFICIENT_ROLE (403).
    """

    async def role_checker(identity: CurrentIdentity, guard: Guard) -> None:
        guard.require_role(identity, minimum)

    return role_checker


def require_admin() -> Callable[..., Awaitable[None]]:
    return require_role(UserRole.ADMIN)


def require_super_admin() -> Callable[..., Awaitable[None]]:
    return require_role(UserRole.SUPER_ADMIN)


def require_self_or_admin(
    param_name: str = "userId",
    aliases: Iterable[str] = ("id",),
) -> Callable[..., Awaitable[int]]:
    """Create a dependency for "my own profile, or admin" routes.

    The target user id comes from the path only. The dependency returns it.
    """
    alias_names = tuple(aliases)

    async def self_or_admin_checker(
        identity: CurrentIdentity, guard: Guard, params: Parameters
    ) -> int:
        return guard.require_self_or_admin(
            identity, params, param_name=param_name, aliases=alias_names
        )

    return self_or_admin_checker


def validate_resource_ownership(
    param_name: str = "userId",
    action: ResourceAction = ResourceAction.READ,
    sources: Iterable[IdentifierSource] = DEFAULT_IDENTIFIER_SOURCES,
) -> Callable[..., Awaitable[int]]:
    """Create a dependency checking ``action`` on the owner named in the request.

    Args:
        param_name: Owner id parameter name.
        action: Attempted action.
        sources: Lookup priority (path, body, query by default).

    Returns:
        Dependency returning the validated owner id.

    Raises:
        AuthorizationError: AUTH_REQUIRED (401), MISSING/MALFORMED_RESOURCE_IDENTIFIER
            (400), or RESOURCE_ACCESS_DENIED (403).
    """
    source_order = tuple(sources)

    async def ownership_checker(
        identity: CurrentIdentity, guard: Guard, params: Parameters
    ) -> int:
        return guard.validate_resource_ownership(
            identity,
            params,
            param_name=param_name,
            action=action,
            sources=source_order,
        )

    return ownership_checker


def validate_own_resource(
    action: ResourceAction = ResourceAction.READ,
    owner_field: str = "user_id",
) -> Callable[..., Awaitable[int]]:
    """Create a dependency checking ``action`` on ``request.state.resource``.

    An earlier dependency is expected to load the resource and attach it.
    """

    async def own_resource_checker(
        request: Request, identity: CurrentIdentity, guard: Guard
    ) -> int:
        return guard.validate_own_resource(
            identity,
            getattr(request.state, "resource", None),
            action=action,
            owner_field=owner_field,
        )

    return own_resource_checker
