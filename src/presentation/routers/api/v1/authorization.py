"""Authorization resource endpoints.

Endpoints:
    GET /api/v1/authorization/me - Caller's role and effective permissions
"""

from fastapi import APIRouter

from src.domain.errors import AuthorizationError
from src.presentation.routers.api.middleware.authorization_dependencies import (
    CurrentIdentity,
    Guard,
)
from src.presentation.routers.api.v1.errors import ProblemDetails
from src.schemas.authorization_schemas import AuthorizationContextResponse

authorization_router = APIRouter(prefix="/authorization", tags=["Authorization"])


@authorization_router.get(
    "/me",
    response_model=AuthorizationContextResponse,
    responses={401: {"model": ProblemDetails}},
)
async def get_my_authorization(
    identity: CurrentIdentity,
    guard: Guard,
) -> AuthorizationContextResponse:
    """Describe what the authenticated caller may do.

    Raises:
        AuthorizationError: AUTH_REQUIRED when no identity is present.
    """
    context = guard.describe(identity)
    if context is None:
        raise AuthorizationError.auth_required()
    return AuthorizationContextResponse.from_context(context)
