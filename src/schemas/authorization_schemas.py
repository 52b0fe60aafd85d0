"""Authorization response schemas.

RESTful Endpoints:
    GET /api/v1/authorization/me - Caller's role and permissions
"""

from pydantic import BaseModel, Field

from src.domain.enums import UserRole
from src.domain.value_objects import AuthorizationContext


class AuthorizationContextResponse(BaseModel):
    """Role and effective permissions of the authenticated caller."""

    user_id: int = Field(..., description="Authenticated user identifier")
    role: UserRole = Field(..., description="Resolved role")
    permissions: list[str] = Field(
        ...,
        description="Effective permissions, sorted alphabetically",
        examples=[["comment_idea", "create_idea", "read_own_data"]],
    )
    is_admin: bool = Field(..., description="Role is admin or higher")
    is_super_admin: bool = Field(..., description="Role is super_admin")

    @classmethod
    def from_context(cls, context: AuthorizationContext) -> "AuthorizationContextResponse":
        """Convert a domain AuthorizationContext to the response schema."""
        return cls(
            user_id=context.identity_id,
            role=context.role,
            permissions=context.sorted_permissions(),
            is_admin=context.role.at_least(UserRole.ADMIN),
            is_super_admin=context.role.at_least(UserRole.SUPER_ADMIN),
        )
