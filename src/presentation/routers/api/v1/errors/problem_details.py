"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error (request validation failures).

    Attributes:
        field: Name of the field with error
        code: Machine-readable error code
        message: Human-readable error message
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    ``code`` is an extension member carrying the stable machine-readable
    error code, so clients can tell e.g. ``missing_resource_identifier``
    from ``malformed_resource_identifier`` without parsing ``detail``.

    Examples:
        >>> problem = ProblemDetails(
        ...     type="https://api.example.com/errors/forbidden",
        ...     title="Access Denied",
        ...     status=403,
        ...     detail="Access denied: manage_users permission required",
        ...     instance="/api/v1/admin/users",
        ...     code="permission_denied",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["https://api.example.com/errors/forbidden"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Access Denied"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[403],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Access denied: manage_users permission required"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/admin/users"],
    )
    code: str | None = Field(
        None,
        description="Machine-readable error code",
        examples=["permission_denied"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    trace_id: str | None = Field(
        None,
        description="Request trace ID for debugging",
    )
