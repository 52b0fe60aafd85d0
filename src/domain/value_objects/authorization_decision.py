"""Outcome of a single authorization evaluation."""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationDecision:
    """Ephemeral allow/deny result, never persisted.

    Attributes:
        allowed: True if the evaluated check passed.
        code: Error code of the denial, None when allowed.

    Example:
        >>> AuthorizationDecision.deny(ErrorCode.PERMISSION_DENIED).allowed
        False
    """

    allowed: bool
    code: ErrorCode | None = None

    def __post_init__(self) -> None:
        if self.allowed and self.code is not None:
            raise ValueError("An allowed decision cannot carry an error code")
        if not self.allowed and self.code is None:
            raise ValueError("A denied decision requires an error code")

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        """Decision for a passed check."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, code: ErrorCode) -> "AuthorizationDecision":
        """Decision for a failed check with its error code."""
        return cls(allowed=False, code=code)
