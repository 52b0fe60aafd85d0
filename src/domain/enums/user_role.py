"""User roles for RBAC authorization.

Roles form a total order that is the basis of every threshold check:

    USER < ADMIN < SUPER_ADMIN

    - user: Standard account, full control over own data only
    - admin: Read-only visibility into other users' data + management views
    - super_admin: Full control, including mutation and deletion of other
      users' data

Usage:
    from src.domain.enums import UserRole

    if role.at_least(UserRole.ADMIN):
        ...

    assert UserRole.USER < UserRole.SUPER_ADMIN
"""

from enum import Enum


class UserRole(str, Enum):
    """Ordered privilege levels.

    String Enum:
        Inherits from str for easy serialization. Comparison operators are
        overridden so ordering follows privilege level, not string order
        (plain str comparison would put "admin" below "user").
    """

    USER = "user"
    """Standard user: own data, ideas, and team creation."""

    ADMIN = "admin"
    """Administrator: USER capabilities plus cross-user read access,
    user management, analytics, and security log viewing."""

    SUPER_ADMIN = "super_admin"
    """Super administrator: ADMIN capabilities plus cross-user write and
    delete, system and security management."""

    @property
    def level(self) -> int:
        """Position of the role in the privilege order (0 = lowest)."""
        return _ROLE_ORDER.index(self)

    def at_least(self, minimum: "UserRole") -> bool:
        """Check whether this role meets or exceeds ``minimum``.

        Args:
            minimum: Lowest acceptable role.

        Returns:
            bool: True if this role is ``minimum`` or higher.
        """
        return self.level >= minimum.level

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, UserRole):
            return NotImplemented
        return self.level < other.level

    def __le__(self, other: object) -> bool:
        if not isinstance(other, UserRole):
            return NotImplemented
        return self.level <= other.level

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, UserRole):
            return NotImplemented
        return self.level > other.level

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, UserRole):
            return NotImplemented
        return self.level >= other.level

    @classmethod
    def ordered(cls) -> tuple["UserRole", ...]:
        """All roles from lowest to highest privilege."""
        return _ROLE_ORDER

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: ['user', 'admin', 'super_admin'].
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()


_ROLE_ORDER: tuple[UserRole, ...] = (
    UserRole.USER,
    UserRole.ADMIN,
    UserRole.SUPER_ADMIN,
)
