"""Unit tests for authorization domain enums.

Tests cover:
- UserRole privilege ordering (not string ordering)
- UserRole helpers (at_least, ordered, values, is_valid)
- Permission catalog vocabulary
- ResourceAction and IdentifierSource values
"""

import pytest

from src.domain.enums import (
    DEFAULT_IDENTIFIER_SOURCES,
    AuditAction,
    IdentifierSource,
    Permission,
    ResourceAction,
    UserRole,
)


@pytest.mark.unit
class TestUserRoleOrdering:
    """Roles compare by privilege level."""

    def test_total_order(self) -> None:
        """USER < ADMIN < SUPER_ADMIN."""
        assert UserRole.USER < UserRole.ADMIN < UserRole.SUPER_ADMIN
        assert UserRole.SUPER_ADMIN > UserRole.ADMIN > UserRole.USER

    def test_order_differs_from_string_order(self) -> None:
        """'admin' sorts before 'user' as a string but not as a role."""
        assert "admin" < "user"
        assert UserRole.ADMIN > UserRole.USER

    def test_sorted_roles_follow_privilege(self) -> None:
        """sorted() uses the privilege order."""
        roles = [UserRole.SUPER_ADMIN, UserRole.USER, UserRole.ADMIN]
        assert sorted(roles) == [UserRole.USER, UserRole.ADMIN, UserRole.SUPER_ADMIN]

    def test_ordered_lists_lowest_first(self) -> None:
        """ordered() is lowest privilege first."""
        assert UserRole.ordered() == (
            UserRole.USER,
            UserRole.ADMIN,
            UserRole.SUPER_ADMIN,
        )

    def test_levels(self) -> None:
        """Levels are consecutive from zero."""
        assert [role.level for role in UserRole.ordered()] == [0, 1, 2]

    @pytest.mark.parametrize(
        ("role", "minimum", "expected"),
        [
            (UserRole.USER, UserRole.USER, True),
            (UserRole.USER, UserRole.ADMIN, False),
            (UserRole.ADMIN, UserRole.ADMIN, True),
            (UserRole.ADMIN, UserRole.SUPER_ADMIN, False),
            (UserRole.SUPER_ADMIN, UserRole.USER, True),
            (UserRole.SUPER_ADMIN, UserRole.SUPER_ADMIN, True),
        ],
    )
    def test_at_least(self, role: UserRole, minimum: UserRole, expected: bool) -> None:
        """at_least() is the reflexive threshold check."""
        assert role.at_least(minimum) is expected
        assert (role >= minimum) is expected

    def test_comparison_with_non_string_is_unsupported(self) -> None:
        """Ordering against a non-role raises TypeError."""
        with pytest.raises(TypeError):
            UserRole.ADMIN < 3  # noqa: B015


@pytest.mark.unit
class TestUserRoleHelpers:
    """Test UserRole classmethods."""

    def test_values(self) -> None:
        """values() returns the serialized role names."""
        assert UserRole.values() == ["user", "admin", "super_admin"]

    def test_is_valid(self) -> None:
        """is_valid() accepts role names only."""
        assert UserRole.is_valid("admin")
        assert UserRole.is_valid("super_admin")
        assert not UserRole.is_valid("superadmin")
        assert not UserRole.is_valid("ADMIN")

    def test_string_enum(self) -> None:
        """Roles serialize as their value."""
        assert UserRole("admin") is UserRole.ADMIN
        assert UserRole.SUPER_ADMIN == "super_admin"


@pytest.mark.unit
class TestPermission:
    """Test Permission vocabulary."""

    def test_catalog_size(self) -> None:
        """All seventeen capabilities are defined."""
        assert len(Permission) == 17

    def test_values_are_lower_snake_case(self) -> None:
        """Values are the lower-cased member names."""
        for permission in Permission:
            assert permission.value == permission.name.lower()

    def test_values_helper(self) -> None:
        """values() lists every permission value."""
        values = Permission.values()
        assert "manage_users" in values
        assert "manage_security" in values
        assert len(values) == len(set(values)) == 17


@pytest.mark.unit
class TestResourceEnums:
    """Test ResourceAction, IdentifierSource and AuditAction."""

    def test_resource_actions(self) -> None:
        """read, write and delete."""
        assert [a.value for a in ResourceAction] == ["read", "write", "delete"]

    def test_default_identifier_priority(self) -> None:
        """Path beats body beats query."""
        assert DEFAULT_IDENTIFIER_SOURCES == (
            IdentifierSource.PATH,
            IdentifierSource.BODY,
            IdentifierSource.QUERY,
        )

    def test_audit_actions(self) -> None:
        """Audit events record either outcome."""
        assert AuditAction.ACCESS_GRANTED != AuditAction.ACCESS_DENIED
