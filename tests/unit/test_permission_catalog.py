"""Unit tests for PermissionCatalog.

Tests cover:
- Monotonic superset invariant across the role order
- Default role -> permission table contents
- Construction-time validation (missing roles, non-monotonic tables)
- Immutability and lookup helpers
"""

from itertools import combinations_with_replacement

import pytest

from src.domain.enums import Permission, UserRole
from src.infrastructure.authorization import (
    DEFAULT_ROLE_PERMISSIONS,
    PermissionCatalog,
    default_catalog,
)


@pytest.mark.unit
class TestCatalogMonotonicity:
    """permissions(r1) ⊆ permissions(r2) whenever r1 <= r2."""

    @pytest.mark.parametrize(
        ("lower", "higher"),
        list(combinations_with_replacement(UserRole.ordered(), 2)),
    )
    def test_default_catalog_is_monotonic(
        self, catalog: PermissionCatalog, lower: UserRole, higher: UserRole
    ) -> None:
        """Every higher role holds every permission of a lower role."""
        assert lower <= higher
        assert catalog.permissions_for(lower) <= catalog.permissions_for(higher)

    def test_higher_roles_are_strict_supersets(self, catalog: PermissionCatalog) -> None:
        """Each step up the order adds at least one permission."""
        user, admin, super_admin = (catalog.permissions_for(r) for r in UserRole.ordered())
        assert user < admin < super_admin

    def test_super_admin_holds_everything(self, catalog: PermissionCatalog) -> None:
        """The top role holds the whole vocabulary."""
        assert catalog.permissions_for(UserRole.SUPER_ADMIN) == frozenset(Permission)


@pytest.mark.unit
class TestDefaultCatalogContents:
    """Test the default role table."""

    def test_user_permissions(self, catalog: PermissionCatalog) -> None:
        """Users control their own data and ideas."""
        assert catalog.permissions_for(UserRole.USER) == {
            Permission.READ_OWN_DATA,
            Permission.WRITE_OWN_DATA,
            Permission.DELETE_OWN_DATA,
            Permission.CREATE_TEAM,
            Permission.CREATE_IDEA,
            Permission.SHARE_IDEA,
            Permission.COMMENT_IDEA,
        }

    def test_admin_adds_read_only_oversight(self, catalog: PermissionCatalog) -> None:
        """Admins may read, but not write or delete, other users' data."""
        admin = catalog.permissions_for(UserRole.ADMIN)
        assert Permission.READ_USER_DATA in admin
        assert Permission.MANAGE_USERS in admin
        assert Permission.VIEW_SECURITY_LOGS in admin
        assert Permission.WRITE_USER_DATA not in admin
        assert Permission.DELETE_USER_DATA not in admin
        assert Permission.MANAGE_SYSTEM not in admin

    def test_roles_granting(self, catalog: PermissionCatalog) -> None:
        """roles_granting() lists holders lowest first."""
        assert catalog.roles_granting(Permission.READ_OWN_DATA) == UserRole.ordered()
        assert catalog.roles_granting(Permission.MANAGE_USERS) == (
            UserRole.ADMIN,
            UserRole.SUPER_ADMIN,
        )
        assert catalog.roles_granting(Permission.MANAGE_SECURITY) == (
            UserRole.SUPER_ADMIN,
        )

    def test_default_catalog_is_cached(self) -> None:
        """default_catalog() returns one shared instance."""
        assert default_catalog() is default_catalog()

    def test_roles(self, catalog: PermissionCatalog) -> None:
        assert catalog.roles() == UserRole.ordered()


@pytest.mark.unit
class TestCatalogValidation:
    """Broken tables are rejected at construction."""

    def test_missing_role_rejected(self) -> None:
        """Every role must be present."""
        with pytest.raises(ValueError, match="missing roles"):
            PermissionCatalog(
                {
                    UserRole.USER: {Permission.READ_OWN_DATA},
                    UserRole.ADMIN: {Permission.READ_OWN_DATA},
                }
            )

    def test_sibling_sets_rejected(self) -> None:
        """A higher role lacking a lower role's permission is an error."""
        with pytest.raises(ValueError, match="must include every permission"):
            PermissionCatalog(
                {
                    UserRole.USER: {Permission.CREATE_IDEA},
                    UserRole.ADMIN: {Permission.MANAGE_USERS},
                    UserRole.SUPER_ADMIN: set(Permission),
                }
            )

    def test_equal_sets_rejected(self) -> None:
        """A higher role must grant something its lower neighbour does not."""
        with pytest.raises(ValueError, match="must grant more than user"):
            PermissionCatalog(
                {
                    UserRole.USER: {Permission.CREATE_IDEA},
                    UserRole.ADMIN: {Permission.CREATE_IDEA},
                    UserRole.SUPER_ADMIN: set(Permission),
                }
            )
        with pytest.raises(ValueError, match="must grant more than admin"):
            PermissionCatalog(
                {
                    UserRole.USER: [],
                    UserRole.ADMIN: [Permission.VIEW_ANALYTICS],
                    UserRole.SUPER_ADMIN: [Permission.VIEW_ANALYTICS],
                }
            )

    def test_custom_monotonic_catalog_accepted(self) -> None:
        """Substitute catalogs only need to respect the invariant."""
        custom = PermissionCatalog(
            {
                UserRole.USER: [],
                UserRole.ADMIN: [Permission.VIEW_ANALYTICS],
                UserRole.SUPER_ADMIN: [Permission.VIEW_ANALYTICS, Permission.MANAGE_SYSTEM],
            }
        )
        assert custom.permissions_for(UserRole.USER) == frozenset()
        assert custom.roles_granting(Permission.VIEW_ANALYTICS) == (
            UserRole.ADMIN,
            UserRole.SUPER_ADMIN,
        )


@pytest.mark.unit
class TestCatalogImmutability:
    """The catalog cannot be changed after construction."""

    def test_permission_sets_are_frozen(self, catalog: PermissionCatalog) -> None:
        assert isinstance(catalog.permissions_for(UserRole.USER), frozenset)

    def test_mapping_is_read_only(self, catalog: PermissionCatalog) -> None:
        """as_mapping() rejects assignment."""
        with pytest.raises(TypeError):
            catalog.as_mapping()[UserRole.USER] = frozenset()  # type: ignore[index]

    def test_source_mutation_does_not_leak(self) -> None:
        """Mutating the input mapping after construction has no effect."""
        source = {role: set(perms) for role, perms in DEFAULT_ROLE_PERMISSIONS.items()}
        custom = PermissionCatalog(source)
        source[UserRole.USER].add(Permission.MANAGE_SYSTEM)
        assert Permission.MANAGE_SYSTEM not in custom.permissions_for(UserRole.USER)

    def test_no_instance_dict(self, catalog: PermissionCatalog) -> None:
        """Slots prevent ad-hoc attributes."""
        with pytest.raises(AttributeError):
            catalog.extra = 1  # type: ignore[attr-defined]
