"""Named capabilities for RBAC authorization.

Permissions are flat, fine-grained capabilities grouped by domain. Which
roles hold which permission is decided by the PermissionCatalog, never here.

Adding a permission:
    Add the member below, then grant it in the catalog to a role AND every
    role above it. The catalog refuses to load a table where a higher role
    lacks a permission held by a lower one.

Usage:
    from src.domain.enums import Permission

    guard.require_permission(identity, Permission.MANAGE_USERS)
"""

from enum import Enum


class Permission(str, Enum):
    """Capabilities that can be granted to roles.

    Permission Groups:
        Own data: READ_OWN_DATA, WRITE_OWN_DATA, DELETE_OWN_DATA
        Other users' data: READ_USER_DATA, WRITE_USER_DATA, DELETE_USER_DATA
        Administration: MANAGE_USERS, VIEW_ANALYTICS, MANAGE_SYSTEM
        Security: VIEW_SECURITY_LOGS, MANAGE_SECURITY
        Teams: CREATE_TEAM, MANAGE_TEAM, INVITE_MEMBERS
        Ideas: CREATE_IDEA, SHARE_IDEA, COMMENT_IDEA
    """

    # Own data
    READ_OWN_DATA = "read_own_data"
    WRITE_OWN_DATA = "write_own_data"
    DELETE_OWN_DATA = "delete_own_data"

    # Other users' data
    READ_USER_DATA = "read_user_data"
    WRITE_USER_DATA = "write_user_data"
    DELETE_USER_DATA = "delete_user_data"

    # Administration
    MANAGE_USERS = "manage_users"
    VIEW_ANALYTICS = "view_analytics"
    MANAGE_SYSTEM = "manage_system"

    # Security
    VIEW_SECURITY_LOGS = "view_security_logs"
    MANAGE_SECURITY = "manage_security"

    # Teams
    CREATE_TEAM = "create_team"
    MANAGE_TEAM = "manage_team"
    INVITE_MEMBERS = "invite_members"

    # Ideas
    CREATE_IDEA = "create_idea"
    SHARE_IDEA = "share_idea"
    COMMENT_IDEA = "comment_idea"

    @classmethod
    def values(cls) -> list[str]:
        """Get all permission values as strings.

        Returns:
            list[str]: List of permission values.
        """
        return [permission.value for permission in cls]
