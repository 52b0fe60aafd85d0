"""Actions that can be attempted on a user-owned resource."""

from enum import Enum


class ResourceAction(str, Enum):
    """Action attempted on a resource owned by some user.

    Cross-user rules:
        READ: admin or higher
        WRITE, DELETE: super admin only
    """

    READ = "read"
    WRITE = "write"
    DELETE = "delete"
