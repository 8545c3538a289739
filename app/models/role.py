"""User role enum for role-based access control."""

from enum import Enum as PyEnum


class UserRole(str, PyEnum):
    """
    Roles a user holds inside their tenant.

    Roles are compared by exact match, not by rank:
    - ADMIN - May upgrade the tenant's plan, plus everything a member can do
      on endpoints that are open to both roles
    - MEMBER - Create/read/update/delete notes within the tenant

    An endpoint that requires ADMIN rejects MEMBER, and an endpoint that
    required MEMBER would reject ADMIN. Endpoints open to both roles skip the
    role check entirely.
    """

    ADMIN = "admin"
    MEMBER = "member"
