"""Authenticated principal for request authorization."""

from dataclasses import dataclass
from app.models.role import UserRole


@dataclass(frozen=True)
class Principal:
    """
    Identity of the caller, decoded from a verified access token.

    The principal is trusted exactly as encoded in the token; it is not
    re-checked against the database on each request. A user deleted or
    re-roled after login keeps acting with the old identity until the token
    expires (stale session).

    Attributes:
        user_id: ID of the authenticated User
        tenant_id: ID of the Tenant the user belongs to
        role: The user's role within that tenant
    """

    user_id: int
    tenant_id: int
    role: UserRole

    def has_role(self, required_role: UserRole) -> bool:
        """
        Check if the principal holds exactly the required role.

        There is no hierarchy: ADMIN does not satisfy a MEMBER check.
        """
        return self.role == required_role

    def is_admin(self) -> bool:
        """Check if the principal is a tenant admin."""
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"<Principal(user_id={self.user_id}, tenant_id={self.tenant_id}, role={self.role.value})>"
