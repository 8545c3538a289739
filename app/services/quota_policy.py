import logging

from sqlalchemy.orm import Session

from app.models.tenant import Tenant, TenantPlan
from app.repositories.note_repository import NoteRepository

logger = logging.getLogger(__name__)


class QuotaPolicy:
    """
    Decides whether a tenant may create another note.

    The count and the following insert are two separate statements, so
    concurrent creations near the limit can overshoot it slightly.
    """

    def __init__(self, db: Session, free_note_limit: int):
        self.note_repo = NoteRepository(db)
        self.free_note_limit = free_note_limit

    def can_create_note(self, tenant: Tenant) -> bool:
        """
        Check the tenant's plan quota.

        Args:
            tenant: Tenant that wants to create a note

        Returns:
            True for PRO tenants; for FREE tenants, True only while the
            tenant holds fewer than free_note_limit notes
        """
        if tenant.plan == TenantPlan.PRO:
            return True

        count = self.note_repo.count_by_tenant(tenant.id)
        allowed = count < self.free_note_limit
        if not allowed:
            logger.info(
                "Tenant %s at free plan limit (%d/%d notes)",
                tenant.slug,
                count,
                self.free_note_limit,
            )
        return allowed
