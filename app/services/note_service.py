import logging

from sqlalchemy.orm import Session

from app.models.note import Note
from app.models.principal import Principal
from app.repositories.note_repository import NoteRepository
from app.repositories.tenant_repository import TenantRepository
from app.repositories.user_repository import UserRepository
from app.schemas.note_schemas import NoteCreate, NoteUpdate
from app.services.quota_policy import QuotaPolicy
from app.core.exceptions import (
    NotFoundException,
    QuotaExceededException,
    ValidationException,
)

logger = logging.getLogger(__name__)


class NoteService:
    """Service layer for note business logic, scoped to the caller's tenant"""

    def __init__(self, db: Session, free_note_limit: int):
        self.db = db
        self.note_repo = NoteRepository(db)
        self.tenant_repo = TenantRepository(db)
        self.user_repo = UserRepository(db)
        self.quota = QuotaPolicy(db, free_note_limit=free_note_limit)

    def list_notes(self, principal: Principal) -> list[Note]:
        """Get all notes of the caller's tenant, most recently updated first"""
        return self.note_repo.list_by_tenant(principal.tenant_id)

    def get_note(self, note_id: int, principal: Principal) -> Note:
        """
        Get note by ID within the caller's tenant.

        A note of another tenant is reported exactly like a missing note so
        that callers cannot probe for foreign IDs.

        Raises:
            NotFoundException: If note doesn't exist or belongs to another tenant
        """
        note = self.note_repo.get_by_id_and_tenant(note_id, principal.tenant_id)
        if not note:
            raise NotFoundException(f"Note {note_id} not found")
        return note

    def create_note(self, note_data: NoteCreate, principal: Principal) -> Note:
        """
        Create a note after checking input and the tenant's plan quota.

        Args:
            note_data: Note creation data
            principal: Authenticated caller; the note is attributed to them

        Returns:
            Created note

        Raises:
            ValidationException: If title or content is blank
            NotFoundException: If the caller's tenant or user no longer exists
            QuotaExceededException: If a FREE tenant is at its note limit
        """
        title = _require_text(note_data.title, "title")
        content = _require_text(note_data.content, "content")

        tenant = self.tenant_repo.get_by_id(principal.tenant_id)
        if not tenant:
            raise NotFoundException("Tenant not found")

        if not self.user_repo.get_by_id(principal.user_id):
            raise NotFoundException("User not found")

        if not self.quota.can_create_note(tenant):
            raise QuotaExceededException(
                "Free plan limit reached. Upgrade to Pro to create more notes."
            )

        note = Note(
            title=title,
            content=content,
            tenant_id=principal.tenant_id,
            user_id=principal.user_id,
        )
        note = self.note_repo.create(note)
        logger.debug("Created note %s in tenant %s", note.id, principal.tenant_id)
        return note

    def update_note(
        self, note_id: int, note_data: NoteUpdate, principal: Principal
    ) -> Note:
        """
        Update title and/or content of a note in the caller's tenant.

        Raises:
            NotFoundException: If note doesn't exist or belongs to another tenant
            ValidationException: If a provided field is blank
        """
        note = self.get_note(note_id, principal)

        if note_data.title is not None:
            note.title = _require_text(note_data.title, "title")
        if note_data.content is not None:
            note.content = _require_text(note_data.content, "content")

        return self.note_repo.update(note)

    def delete_note(self, note_id: int, principal: Principal) -> None:
        """
        Delete a note in the caller's tenant.

        Raises:
            NotFoundException: If note doesn't exist or belongs to another tenant
        """
        note = self.get_note(note_id, principal)
        self.note_repo.delete(note)
        logger.debug("Deleted note %s in tenant %s", note_id, principal.tenant_id)


def _require_text(value: str | None, field: str) -> str:
    """Reject missing or whitespace-only text fields"""
    if value is None or not value.strip():
        raise ValidationException(f"{field.capitalize()} is required")
    return value
