from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.note import Note


class NoteRepository:
    """
    Tenant-scoped data access for notes.

    Every query takes the caller's tenant_id as a required argument. There is
    no lookup by note ID alone.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_by_tenant(self, tenant_id: int) -> list[Note]:
        """Get all notes of a tenant, most recently updated first"""
        return (
            self.db.query(Note)
            .filter(Note.tenant_id == tenant_id)
            .order_by(Note.updated_at.desc(), Note.id.desc())
            .all()
        )

    def get_by_id_and_tenant(self, note_id: int, tenant_id: int) -> Note | None:
        """
        Get note by ID, ensuring it belongs to the tenant.

        Args:
            note_id: Note ID
            tenant_id: Tenant ID

        Returns:
            Note object or None if not found or belongs to different tenant
        """
        return (
            self.db.query(Note)
            .filter(Note.id == note_id, Note.tenant_id == tenant_id)
            .first()
        )

    def count_by_tenant(self, tenant_id: int) -> int:
        """Count the notes a tenant currently holds"""
        result = (
            self.db.query(func.count(Note.id))
            .filter(Note.tenant_id == tenant_id)
            .scalar()
        )
        return int(result or 0)

    def create(self, note: Note) -> Note:
        """Create a new note"""
        self.db.add(note)
        self.db.commit()
        self.db.refresh(note)
        return note

    def update(self, note: Note) -> Note:
        """Update a note"""
        self.db.commit()
        self.db.refresh(note)
        return note

    def delete(self, note: Note) -> None:
        """Delete a note"""
        self.db.delete(note)
        self.db.commit()
