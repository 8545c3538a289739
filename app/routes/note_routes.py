from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config import Settings, get_settings
from app.database import get_db
from app.dependencies import get_current_principal
from app.models.principal import Principal
from app.services.note_service import NoteService
from app.schemas.note_schemas import NoteCreate, NoteUpdate, NoteResponse

router = APIRouter()


def get_note_service(
    db: Session = Depends(get_db), settings: Settings = Depends(get_settings)
) -> NoteService:
    return NoteService(db, free_note_limit=settings.FREE_PLAN_NOTE_LIMIT)


@router.get("", response_model=list[NoteResponse])
def list_notes(
    principal: Principal = Depends(get_current_principal),
    service: NoteService = Depends(get_note_service),
):
    """
    List notes of the caller's tenant.

    - Results sorted by last update (newest first)
    """
    return service.list_notes(principal)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
def create_note(
    note_data: NoteCreate,
    principal: Principal = Depends(get_current_principal),
    service: NoteService = Depends(get_note_service),
):
    """
    Create a new note.

    - Title and content are required
    - FREE tenants are limited to 3 notes (403 when exceeded)
    """
    return service.create_note(note_data, principal)


@router.get("/{note_id}", response_model=NoteResponse)
def get_note(
    note_id: int,
    principal: Principal = Depends(get_current_principal),
    service: NoteService = Depends(get_note_service),
):
    """
    Get a specific note by ID.

    - Returns 404 if note doesn't exist or doesn't belong to tenant
    """
    return service.get_note(note_id, principal)


@router.put("/{note_id}", response_model=NoteResponse)
def update_note(
    note_id: int,
    note_data: NoteUpdate,
    principal: Principal = Depends(get_current_principal),
    service: NoteService = Depends(get_note_service),
):
    """
    Update a note.

    - Only provided fields are updated (partial update)
    - Returns 404 if note doesn't exist or doesn't belong to tenant
    """
    return service.update_note(note_id, note_data, principal)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_note(
    note_id: int,
    principal: Principal = Depends(get_current_principal),
    service: NoteService = Depends(get_note_service),
):
    """
    Delete a note.

    - Returns 404 if note doesn't exist or doesn't belong to tenant
    """
    service.delete_note(note_id, principal)
