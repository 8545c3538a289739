from datetime import datetime
from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Schema for creating a new note"""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)


class NoteUpdate(BaseModel):
    """Schema for updating a note (only provided fields change)"""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class NoteResponse(BaseModel):
    """Schema for note response"""

    model_config = {"from_attributes": True}

    id: int
    title: str
    content: str
    tenant_id: int
    user_id: int
    created_at: datetime
    updated_at: datetime
