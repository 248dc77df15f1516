from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.filters import NoteFilters, parse_filters
from tuf_portal.schemas.note import NoteCreate, NoteOut, NoteWithUploader
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user, get_current_user_optional

router = APIRouter(prefix="/api/notes", tags=["Notes"])


def note_filters(
    dept: Optional[str] = None,
    semester: Optional[str] = None,
    course_code: Optional[str] = Query(None, alias="courseCode"),
    search: Optional[str] = None,
) -> NoteFilters:
    return parse_filters(NoteFilters, dept=dept, semester=semester, course_code=course_code, search=search)


@router.get("", response_model=list[NoteWithUploader])
def list_notes(filters: NoteFilters = Depends(note_filters), db: Session = Depends(get_db)):
    """Notes newest first; ``search`` is a case-insensitive match on the title."""
    return queries.list_notes(db, filters)


@router.post("", response_model=NoteOut)
def create_note(
    payload: NoteCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_note(db, current_user.id, payload)


@router.get("/{note_id}", response_model=NoteWithUploader)
def get_note(note_id: str, db: Session = Depends(get_db)):
    return queries.get_note(db, note_id)


@router.post("/{note_id}/download")
def record_download(
    note_id: str,
    current_user: Optional[User] = Depends(get_current_user_optional),
    db: Session = Depends(get_db),
):
    # No sign-in needed; the caller is only recorded in the audit log when known
    mutations.increment_note_downloads(db, note_id, actor_id=current_user.id if current_user else None)
    return {"success": True}
