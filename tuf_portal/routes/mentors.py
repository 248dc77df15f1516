from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.exceptions import NotFoundException
from tuf_portal.models.user import User
from tuf_portal.schemas.filters import MentorFilters, parse_filters
from tuf_portal.schemas.mentor import MentorCreate, MentorOut, MentorUpdate, MentorWithUser
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/mentors", tags=["Mentors"])


def mentor_filters(department: Optional[str] = None, skills: Optional[str] = None) -> MentorFilters:
    return parse_filters(MentorFilters, department=department, skills=skills)


@router.get("", response_model=list[MentorWithUser])
def list_mentors(filters: MentorFilters = Depends(mentor_filters), db: Session = Depends(get_db)):
    """Available mentors, optionally narrowed by the owning user's department and by skills.

    ``skills`` is a comma list; a mentor matches when any of them is among its interests.
    """
    return queries.list_mentors(db, filters)


@router.post("", response_model=MentorOut)
def create_mentor(
    payload: MentorCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_mentor(db, current_user.id, payload)


@router.get("/me", response_model=MentorWithUser)
def get_my_mentor_profile(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    mentor = queries.get_mentor_by_user_id(db, current_user.id)
    if not mentor:
        raise NotFoundException("No mentor profile for this user")
    return mentor


@router.patch("/{mentor_id}", response_model=MentorOut)
def update_mentor(
    mentor_id: str,
    payload: MentorUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.update_mentor(db, current_user, mentor_id, payload)
