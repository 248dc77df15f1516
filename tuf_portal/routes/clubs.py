from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.club import ClubCreate, ClubOut
from tuf_portal.schemas.filters import ClubFilters, parse_filters
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/clubs", tags=["Clubs"])


def club_filters(category: Optional[str] = None) -> ClubFilters:
    return parse_filters(ClubFilters, category=category)


@router.get("", response_model=list[ClubOut])
def list_clubs(filters: ClubFilters = Depends(club_filters), db: Session = Depends(get_db)):
    return queries.list_clubs(db, filters)


@router.post("", response_model=ClubOut)
def create_club(
    payload: ClubCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_club(db, payload)
