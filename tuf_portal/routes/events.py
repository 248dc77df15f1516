from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.event import EventCreate, EventOut, EventWithCreator
from tuf_portal.schemas.filters import EventFilters, parse_filters
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/events", tags=["Events"])


def event_filters(tags: Optional[str] = None, upcoming: Optional[str] = None) -> EventFilters:
    return parse_filters(EventFilters, tags=tags, upcoming=upcoming)


@router.get("", response_model=list[EventWithCreator])
def list_events(filters: EventFilters = Depends(event_filters), db: Session = Depends(get_db)):
    """Events by date ascending.

    ``upcoming=true`` keeps events dated now or later; ``tags`` (comma list)
    keeps events carrying any of the given tags.
    """
    return queries.list_events(db, filters)


@router.post("", response_model=EventOut)
def create_event(
    payload: EventCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_event(db, current_user.id, payload)
