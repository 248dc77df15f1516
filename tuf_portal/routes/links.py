from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.filters import LinkFilters, parse_filters
from tuf_portal.schemas.link import LinkCreate, LinkOut
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/links", tags=["Links"])


def link_filters(group: Optional[str] = None, search: Optional[str] = None) -> LinkFilters:
    return parse_filters(LinkFilters, group=group, search=search)


@router.get("", response_model=list[LinkOut])
def list_links(filters: LinkFilters = Depends(link_filters), db: Session = Depends(get_db)):
    return queries.list_links(db, filters)


@router.post("", response_model=LinkOut)
def create_link(
    payload: LinkCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_link(db, payload)
