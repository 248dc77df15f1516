from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.discussion import DiscussionChannelCreate, DiscussionChannelOut
from tuf_portal.schemas.filters import DiscussionFilters, parse_filters
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/discussions", tags=["Discussions"])


def discussion_filters(
    platform: Optional[str] = None,
    topic_tags: Optional[str] = Query(None, alias="topicTags"),
) -> DiscussionFilters:
    return parse_filters(DiscussionFilters, platform=platform, topic_tags=topic_tags)


@router.get("", response_model=list[DiscussionChannelOut])
def list_channels(filters: DiscussionFilters = Depends(discussion_filters), db: Session = Depends(get_db)):
    return queries.list_discussion_channels(db, filters)


@router.post("", response_model=DiscussionChannelOut)
def create_channel(
    payload: DiscussionChannelCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_discussion_channel(db, payload)
