"""
Read side of the portal store.

Each ``list_*`` function takes a typed filter object, builds an immutable
tuple of predicates from it (``*_predicates``), and runs one composed query
with a fixed ordering. Absent filter fields add no predicate. Joined
entities (mentor's user, note's uploader, event's creator) are loaded in the
same statement.
"""

import json
import logging
from typing import Iterable, Optional

from sqlalchemy import String, and_, cast, func, or_
from sqlalchemy.orm import Session, contains_eager, joinedload

from tuf_portal.exceptions import NotFoundException
from tuf_portal.models import (
    Club,
    DiscussionChannel,
    Event,
    Link,
    Mentor,
    Note,
    Opportunity,
    ProjectIfp,
    User,
)
from tuf_portal.schemas.filters import (
    ClubFilters,
    DiscussionFilters,
    EventFilters,
    LinkFilters,
    MentorFilters,
    NoteFilters,
    OpportunityFilters,
    ProjectIfpFilters,
)
from tuf_portal.utils.datetime import naive_utc_now

logger = logging.getLogger("tuf_portal.queries")


# ---------------------------------------------------------------------------
# Predicate helpers
# ---------------------------------------------------------------------------

def icontains(column, text: str):
    """Case-insensitive substring match; ``%`` and ``_`` in ``text`` are literals."""
    return func.lower(column).contains(text.lower(), autoescape=True)


def any_tag(column, tags: Iterable[str]):
    """True when the JSON list in ``column`` holds at least one of ``tags``.

    List columns are stored as JSON text, so each tag is matched as its quoted
    JSON token (``"IEEE"``), which cannot match a substring of another tag.
    """
    text = cast(column, String)
    return or_(*[text.contains(json.dumps(tag), autoescape=True) for tag in tags])


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


# ---------------------------------------------------------------------------
# Mentors
# ---------------------------------------------------------------------------

def mentor_predicates(filters: MentorFilters) -> tuple:
    # Unavailable mentors are never listed, whatever the filters say
    predicates = [Mentor.is_available.is_(True)]
    if filters.department:
        predicates.append(User.department == filters.department)
    if filters.skills:
        predicates.append(any_tag(Mentor.interests, filters.skills))
    return tuple(predicates)


def list_mentors(db: Session, filters: MentorFilters) -> list[Mentor]:
    return (
        db.query(Mentor)
        .join(User, Mentor.user_id == User.id)
        .options(contains_eager(Mentor.user))
        .filter(and_(*mentor_predicates(filters)))
        .order_by(Mentor.created_at.asc(), Mentor.id.asc())
        .all()
    )


def get_mentor_by_user_id(db: Session, user_id: str) -> Optional[Mentor]:
    return (
        db.query(Mentor)
        .options(joinedload(Mentor.user))
        .filter(Mentor.user_id == user_id)
        .first()
    )


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------

def note_predicates(filters: NoteFilters) -> tuple:
    predicates = []
    if filters.dept:
        predicates.append(Note.dept == filters.dept)
    if filters.semester is not None:
        predicates.append(Note.semester == filters.semester)
    if filters.course_code:
        predicates.append(Note.course_code == filters.course_code)
    if filters.search:
        predicates.append(icontains(Note.title, filters.search))
    return tuple(predicates)


def list_notes(db: Session, filters: NoteFilters) -> list[Note]:
    return (
        db.query(Note)
        .join(User, Note.uploaded_by == User.id)
        .options(contains_eager(Note.uploader))
        .filter(*note_predicates(filters))
        .order_by(Note.created_at.desc(), Note.id.desc())
        .all()
    )


def get_note(db: Session, note_id: str) -> Note:
    note = (
        db.query(Note)
        .options(joinedload(Note.uploader))
        .filter(Note.id == note_id)
        .first()
    )
    if not note:
        raise NotFoundException("Note not found")
    return note


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def event_predicates(filters: EventFilters, now=None) -> tuple:
    predicates = []
    if filters.upcoming:
        predicates.append(Event.date >= (now or naive_utc_now()))
    if filters.tags:
        predicates.append(any_tag(Event.tags, filters.tags))
    return tuple(predicates)


def list_events(db: Session, filters: EventFilters, now=None) -> list[Event]:
    return (
        db.query(Event)
        .join(User, Event.created_by == User.id)
        .options(contains_eager(Event.creator))
        .filter(*event_predicates(filters, now=now))
        .order_by(Event.date.asc(), Event.id.asc())
        .all()
    )


# ---------------------------------------------------------------------------
# Directory collections (no joins)
# ---------------------------------------------------------------------------

def club_predicates(filters: ClubFilters) -> tuple:
    return (Club.category == filters.category,) if filters.category else ()


def list_clubs(db: Session, filters: ClubFilters) -> list[Club]:
    return (
        db.query(Club)
        .filter(*club_predicates(filters))
        .order_by(Club.name.asc(), Club.id.asc())
        .all()
    )


def opportunity_predicates(filters: OpportunityFilters) -> tuple:
    predicates = []
    if filters.type:
        predicates.append(Opportunity.type == filters.type)
    if filters.tags:
        predicates.append(any_tag(Opportunity.tags, filters.tags))
    return tuple(predicates)


def list_opportunities(db: Session, filters: OpportunityFilters) -> list[Opportunity]:
    return (
        db.query(Opportunity)
        .filter(*opportunity_predicates(filters))
        .order_by(Opportunity.created_at.desc(), Opportunity.id.desc())
        .all()
    )


def project_ifp_predicates(filters: ProjectIfpFilters) -> tuple:
    predicates = []
    if filters.dept:
        predicates.append(ProjectIfp.dept == filters.dept)
    if filters.area:
        predicates.append(ProjectIfp.area == filters.area)
    return tuple(predicates)


def list_projects_ifp(db: Session, filters: ProjectIfpFilters) -> list[ProjectIfp]:
    return (
        db.query(ProjectIfp)
        .filter(*project_ifp_predicates(filters))
        .order_by(ProjectIfp.year.desc(), ProjectIfp.title.asc())
        .all()
    )


def link_predicates(filters: LinkFilters) -> tuple:
    predicates = []
    if filters.group:
        predicates.append(Link.group == filters.group)
    if filters.search:
        predicates.append(icontains(Link.label, filters.search))
    return tuple(predicates)


def list_links(db: Session, filters: LinkFilters) -> list[Link]:
    return (
        db.query(Link)
        .filter(*link_predicates(filters))
        .order_by(Link.group.asc(), Link.label.asc())
        .all()
    )


def discussion_predicates(filters: DiscussionFilters) -> tuple:
    predicates = []
    if filters.platform:
        predicates.append(DiscussionChannel.platform == filters.platform)
    if filters.topic_tags:
        predicates.append(any_tag(DiscussionChannel.topic_tags, filters.topic_tags))
    return tuple(predicates)


def list_discussion_channels(db: Session, filters: DiscussionFilters) -> list[DiscussionChannel]:
    return (
        db.query(DiscussionChannel)
        .filter(*discussion_predicates(filters))
        .order_by(DiscussionChannel.label.asc(), DiscussionChannel.id.asc())
        .all()
    )
