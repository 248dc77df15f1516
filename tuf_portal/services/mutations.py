"""
Write side of the portal store.

Every create is a single-row insert of an already-validated payload plus
server-assigned fields (id, timestamps, counters). Ownership fields
(``user_id``, ``uploaded_by``, ``created_by``) always come from the
authenticated actor, never from the payload, and the referenced user must
exist. Errors propagate to the HTTP layer; nothing here retries.
"""

import logging
from datetime import timedelta

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from tuf_portal.exceptions import ForbiddenException, NotFoundException, ValidationException
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
    UserRole,
)
from tuf_portal.schemas.club import ClubCreate
from tuf_portal.schemas.discussion import DiscussionChannelCreate
from tuf_portal.schemas.event import EventCreate
from tuf_portal.schemas.link import LinkCreate
from tuf_portal.schemas.mentor import MentorCreate, MentorUpdate
from tuf_portal.schemas.note import NoteCreate
from tuf_portal.schemas.opportunity import OpportunityCreate
from tuf_portal.schemas.project_ifp import ProjectIfpCreate
from tuf_portal.schemas.user import IdentityClaims, ProfileUpdate
from tuf_portal.services import audit
from tuf_portal.utils.datetime import naive_utc_now

logger = logging.getLogger("tuf_portal.mutations")


def _require_user(db: Session, user_id: str) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise ValidationException(f"Referenced user '{user_id}' does not exist")
    return user


def _insert(db: Session, row, actor_id: str | None = None):
    db.add(row)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"Insert into {row.__tablename__} rejected by store: {e.orig}")
        raise
    db.refresh(row)
    audit.log_entity_create(row.__tablename__, row.id, actor_id=actor_id)
    return row


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def _next_updated_at(previous):
    """``updated_at`` only ever moves forward, even when two writes share a clock tick."""
    now = naive_utc_now()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


def _email_taken(db: Session, email: str, user_id: str) -> bool:
    return db.query(User).filter(
        func.lower(User.email) == email.lower(), User.id != user_id
    ).first() is not None


def upsert_user(db: Session, user_id: str, fields: dict) -> User:
    """Insert the user if absent, otherwise merge ``fields`` over the stored row.

    ``fields`` uses model attribute names; ``id`` and ``role`` keys are ignored.
    """
    fields = {k: v for k, v in fields.items() if k not in ("id", "role", "created_at", "updated_at")}

    email = fields.get("email")
    if email and _email_taken(db, email, user_id):
        raise ValidationException("Email is already used by another account")

    user = db.query(User).filter(User.id == user_id).first()
    created = user is None
    if created:
        user = User(id=user_id, role=UserRole.student, **fields)
        user.updated_at = naive_utc_now()
        db.add(user)
    else:
        for key, value in fields.items():
            setattr(user, key, value)
        user.updated_at = _next_updated_at(user.updated_at)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.error(f"User upsert for {user_id} rejected by store: {e.orig}")
        raise
    db.refresh(user)
    audit.log_profile_upsert(user_id, created=created, fields=sorted(fields))
    return user


def update_profile(db: Session, user_id: str, payload: ProfileUpdate) -> User:
    return upsert_user(db, user_id, payload.model_dump(exclude_unset=True))


def sync_identity(db: Session, claims: IdentityClaims) -> User:
    """Login-time upsert: create the row from provider claims, or merge the
    non-empty claims over the existing one.

    The row is only written when a claim actually differs from what is stored.
    """
    user = db.query(User).filter(User.id == claims.id).first()
    fields = claims.model_dump(exclude={"id"}, exclude_none=True)
    if user:
        fields = {k: v for k, v in fields.items() if getattr(user, k) != v}
    if fields.get("email") and _email_taken(db, fields["email"], claims.id):
        # Email already bound to another identity; keep the login working without it
        logger.warning(f"Identity {claims.id} shares an email with an existing user; not copying email")
        fields.pop("email")
    if user and not fields:
        return user
    return upsert_user(db, claims.id, fields)


# ---------------------------------------------------------------------------
# Mentors
# ---------------------------------------------------------------------------

def create_mentor(db: Session, actor_id: str, payload: MentorCreate) -> Mentor:
    _require_user(db, actor_id)
    if db.query(Mentor).filter(Mentor.user_id == actor_id).first():
        raise ValidationException("Mentor profile already exists for this user")
    mentor = Mentor(user_id=actor_id, rating=0, **payload.model_dump())
    return _insert(db, mentor, actor_id=actor_id)


def update_mentor(db: Session, actor: User, mentor_id: str, payload: MentorUpdate) -> Mentor:
    mentor = db.query(Mentor).filter(Mentor.id == mentor_id).first()
    if not mentor:
        raise NotFoundException("Mentor not found")
    if mentor.user_id != actor.id and actor.role != UserRole.admin:
        raise ForbiddenException("Only the mentor or an admin can update this profile")

    data = payload.model_dump(exclude_unset=True)
    for key, value in data.items():
        if key == "is_available" and value is None:
            continue
        setattr(mentor, key, value)
    db.commit()
    db.refresh(mentor)
    audit.log_mentor_update(actor.id, mentor.id, fields=sorted(data))
    return mentor


# ---------------------------------------------------------------------------
# Notes
# ---------------------------------------------------------------------------

def create_note(db: Session, actor_id: str, payload: NoteCreate) -> Note:
    _require_user(db, actor_id)
    note = Note(uploaded_by=actor_id, downloads=0, **payload.model_dump())
    return _insert(db, note, actor_id=actor_id)


def increment_note_downloads(db: Session, note_id: str, actor_id: str | None = None) -> None:
    """Add one to the counter in a single UPDATE so concurrent downloads are never lost."""
    updated = (
        db.query(Note)
        .filter(Note.id == note_id)
        .update({Note.downloads: Note.downloads + 1}, synchronize_session=False)
    )
    db.commit()
    if updated == 0:
        raise NotFoundException("Note not found")
    audit.log_note_download(note_id, user_id=actor_id)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def create_event(db: Session, actor_id: str, payload: EventCreate) -> Event:
    _require_user(db, actor_id)
    event = Event(created_by=actor_id, **payload.model_dump())
    return _insert(db, event, actor_id=actor_id)


# ---------------------------------------------------------------------------
# Directory collections
# ---------------------------------------------------------------------------

def create_club(db: Session, payload: ClubCreate) -> Club:
    return _insert(db, Club(**payload.model_dump()))


def create_opportunity(db: Session, payload: OpportunityCreate) -> Opportunity:
    return _insert(db, Opportunity(**payload.model_dump()))


def create_project_ifp(db: Session, payload: ProjectIfpCreate) -> ProjectIfp:
    return _insert(db, ProjectIfp(**payload.model_dump()))


def create_link(db: Session, payload: LinkCreate) -> Link:
    return _insert(db, Link(**payload.model_dump()))


def create_discussion_channel(db: Session, payload: DiscussionChannelCreate) -> DiscussionChannel:
    return _insert(db, DiscussionChannel(**payload.model_dump()))
