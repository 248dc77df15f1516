"""Audit logging helper functions for key domain events.

Standard single-line logs so they are easy to index.
"""
from __future__ import annotations
import logging
from typing import Optional, Any

from tuf_portal.utils.datetime import utc_now

_logger = logging.getLogger("tuf_portal.audit")


def _emit(event: str, user_id: Optional[str] = None, **data: Any):
    payload = {"ts": utc_now().isoformat(), "event": event}
    if user_id:
        payload["user_id"] = user_id
    payload.update(data)
    parts = [f"{k}={repr(v)}" for k, v in payload.items()]
    _logger.info("AUDIT " + " ".join(parts))

# Public convenience wrappers

def log_entity_create(table: str, entity_id: str, actor_id: Optional[str] = None):
    _emit(f"{table}.create", user_id=actor_id, entity_id=entity_id)

def log_profile_upsert(user_id: str, created: bool, fields: list[str]):
    _emit("users.upsert", user_id=user_id, created=created, fields=fields)

def log_mentor_update(user_id: str, mentor_id: str, fields: list[str]):
    _emit("mentors.update", user_id=user_id, mentor_id=mentor_id, fields=fields)

def log_note_download(note_id: str, user_id: Optional[str] = None):
    _emit("notes.download", user_id=user_id, note_id=note_id)
