"""Typed filter objects for the list endpoints.

Query strings arrive as raw text. Each filter model turns blank values into
"no constraint", splits comma lists, and rejects malformed values (a
non-numeric ``semester``, ``upcoming=maybe``) instead of passing them on to
the store.
"""
from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tuf_portal.exceptions import ValidationException

F = TypeVar("F", bound="FilterModel")


class FilterModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_absent(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


def split_csv(v):
    """``"IEEE, ACM,,"`` -> ``("IEEE", "ACM")``; ``None`` / empty -> ``None``."""
    if v is None:
        return None
    if isinstance(v, str):
        v = v.split(",")
    items = tuple(s.strip() for s in v if s and s.strip())
    return items or None


class MentorFilters(FilterModel):
    department: Optional[str] = None
    skills: Optional[tuple[str, ...]] = None

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, v):
        return split_csv(v)


class NoteFilters(FilterModel):
    dept: Optional[str] = None
    semester: Optional[int] = Field(None, ge=1)
    course_code: Optional[str] = None
    search: Optional[str] = None


class EventFilters(FilterModel):
    tags: Optional[tuple[str, ...]] = None
    upcoming: Optional[bool] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        return split_csv(v)


class ClubFilters(FilterModel):
    category: Optional[str] = None


class OpportunityFilters(FilterModel):
    type: Optional[str] = None
    tags: Optional[tuple[str, ...]] = None

    @field_validator("tags", mode="before")
    @classmethod
    def split_tags(cls, v):
        return split_csv(v)


class ProjectIfpFilters(FilterModel):
    dept: Optional[str] = None
    area: Optional[str] = None


class LinkFilters(FilterModel):
    group: Optional[str] = None
    search: Optional[str] = None


class DiscussionFilters(FilterModel):
    platform: Optional[str] = None
    topic_tags: Optional[tuple[str, ...]] = None

    @field_validator("topic_tags", mode="before")
    @classmethod
    def split_topic_tags(cls, v):
        return split_csv(v)


def parse_filters(model: Type[F], **raw) -> F:
    """Build a filter object or raise ``ValidationException`` (400) describing the bad parameter."""
    try:
        return model(**raw)
    except ValidationError as e:
        errors = [
            {"param": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        bad = ", ".join(err["param"] for err in errors)
        raise ValidationException(f"Invalid filter parameter: {bad}", errors=errors)
