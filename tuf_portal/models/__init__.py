from tuf_portal.models.user import User, UserRole
from tuf_portal.models.mentor import Mentor
from tuf_portal.models.note import Note
from tuf_portal.models.event import Event
from tuf_portal.models.club import Club
from tuf_portal.models.opportunity import Opportunity
from tuf_portal.models.project_ifp import ProjectIfp
from tuf_portal.models.link import Link
from tuf_portal.models.discussion_channel import DiscussionChannel

__all__ = [
    "User",
    "UserRole",
    "Mentor",
    "Note",
    "Event",
    "Club",
    "Opportunity",
    "ProjectIfp",
    "Link",
    "DiscussionChannel",
]
