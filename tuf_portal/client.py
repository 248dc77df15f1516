"""
Python client for the portal API with a per-query result cache.

Every distinct (path, filter parameters) pair is its own cache entry. A
mutation drops every entry of the collection it touched, so the next read
refetches. When a refetch fails, the last good result for that key is
served instead (stale but available); the cache is never written with a
failed or partial response.

Usage:
    with httpx.Client(base_url="https://portal.example.edu") as http:
        portal = PortalClient(http, token=id_token)
        notes = portal.list_notes(dept="CSE", semester=3)
"""

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger("tuf_portal.client")

CacheKey = tuple[str, tuple[tuple[str, str], ...]]


class PortalClientError(Exception):
    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class LoginRequired(PortalClientError):
    """The API answered 401; send the user to ``login_url``."""

    def __init__(self, message: str, login_url: Optional[str]):
        super().__init__(401, message)
        self.login_url = login_url


def _normalize_params(params: dict[str, Any]) -> tuple[tuple[str, str], ...]:
    """Drop unset params, join list values with commas, sort by name."""
    normalized = []
    for key, value in params.items():
        if value is None or value == "" or value == [] or value == ():
            continue
        if isinstance(value, (list, tuple, set)):
            value = ",".join(str(v) for v in value)
        elif isinstance(value, bool):
            value = "true" if value else "false"
        normalized.append((key, str(value)))
    return tuple(sorted(normalized))


class QueryCache:
    def __init__(self):
        self._entries: dict[CacheKey, Any] = {}

    @staticmethod
    def key(path: str, params: Optional[dict[str, Any]] = None) -> CacheKey:
        return (path.rstrip("/"), _normalize_params(params or {}))

    def get(self, key: CacheKey) -> Optional[Any]:
        return self._entries.get(key)

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries

    def set(self, key: CacheKey, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, path: str) -> int:
        """Mark every cached query under ``path`` stale; returns how many were dropped."""
        path = path.rstrip("/")
        stale = [k for k in self._entries if k[0] == path or k[0].startswith(path + "/")]
        for k in stale:
            del self._entries[k]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()


class PortalClient:
    """Typed helpers over the REST surface; FastAPI's ``TestClient`` works as ``http``."""

    def __init__(self, http: httpx.Client, token: Optional[str] = None, cache: Optional[QueryCache] = None):
        self.http = http
        self.token = token
        self.cache = cache if cache is not None else QueryCache()
        # last good results, kept when an entry is invalidated so a failed refetch can fall back
        self._last_good: dict[CacheKey, Any] = {}

    def _headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}

    def _raise_for_status(self, response: httpx.Response) -> None:
        if response.status_code < 400:
            return
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") or response.reason_phrase or "Request failed"
        if response.status_code == 401:
            raise LoginRequired(message, body.get("login_url"))
        raise PortalClientError(response.status_code, message)

    # -- reads ------------------------------------------------------------

    def query(self, path: str, **params: Any) -> Any:
        key = self.cache.key(path, params)
        if key in self.cache:
            return self.cache.get(key)
        try:
            response = self.http.get(key[0], params=dict(key[1]), headers=self._headers())
            self._raise_for_status(response)
            data = response.json()
        except (httpx.HTTPError, PortalClientError) as e:
            if isinstance(e, LoginRequired) or key not in self._last_good:
                raise
            logger.warning(f"Refetch of {key[0]} failed ({e}); serving previous result")
            return self._last_good[key]
        self.cache.set(key, data)
        self._last_good[key] = data
        return data

    # -- writes -----------------------------------------------------------

    def mutate(self, method: str, path: str, invalidates: str, json: Optional[dict] = None) -> Any:
        response = self.http.request(method, path, json=json, headers=self._headers())
        self._raise_for_status(response)
        dropped = self.cache.invalidate(invalidates)
        logger.debug(f"{method} {path} invalidated {dropped} cached queries under {invalidates}")
        return response.json()

    # -- typed helpers ----------------------------------------------------

    def current_user(self) -> dict:
        return self.query("/api/auth/user")

    def update_profile(self, **fields: Any) -> dict:
        user = self.mutate("PUT", "/api/profile", invalidates="/api/auth/user", json=fields)
        # these listings embed the owning user
        for path in ("/api/mentors", "/api/notes", "/api/events"):
            self.cache.invalidate(path)
        return user

    def list_mentors(self, department: Optional[str] = None, skills: Optional[list[str]] = None) -> list[dict]:
        return self.query("/api/mentors", department=department, skills=skills)

    def become_mentor(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/mentors", invalidates="/api/mentors", json=fields)

    def list_notes(self, dept: Optional[str] = None, semester: Optional[int] = None,
                   course_code: Optional[str] = None, search: Optional[str] = None) -> list[dict]:
        return self.query("/api/notes", dept=dept, semester=semester, courseCode=course_code, search=search)

    def upload_note(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/notes", invalidates="/api/notes", json=fields)

    def record_download(self, note_id: str) -> dict:
        return self.mutate("POST", f"/api/notes/{note_id}/download", invalidates="/api/notes")

    def list_events(self, tags: Optional[list[str]] = None, upcoming: Optional[bool] = None) -> list[dict]:
        return self.query("/api/events", tags=tags, upcoming=upcoming)

    def create_event(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/events", invalidates="/api/events", json=fields)

    def list_clubs(self, category: Optional[str] = None) -> list[dict]:
        return self.query("/api/clubs", category=category)

    def create_club(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/clubs", invalidates="/api/clubs", json=fields)

    def list_opportunities(self, type: Optional[str] = None, tags: Optional[list[str]] = None) -> list[dict]:
        return self.query("/api/opportunities", type=type, tags=tags)

    def create_opportunity(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/opportunities", invalidates="/api/opportunities", json=fields)

    def list_projects(self, dept: Optional[str] = None, area: Optional[str] = None) -> list[dict]:
        return self.query("/api/projects-ifp", dept=dept, area=area)

    def create_project(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/projects-ifp", invalidates="/api/projects-ifp", json=fields)

    def list_links(self, group: Optional[str] = None, search: Optional[str] = None) -> list[dict]:
        return self.query("/api/links", group=group, search=search)

    def create_link(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/links", invalidates="/api/links", json=fields)

    def list_discussions(self, platform: Optional[str] = None, topic_tags: Optional[list[str]] = None) -> list[dict]:
        return self.query("/api/discussions", platform=platform, topicTags=topic_tags)

    def create_discussion(self, **fields: Any) -> dict:
        return self.mutate("POST", "/api/discussions", invalidates="/api/discussions", json=fields)
