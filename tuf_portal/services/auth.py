import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from firebase_admin import auth as firebase_auth
from sqlalchemy.orm import Session

from tuf_portal.core.settings import settings
from tuf_portal.db import get_db
from tuf_portal.exceptions import UnauthorizedException
from tuf_portal.models.user import User, UserRole
from tuf_portal.schemas.user import IdentityClaims
from tuf_portal.services.mutations import sync_identity

logger = logging.getLogger("tuf_portal.auth")

security = HTTPBearer(auto_error=False)

# Development/test tokens; never honoured in production
MOCK_TOKENS = {
    "mock-student-token": ("student-1", "Student", "One", "student@example.com", UserRole.student),
    "mock-senior-token": ("senior-1", "Senior", "One", "senior@example.com", UserRole.senior),
    "mock-admin-token": ("admin-1", "Admin", "One", "admin@example.com", UserRole.admin),
}


def claims_from_token(decoded_token: dict) -> IdentityClaims:
    """Map provider token claims onto the user fields we keep."""
    uid = decoded_token.get("uid") or decoded_token.get("sub")
    if not uid:
        raise UnauthorizedException("Token has no subject")

    first_name = decoded_token.get("given_name") or decoded_token.get("first_name")
    last_name = decoded_token.get("family_name") or decoded_token.get("last_name")
    if not (first_name or last_name) and decoded_token.get("name"):
        first_name, _, last_name = decoded_token["name"].partition(" ")

    return IdentityClaims(
        id=uid,
        email=(decoded_token.get("email") or None),
        first_name=first_name or None,
        last_name=last_name or None,
        profile_image_url=decoded_token.get("picture") or decoded_token.get("profile_image_url"),
    )


def _mock_user(db: Session, token: str) -> Optional[User]:
    if settings.is_production or token not in MOCK_TOKENS:
        return None
    uid, first, last, email, role = MOCK_TOKENS[token]
    user = db.query(User).filter(User.id == uid).first()
    if not user:
        user = sync_identity(db, IdentityClaims(id=uid, email=email, first_name=first, last_name=last))
        user.role = role
        db.commit()
        db.refresh(user)
    return user


def _resolve_user(db: Session, token: str) -> User:
    user = _mock_user(db, token)
    if user:
        return user

    try:
        decoded_token = firebase_auth.verify_id_token(token)
    except Exception:
        # verify_id_token raises a family of provider errors (expired, revoked, malformed, app not initialized)
        logger.info("Rejected bearer token")
        raise UnauthorizedException("Invalid or expired token")

    return sync_identity(db, claims_from_token(decoded_token))


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException("Authorization header missing or invalid")
    return _resolve_user(db, credentials.credentials)


def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> Optional[User]:
    if credentials is None or not credentials.credentials:
        return None
    try:
        return _resolve_user(db, credentials.credentials)
    except UnauthorizedException:
        return None

