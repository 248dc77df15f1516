from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.exceptions import NotFoundException
from tuf_portal.models.user import User
from tuf_portal.schemas.user import UserOut
from tuf_portal.services import queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.get("/user", response_model=UserOut)
def get_auth_user(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    """Return the signed-in user's stored identity record."""
    user = queries.get_user(db, current_user.id)
    if not user:
        raise NotFoundException("User not found")
    return user
