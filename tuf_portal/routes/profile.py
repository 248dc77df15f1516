from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.user import ProfileUpdate, UserOut
from tuf_portal.services import mutations
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.put("", response_model=UserOut)
def update_profile(
    payload: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Merge the supplied fields over the caller's profile (creating it if needed)."""
    return mutations.update_profile(db, current_user.id, payload)
