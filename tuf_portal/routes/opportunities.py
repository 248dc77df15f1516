from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.filters import OpportunityFilters, parse_filters
from tuf_portal.schemas.opportunity import OpportunityCreate, OpportunityOut
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/opportunities", tags=["Opportunities"])


def opportunity_filters(type: Optional[str] = None, tags: Optional[str] = None) -> OpportunityFilters:
    return parse_filters(OpportunityFilters, type=type, tags=tags)


@router.get("", response_model=list[OpportunityOut])
def list_opportunities(filters: OpportunityFilters = Depends(opportunity_filters), db: Session = Depends(get_db)):
    return queries.list_opportunities(db, filters)


@router.post("", response_model=OpportunityOut)
def create_opportunity(
    payload: OpportunityCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_opportunity(db, payload)
