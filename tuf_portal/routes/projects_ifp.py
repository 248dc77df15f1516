from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from tuf_portal.db import get_db
from tuf_portal.models.user import User
from tuf_portal.schemas.filters import ProjectIfpFilters, parse_filters
from tuf_portal.schemas.project_ifp import ProjectIfpCreate, ProjectIfpOut
from tuf_portal.services import mutations, queries
from tuf_portal.services.auth import get_current_user

router = APIRouter(prefix="/api/projects-ifp", tags=["IFP Projects"])


def project_filters(dept: Optional[str] = None, area: Optional[str] = None) -> ProjectIfpFilters:
    return parse_filters(ProjectIfpFilters, dept=dept, area=area)


@router.get("", response_model=list[ProjectIfpOut])
def list_projects(filters: ProjectIfpFilters = Depends(project_filters), db: Session = Depends(get_db)):
    """Faculty-guided projects, most recent year first."""
    return queries.list_projects_ifp(db, filters)


@router.post("", response_model=ProjectIfpOut)
def create_project(
    payload: ProjectIfpCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return mutations.create_project_ifp(db, payload)
