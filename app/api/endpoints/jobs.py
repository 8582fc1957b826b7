import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, get_current_claims
from app.core.permissions import TokenClaims
from app.crud import job as job_crud
from app.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobEnvelope,
    JobListResponse,
    JobDeleteResponse,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Create a job under an existing company.

    Authorization required: admin
    """
    ensure_admin(claims)
    job = job_crud.create(db, request)
    logger.info(f"Admin {claims.subject} created job {job.id}: {job.title} ({job.company_handle})")
    return {"job": job}


@router.get("", response_model=JobListResponse)
def list_jobs(
    title: Optional[str] = None,
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    db: Session = Depends(get_db),
):
    """
    List jobs ordered by title.

    Filters (all optional, combined with AND):
        title: case-insensitive partial match
        minSalary: minimum salary
        hasEquity: true to keep only jobs offering non-zero equity
    """
    jobs = job_crud.find_all(db, title=title, min_salary=min_salary, has_equity=has_equity)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Partially update a job: title, salary, equity.
    id and companyHandle cannot be changed.

    Authorization required: admin
    """
    ensure_admin(claims)
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"job": job_crud.update(db, job_id, data)}


@router.delete("/{job_id}", response_model=JobDeleteResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Delete a job by ID.

    Authorization required: admin
    """
    ensure_admin(claims)
    job_crud.remove(db, job_id)
    return {"deleted": f"Job with id of: {job_id}"}
