"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import Numeric, cast
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.crud import company as company_crud
from app.crud.base import check_fields, update_row
from app.models.job import Job
from app.schemas.job import JobCreateRequest

logger = logging.getLogger(__name__)

COLUMN_NAMES = {"companyHandle": "company_handle"}
IMMUTABLE_FIELDS = {"id", "companyHandle"}
UPDATABLE_FIELDS = {"title", "salary", "equity"}


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    """
    Retrieve a job by its ID.

    Returns:
        Job instance if found, None otherwise
    """
    return db.query(Job).filter(Job.id == job_id).first()


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job under an existing company.

    The (title, company_handle) pair must not already exist.

    Raises:
        BadRequestError: If the company does not exist
        DuplicateError: If the company already has a job with this title
    """
    if not company_crud.get_by_handle(db, job_data.company_handle):
        raise BadRequestError(f"No company: {job_data.company_handle}")

    duplicate = db.query(Job).filter(
        Job.title == job_data.title,
        Job.company_handle == job_data.company_handle,
    ).first()
    if duplicate:
        raise DuplicateError(f"Duplicate job: {job_data.title}")

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError(f"Duplicate job: {job_data.title}")
    db.refresh(db_job)

    return db_job


def find_all(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None,
) -> List[Job]:
    """
    Retrieve jobs ordered by title, optionally filtered.

    All supplied filters must match:
        title: case-insensitive substring of the job title
        min_salary: salary at least this much
        has_equity: when True, only jobs with non-zero equity
    """
    query = db.query(Job)

    if title:
        query = query.filter(Job.title.icontains(title, autoescape=True))
    if min_salary is not None:
        query = query.filter(Job.salary >= min_salary)
    if has_equity:
        query = query.filter(cast(Job.equity, Numeric) > 0)

    return query.order_by(Job.title, Job.id).all()


def get(db: Session, job_id: int) -> Job:
    """
    Raises:
        NotFoundError: If no job has this id
    """
    job = get_by_id(db, job_id)
    if not job:
        raise NotFoundError(f"No job with id of: {job_id}")
    return job


def update(db: Session, job_id: int, data: Dict[str, Any]) -> Job:
    """
    Partially update a job. Only title, salary and equity may change.

    Raises:
        BadRequestError: If data names id, companyHandle or an unknown field
        EmptyUpdateError: If data is empty
        NotFoundError: If no job has this id
    """
    if IMMUTABLE_FIELDS & set(data):
        raise BadRequestError("Cannot update id or companyHandle")
    check_fields(data, UPDATABLE_FIELDS)

    if not get_by_id(db, job_id):
        raise NotFoundError(f"No job with id of: {job_id}")

    update_row(db, "jobs", "id", job_id, data, COLUMN_NAMES)

    return get(db, job_id)


def remove(db: Session, job_id: int) -> None:
    """
    Raises:
        NotFoundError: If no job has this id
    """
    job = get_by_id(db, job_id)
    if not job:
        raise NotFoundError(f"No job with id of: {job_id}")

    db.delete(job)
    db.commit()
    logger.info(f"Deleted job {job_id}")
