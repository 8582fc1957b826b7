"""
CRUD operations for Company model.

Implements the Repository pattern to encapsulate all database operations
for companies, providing a clean interface for the API layer.
"""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import BadRequestError, DuplicateError, NotFoundError
from app.crud.base import check_fields, update_row
from app.models.company import Company
from app.schemas.company import CompanyCreateRequest

logger = logging.getLogger(__name__)

# API field name -> column name, for fields whose names differ
COLUMN_NAMES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}
UPDATABLE_FIELDS = {"name", "description", "numEmployees", "logoUrl"}


def get_by_handle(db: Session, handle: str) -> Optional[Company]:
    """
    Retrieve a company by its handle.

    Returns:
        Company instance if found, None otherwise
    """
    return db.query(Company).filter(Company.handle == handle).first()


def create(db: Session, company_data: CompanyCreateRequest) -> Company:
    """
    Create a new company in the database.

    Raises:
        DuplicateError: If the handle (or name) is already taken
    """
    if get_by_handle(db, company_data.handle):
        raise DuplicateError(f"Duplicate company: {company_data.handle}")

    db_company = Company(
        handle=company_data.handle,
        name=company_data.name,
        description=company_data.description,
        num_employees=company_data.num_employees,
        logo_url=company_data.logo_url,
    )

    db.add(db_company)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError(f"Duplicate company: {company_data.handle}")
    db.refresh(db_company)

    return db_company


def find_all(
    db: Session,
    name: Optional[str] = None,
    min_employees: Optional[int] = None,
    max_employees: Optional[int] = None,
) -> List[Company]:
    """
    Retrieve companies ordered by name, optionally filtered.

    All supplied filters must match:
        name: case-insensitive substring of the company name
        min_employees / max_employees: inclusive bounds on num_employees

    Raises:
        BadRequestError: If min_employees > max_employees
    """
    if min_employees is not None and max_employees is not None and min_employees > max_employees:
        raise BadRequestError("minEmployees cannot be greater than maxEmployees")

    query = db.query(Company)

    if name:
        query = query.filter(Company.name.icontains(name, autoescape=True))
    if min_employees is not None:
        query = query.filter(Company.num_employees >= min_employees)
    if max_employees is not None:
        query = query.filter(Company.num_employees <= max_employees)

    return query.order_by(Company.name).all()


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company with its jobs (company.jobs, ordered by id).

    Raises:
        NotFoundError: If no company has this handle
    """
    company = get_by_handle(db, handle)
    if not company:
        raise NotFoundError(f"No company: {handle}")
    return company


def update(db: Session, handle: str, data: Dict[str, Any]) -> Company:
    """
    Partially update a company. Only the fields present in `data` change.

    Args:
        data: API field names -> new values, e.g. {"numEmployees": 10}

    Raises:
        BadRequestError: If data names the handle or an unknown field
        EmptyUpdateError: If data is empty
        NotFoundError: If no company has this handle
    """
    if "handle" in data:
        raise BadRequestError("Cannot update handle")
    check_fields(data, UPDATABLE_FIELDS)

    if not get_by_handle(db, handle):
        raise NotFoundError(f"No company: {handle}")

    update_row(db, "companies", "handle", handle, data, COLUMN_NAMES)

    return get(db, handle)


def remove(db: Session, handle: str) -> None:
    """
    Delete a company and, through the cascade, its jobs.

    Raises:
        NotFoundError: If no company has this handle
    """
    company = get_by_handle(db, handle)
    if not company:
        raise NotFoundError(f"No company: {handle}")

    db.delete(company)
    db.commit()
    logger.info(f"Deleted company {handle}")
