import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, get_current_claims
from app.core.permissions import TokenClaims
from app.crud import company as company_crud
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyUpdateRequest,
    CompanyEnvelope,
    CompanyDetailEnvelope,
    CompanyListResponse,
    CompanyDeleteResponse,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Create a company.

    Authorization required: admin
    """
    ensure_admin(claims)
    company = company_crud.create(db, request)
    logger.info(f"Admin {claims.subject} created company {company.handle}")
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
def list_companies(
    name: Optional[str] = None,
    min_employees: Optional[int] = Query(None, alias="minEmployees", ge=0),
    max_employees: Optional[int] = Query(None, alias="maxEmployees", ge=0),
    db: Session = Depends(get_db),
):
    """
    List companies ordered by name.

    Filters (all optional, combined with AND):
        name: case-insensitive partial match on the company name
        minEmployees / maxEmployees: inclusive employee count bounds
    """
    companies = company_crud.find_all(
        db,
        name=name,
        min_employees=min_employees,
        max_employees=max_employees,
    )
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company together with its jobs."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Partially update a company: name, description, numEmployees, logoUrl.

    Authorization required: admin
    """
    ensure_admin(claims)
    data = request.model_dump(exclude_unset=True, by_alias=True)
    company = company_crud.update(db, handle, data)
    return {"company": company}


@router.delete("/{handle}", response_model=CompanyDeleteResponse)
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Delete a company and its jobs.

    Authorization required: admin
    """
    ensure_admin(claims)
    company_crud.remove(db, handle)
    return {"deleted": handle}
