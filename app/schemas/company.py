from pydantic import Field
from typing import List, Optional

from app.schemas.base import MAX_INT, CamelModel, CamelRequest


class CompanyCreateRequest(CamelRequest):
    """Schema for creating a new company"""
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: str
    num_employees: Optional[int] = Field(None, ge=0, le=MAX_INT)
    logo_url: Optional[str] = None


class CompanyUpdateRequest(CamelRequest):
    """Schema for a partial company update; the handle cannot change"""
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, le=MAX_INT)
    logo_url: Optional[str] = None


class CompanyResponse(CamelModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(CamelModel):
    """Job as listed under its company"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None


class CompanyDetailResponse(CompanyResponse):
    jobs: List[CompanyJob] = []


class CompanyEnvelope(CamelModel):
    company: CompanyResponse


class CompanyDetailEnvelope(CamelModel):
    company: CompanyDetailResponse


class CompanyListResponse(CamelModel):
    companies: List[CompanyResponse]


class CompanyDeleteResponse(CamelModel):
    deleted: str
