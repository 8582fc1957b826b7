from pydantic import Field
from typing import List, Optional

from app.schemas.base import MAX_INT, CamelModel, CamelRequest

# Decimal string in [0, 1], e.g. "0", "0.05", "1.0"
EQUITY_PATTERN = r"^(0(\.\d+)?|1(\.0+)?)$"


class JobCreateRequest(CamelRequest):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_INT)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdateRequest(CamelRequest):
    """Schema for a partial job update; id and companyHandle are rejected"""
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=MAX_INT)
    equity: Optional[str] = Field(None, pattern=EQUITY_PATTERN)


class JobResponse(CamelModel):
    """Schema for job response"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str


class JobEnvelope(CamelModel):
    job: JobResponse


class JobListResponse(CamelModel):
    jobs: List[JobResponse]


class JobDeleteResponse(CamelModel):
    deleted: str
