"""
Pydantic schemas for users, authentication and job applications.
"""

from pydantic import EmailStr, Field, field_validator
from typing import List, Optional

from app.schemas.base import CamelModel, CamelRequest


class UserRegisterRequest(CamelRequest):
    """Request schema for self-registration (never creates an admin)."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=72)  # bcrypt limit
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr


class UserCreateRequest(UserRegisterRequest):
    """Request schema for admin-created users, which may be admins."""
    is_admin: bool = False


class UserUpdateRequest(CamelRequest):
    """Partial user update. Username and admin flag cannot be changed here."""
    password: Optional[str] = Field(None, min_length=5, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None


class UserLoginRequest(CamelRequest):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    """JWT token response."""
    token: str


class UserResponse(CamelModel):
    """User profile response (no sensitive data)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetailResponse(UserResponse):
    """User profile with the ids of the jobs applied to."""
    jobs: List[int] = []

    @field_validator("jobs", mode="before")
    @classmethod
    def job_ids(cls, v):
        """Accept Job rows (from User.jobs) as well as plain ids"""
        return [getattr(job, "id", job) for job in v]


class UserEnvelope(CamelModel):
    user: UserResponse


class UserDetailEnvelope(CamelModel):
    user: UserDetailResponse


class UserCreateResponse(CamelModel):
    user: UserResponse
    token: str


class UserListResponse(CamelModel):
    users: List[UserResponse]


class UserDeleteResponse(CamelModel):
    deleted: str


class ApplicationResponse(CamelModel):
    applied: int
