"""
User management endpoints.

Admins manage every account. A plain user may read, update, delete and
apply to jobs only as themselves. Each handler runs ensure_self_or_admin
once the request has validated and before any lookup happens.
"""

import logging
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_admin, ensure_self_or_admin, get_current_claims
from app.core.permissions import TokenClaims
from app.core.security import create_access_token
from app.crud import user as user_crud
from app.schemas.user import (
    UserCreateRequest,
    UserUpdateRequest,
    UserCreateResponse,
    UserEnvelope,
    UserDetailEnvelope,
    UserListResponse,
    UserDeleteResponse,
    ApplicationResponse,
)

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=UserCreateResponse)
def create_user(
    request: UserCreateRequest,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Add a new user, possibly an admin. This is not the registration
    endpoint; see POST /auth/register for that.

    Returns the new user and an access token for them.

    Authorization required: admin
    """
    ensure_admin(claims)
    user = user_crud.register(db, request)
    token = create_access_token(user.username, user.is_admin)
    return {"user": user, "token": token}


@router.post("/{username}/jobs/{job_id}", status_code=201, response_model=ApplicationResponse)
def apply_to_job(
    username: str,
    job_id: int,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Apply `username` to a job. Applying twice to the same job is rejected.

    Authorization required: same user or admin
    """
    ensure_self_or_admin(claims, username)
    user_crud.apply(db, username, job_id)
    return {"applied": job_id}


@router.get("", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    List all users.

    Authorization required: admin
    """
    ensure_admin(claims)
    return {"users": user_crud.find_all(db)}


@router.get("/{username}", response_model=UserDetailEnvelope)
def get_user(
    username: str,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Retrieve a user with the ids of the jobs they applied to.

    Authorization required: same user or admin
    """
    ensure_self_or_admin(claims, username)
    return {"user": user_crud.get(db, username)}


@router.patch("/{username}", response_model=UserEnvelope)
def update_user(
    username: str,
    request: UserUpdateRequest,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Partially update a user: firstName, lastName, password, email.

    Authorization required: same user or admin
    """
    ensure_self_or_admin(claims, username)
    data = request.model_dump(exclude_unset=True, by_alias=True)
    return {"user": user_crud.update(db, username, data)}


@router.delete("/{username}", response_model=UserDeleteResponse)
def delete_user(
    username: str,
    db: Session = Depends(get_db),
    claims: TokenClaims = Depends(get_current_claims),
):
    """
    Delete a user and their applications.

    Authorization required: same user or admin
    """
    ensure_self_or_admin(claims, username)
    user_crud.remove(db, username)
    logger.info(f"{claims.subject} deleted user {username}")
    return {"deleted": username}
