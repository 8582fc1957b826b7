"""
CRUD operations for User model, plus authentication and job applications.
"""

import logging
from typing import Any, Dict, List, Optional, Union
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import DuplicateError, NotFoundError, UnauthorizedError
from app.core.security import get_password_hash, verify_password
from app.crud import job as job_crud
from app.crud.base import check_fields, update_row
from app.models.application import Application
from app.models.user import User
from app.schemas.user import UserCreateRequest, UserRegisterRequest

logger = logging.getLogger(__name__)

COLUMN_NAMES = {
    "firstName": "first_name",
    "lastName": "last_name",
    "password": "hashed_password",
}
UPDATABLE_FIELDS = {"firstName", "lastName", "password", "email"}


def get_by_username(db: Session, username: str) -> Optional[User]:
    """
    Retrieve a user by username.

    Returns:
        User instance if found, None otherwise
    """
    return db.query(User).filter(User.username == username).first()


def register(db: Session, user_data: Union[UserRegisterRequest, UserCreateRequest]) -> User:
    """
    Create a user with a bcrypt-hashed password.

    Only UserCreateRequest (admin-issued) can set is_admin.

    Raises:
        DuplicateError: If the username is taken
    """
    if get_by_username(db, user_data.username):
        raise DuplicateError(f"Duplicate username: {user_data.username}")

    db_user = User(
        username=user_data.username,
        hashed_password=get_password_hash(user_data.password),
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        is_admin=getattr(user_data, "is_admin", False),
    )

    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError(f"Duplicate username: {user_data.username}")
    db.refresh(db_user)

    logger.info(f"Registered user {db_user.username} (admin={db_user.is_admin})")
    return db_user


def authenticate(db: Session, username: str, password: str) -> User:
    """
    Check a username/password pair.

    Raises:
        UnauthorizedError: If the user is unknown or the password is wrong
    """
    user = get_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        raise UnauthorizedError("Invalid username/password")
    return user


def find_all(db: Session) -> List[User]:
    return db.query(User).order_by(User.username).all()


def get(db: Session, username: str) -> User:
    """
    Retrieve a user; user.jobs lists the jobs applied to.

    Raises:
        NotFoundError: If no user has this username
    """
    user = get_by_username(db, username)
    if not user:
        raise NotFoundError(f"No user: {username}")
    return user


def update(db: Session, username: str, data: Dict[str, Any]) -> User:
    """
    Partially update a user. A new password is hashed before it is stored.

    Raises:
        BadRequestError: If data names a field that cannot be changed
        EmptyUpdateError: If data is empty
        NotFoundError: If no user has this username
    """
    check_fields(data, UPDATABLE_FIELDS)

    if not get_by_username(db, username):
        raise NotFoundError(f"No user: {username}")

    fields = dict(data)
    if fields.get("password") is not None:
        fields["password"] = get_password_hash(fields["password"])

    update_row(db, "users", "username", username, fields, COLUMN_NAMES)

    return get(db, username)


def remove(db: Session, username: str) -> None:
    """
    Delete a user and their applications.

    Raises:
        NotFoundError: If no user has this username
    """
    user = get_by_username(db, username)
    if not user:
        raise NotFoundError(f"No user: {username}")

    db.delete(user)
    db.commit()
    logger.info(f"Deleted user {username}")


def apply(db: Session, username: str, job_id: int) -> Application:
    """
    Record that `username` applied to `job_id`.

    Raises:
        NotFoundError: If the user or the job does not exist
        DuplicateError: If this user already applied to this job
    """
    if not get_by_username(db, username):
        raise NotFoundError(f"No user: {username}")
    if not job_crud.get_by_id(db, job_id):
        raise NotFoundError(f"No job with id of: {job_id}")

    existing = db.query(Application).filter(
        Application.username == username,
        Application.job_id == job_id,
    ).first()
    if existing:
        raise DuplicateError(f"{username} already applied to job {job_id}")

    application = Application(username=username, job_id=job_id)
    db.add(application)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateError(f"{username} already applied to job {job_id}")

    logger.info(f"User {username} applied to job {job_id}")
    return application
