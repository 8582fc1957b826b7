"""
User model for authentication and job applications.

The username is the primary key and the token subject. Admin users may
manage every resource; plain users may only manage themselves.
"""

from sqlalchemy import Column, String, Boolean
from sqlalchemy.orm import relationship
from app.core.database import Base


class User(Base):
    __tablename__ = "users"

    username = Column(String(25), primary_key=True)

    # Authentication credentials
    hashed_password = Column(String, nullable=False)

    # User profile
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)

    is_admin = Column(Boolean, default=False, nullable=False)

    # Relationships
    applications = relationship(
        "Application",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Application.job_id",
    )
    jobs = relationship("Job", secondary="applications", viewonly=True, order_by="Job.id")

    def __repr__(self):
        return f"<User(username='{self.username}', is_admin={self.is_admin})>"
