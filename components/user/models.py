"""User model for the database."""

from sqlalchemy import Boolean, Column, Integer, String, Date

from components.core.database import Base


class User(Base):
    """Back-office user; admins may record payments and edit bookings."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    login = Column(String(50), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # Hashed password
    registration_date = Column(Date, nullable=False)
    is_admin = Column(Boolean, nullable=False, default=False)
