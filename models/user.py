# models/user.py
import enum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class UserRole(str, enum.Enum):
     """Closed set of roles; anything else is rejected at the schema layer."""
     USER = "user"
     ADMIN = "admin"


class User(Base):
     """
     User model - central authentication table.

     password is nullable for accounts created through Google sign-in.
     Admin "delete" only flips is_active; the row is kept.
     """
     __tablename__ = "users"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(100), nullable=False)
     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=True)
     role = Column(
          Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
          default=UserRole.USER,
          nullable=False,
     )
     avatar = Column(String(500), nullable=True)
     is_verified = Column(Boolean, default=False, nullable=False)
     is_active = Column(Boolean, default=True, nullable=False)
     oauth_id = Column(String(255), nullable=True)
     created_at = Column(DateTime, default=utcnow, nullable=False)

     # Relationships
     media = relationship("Media", back_populates="owner")
     contacts = relationship("Contact", back_populates="submitter")

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role.value if self.role else None}')>"

     @property
     def is_admin(self) -> bool:
          return self.role == UserRole.ADMIN
