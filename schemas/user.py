# schemas/user.py
from typing import Optional
from pydantic import EmailStr, Field

from models import UserRole
from .base import CamelModel


class AdminUserUpdate(CamelModel):
     name: Optional[str] = Field(None, max_length=100)
     email: Optional[EmailStr] = None
     role: Optional[UserRole] = None
     is_active: Optional[bool] = None


class AdminUserSummary(CamelModel):
     id: int
     name: str
     email: str
     role: UserRole
     is_active: bool
