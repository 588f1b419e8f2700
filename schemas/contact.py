# schemas/contact.py
from datetime import datetime
from typing import Optional
from pydantic import EmailStr, Field

from .base import CamelModel


class ContactCreate(CamelModel):
     name: str = Field(..., min_length=1, max_length=100)
     email: EmailStr
     message: str = Field(..., min_length=1)


class ContactUpdate(CamelModel):
     message: Optional[str] = None


class ContactSubmitter(CamelModel):
     id: int
     name: str
     email: str


class ContactResponse(CamelModel):
     id: int
     name: str
     email: str
     message: str
     user_id: Optional[int] = None
     submitter: Optional[ContactSubmitter] = None
     created_at: datetime
     updated_at: datetime
