# schemas/media.py
"""
Pydantic schemas for media endpoints, plus the parsers shared with the
multipart upload form (tags as "a,b,c", isShared as "true"/"false").
"""
from datetime import datetime
from typing import Any, List, Optional
from pydantic import Field, field_validator

from .base import CamelModel

TRUE_VALUES = {"true", "1", "yes", "on"}
FALSE_VALUES = {"false", "0", "no", "off"}


def parse_boolish(value: Any) -> Optional[bool]:
     """Returns None when the value is neither recognisably true nor false."""
     if isinstance(value, bool):
          return value
     if value is None:
          return None
     text = str(value).strip().lower()
     if text in TRUE_VALUES:
          return True
     if text in FALSE_VALUES:
          return False
     return None


def parse_tags(value: Any) -> List[str]:
     if value is None:
          return []
     items = value.split(",") if isinstance(value, str) else value
     cleaned = (str(item).strip() for item in items)
     return list(dict.fromkeys(tag for tag in cleaned if tag))


class MediaOwner(CamelModel):
     id: int
     name: str
     email: str


class MediaResponse(CamelModel):
     id: int
     title: str
     description: Optional[str] = None
     tags: List[str] = []
     image_url: str
     owner: MediaOwner
     is_shared: bool
     created_at: datetime


class MediaUpdate(CamelModel):
     """Only provided, non-empty fields are applied."""
     title: Optional[str] = Field(None, max_length=255)
     description: Optional[str] = None
     tags: Optional[List[str]] = None
     is_shared: Optional[bool] = None

     @field_validator("tags", mode="before")
     @classmethod
     def _split_tags(cls, value):
          if value is None:
               return None
          return parse_tags(value)

     @field_validator("is_shared", mode="before")
     @classmethod
     def _boolish(cls, value):
          return parse_boolish(value)


class BulkDownloadRequest(CamelModel):
     media_ids: List[int] = Field(default_factory=list)
