# dependencies.py
"""
FastAPI dependencies: bearer token resolution and external collaborators.

The object store, email sender and Google assertion decoder are created
lazily and only through these functions, so tests swap them with
app.dependency_overrides.
"""
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request

from azure_blob import AzureBlobStore
from errors import NotAuthenticated
from models import UserRole
from services.access_policy import Actor, require_admin
from utils.email import BrevoEmailSender
from utils.oauth import GoogleAssertionDecoder
from utils.security import decode_token


def _bearer_token(request: Request) -> Optional[str]:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          return None
     return auth.split(" ", 1)[1].strip() or None


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     token = _bearer_token(request)
     if not token:
          raise NotAuthenticated()
     return decode_token(token)


def get_current_actor(payload: dict = Depends(verify_token)) -> Actor:
     return Actor(id=payload["id"], role=UserRole(payload["role"]))


def get_optional_actor(request: Request) -> Optional[Actor]:
     """Anonymous when no Authorization header; a bad token is still rejected."""
     if request.headers.get("Authorization") is None:
          return None
     return get_current_actor(verify_token(request))


def admin_required(actor: Actor = Depends(get_current_actor)) -> Actor:
     require_admin(actor)
     return actor


@lru_cache
def get_object_store() -> AzureBlobStore:
     return AzureBlobStore()


@lru_cache
def get_email_sender() -> BrevoEmailSender:
     return BrevoEmailSender()


@lru_cache
def get_assertion_decoder() -> GoogleAssertionDecoder:
     return GoogleAssertionDecoder()
