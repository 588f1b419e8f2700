# services/__init__.py
from .access_policy import (
     Action,
     Actor,
     Resource,
     ResourceKind,
     authorize,
     is_allowed,
     require_admin,
)
from .auth_service import AuthService
from .media_service import MediaService
from .contact_service import ContactService
from .user_service import UserService

__all__ = [
     "Action",
     "Actor",
     "Resource",
     "ResourceKind",
     "authorize",
     "is_allowed",
     "require_admin",
     "AuthService",
     "MediaService",
     "ContactService",
     "UserService",
]
