# routers/__init__.py
"""
API routers. Each router owns one URL prefix.
"""
from .auth import router as auth_router
from .media import router as media_router
from .contact import router as contact_router
from .admin import router as admin_router

__all__ = [
     "auth_router",
     "media_router",
     "contact_router",
     "admin_router",
]
