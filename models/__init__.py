# models/__init__.py
from .base import Base
from .user import User, UserRole
from .otp import OTP
from .media import Media, MediaTag
from .contact import Contact

__all__ = [
     "Base",
     "User",
     "UserRole",
     "OTP",
     "Media",
     "MediaTag",
     "Contact",
]
