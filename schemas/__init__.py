# schemas/__init__.py
from .base import CamelModel, MessageResponse
from .auth import (
     RegisterRequest,
     VerifyOtpRequest,
     LoginRequest,
     GoogleLoginRequest,
     ForgotPasswordRequest,
     ResetPasswordRequest,
     RegisterResponse,
     AuthResponse,
     UserResponse,
)
from .media import MediaResponse, MediaUpdate, BulkDownloadRequest, parse_boolish, parse_tags
from .contact import ContactCreate, ContactUpdate, ContactResponse
from .user import AdminUserUpdate, AdminUserSummary

__all__ = [
     "CamelModel",
     "MessageResponse",
     "RegisterRequest",
     "VerifyOtpRequest",
     "LoginRequest",
     "GoogleLoginRequest",
     "ForgotPasswordRequest",
     "ResetPasswordRequest",
     "RegisterResponse",
     "AuthResponse",
     "UserResponse",
     "MediaResponse",
     "MediaUpdate",
     "BulkDownloadRequest",
     "parse_boolish",
     "parse_tags",
     "ContactCreate",
     "ContactUpdate",
     "ContactResponse",
     "AdminUserUpdate",
     "AdminUserSummary",
]
