# schemas/auth.py
"""
Pydantic schemas for the /api/auth endpoints.
"""
from datetime import datetime
from typing import Optional
from pydantic import AliasChoices, ConfigDict, EmailStr, Field

from models import UserRole
from .base import CamelModel


class RegisterRequest(CamelModel):
     name: str = Field(..., min_length=1, max_length=100)
     email: EmailStr
     password: str = Field(..., min_length=6, max_length=128)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {"name": "Jane Doe", "email": "jane@example.com", "password": "secret123"}
          }
     )


class VerifyOtpRequest(CamelModel):
     email: EmailStr
     otp: str = Field(..., min_length=1, max_length=10)


class LoginRequest(CamelModel):
     email: EmailStr
     password: str


class GoogleLoginRequest(CamelModel):
     assertion: str = Field(..., min_length=1, validation_alias=AliasChoices("assertion", "tokenId", "credential"))


class ForgotPasswordRequest(CamelModel):
     email: EmailStr


class ResetPasswordRequest(CamelModel):
     email: EmailStr
     otp: str = Field(..., min_length=1, max_length=10)
     new_password: str = Field(..., min_length=6, max_length=128)


class RegisterResponse(CamelModel):
     id: int
     name: str
     email: str
     message: str = "OTP sent to your email. Please verify your account."


class AuthResponse(CamelModel):
     """Returned by verify-otp, login and google sign-in."""
     id: int
     name: str
     email: str
     role: UserRole
     token: str


class UserResponse(CamelModel):
     """User without password."""
     id: int
     name: str
     email: str
     role: UserRole
     avatar: Optional[str] = None
     is_verified: bool
     is_active: bool
     created_at: datetime
