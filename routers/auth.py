# routers/auth.py
"""
Authentication routes: register, OTP verification, login, Google sign-in,
password reset and the current user's profile.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_assertion_decoder, get_current_actor, get_email_sender
from schemas import (
     AuthResponse,
     ForgotPasswordRequest,
     GoogleLoginRequest,
     LoginRequest,
     MessageResponse,
     RegisterRequest,
     RegisterResponse,
     ResetPasswordRequest,
     UserResponse,
     VerifyOtpRequest,
)
from services import Actor, AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _auth_response(user, token: str) -> AuthResponse:
     return AuthResponse(id=user.id, name=user.name, email=user.email, role=user.role, token=token)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register_user(
     body: RegisterRequest,
     db: Session = Depends(get_session),
     email_sender=Depends(get_email_sender),
):
     user = AuthService.register(db, email_sender, body.name, body.email, body.password)
     return RegisterResponse(id=user.id, name=user.name, email=user.email)


@router.post("/verify-otp", response_model=AuthResponse)
def verify_otp(body: VerifyOtpRequest, db: Session = Depends(get_session)):
     user, token = AuthService.verify_otp(db, body.email, body.otp)
     return _auth_response(user, token)


@router.post("/login", response_model=AuthResponse)
def login_user(body: LoginRequest, db: Session = Depends(get_session)):
     user, token = AuthService.login(db, body.email, body.password)
     return _auth_response(user, token)


@router.post("/google", response_model=AuthResponse)
def google_login(
     body: GoogleLoginRequest,
     response: Response,
     db: Session = Depends(get_session),
     decoder=Depends(get_assertion_decoder),
):
     identity = decoder.decode(body.assertion)
     user, token, created = AuthService.oauth_login(db, identity)
     if created:
          response.status_code = status.HTTP_201_CREATED
     return _auth_response(user, token)


@router.post("/forgot-password", response_model=MessageResponse)
def forgot_password(
     body: ForgotPasswordRequest,
     db: Session = Depends(get_session),
     email_sender=Depends(get_email_sender),
):
     AuthService.forgot_password(db, email_sender, body.email)
     return MessageResponse(message="OTP sent to your email")


@router.post("/reset-password", response_model=MessageResponse)
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_session)):
     AuthService.reset_password(db, body.email, body.otp, body.new_password)
     return MessageResponse(message="Password reset successfully")


@router.get("/me", response_model=UserResponse)
def get_me(actor: Actor = Depends(get_current_actor), db: Session = Depends(get_session)):
     return UserResponse.model_validate(AuthService.get_user(db, actor.id))
