# services/auth_service.py
"""
Auth Service - registration, OTP verification, login and password reset.

Email delivery happens after the database commit and its failures are only
logged: a user whose OTP email was lost stays registered but unverified and
can ask for a new code through forgot-password.
"""
from datetime import timedelta
from typing import Tuple

from sqlalchemy.orm import Session

import config
from errors import (
     AccountDeactivated,
     DuplicateEmail,
     EmailTransportError,
     InvalidCredentials,
     InvalidOtp,
     NotFound,
     NotVerified,
)
from models import OTP, User, UserRole
from models.base import utcnow
from utils.email import otp_email_body
from utils.logger import get_logger
from utils.security import generate_otp, hash_password, mint_token, verify_password

logger = get_logger(__name__)


class AuthService:
     """Service class for identity and session related business logic."""

     @staticmethod
     def find_user_by_email(db: Session, email: str) -> User | None:
          return db.query(User).filter(User.email == email).first()

     @staticmethod
     def issue_token(user: User) -> str:
          return mint_token(user.id, user.role)

     @staticmethod
     def register(db: Session, email_sender, name: str, email: str, raw_password: str) -> User:
          """
          Create an unverified user and email them a verification code.

          Raises:
               DuplicateEmail: any user, verified or not, already has this email
          """
          if AuthService.find_user_by_email(db, email):
               raise DuplicateEmail()

          user = User(
               name=name,
               email=email,
               password=hash_password(raw_password),
               role=UserRole.USER,
               is_verified=False,
               is_active=True,
          )
          db.add(user)
          code = AuthService._create_otp(db, email)
          db.commit()
          db.refresh(user)
          logger.info("User %s registered (id=%s), awaiting verification", email, user.id)

          AuthService._send_otp(email_sender, email, code, "Verify your email", "Your verification code")
          return user

     @staticmethod
     def verify_otp(db: Session, email: str, code: str) -> Tuple[User, str]:
          if not AuthService._find_valid_otp(db, email, code):
               raise InvalidOtp()

          user = AuthService.find_user_by_email(db, email)
          if not user:
               raise NotFound("User not found")

          user.is_verified = True
          AuthService._consume_otps(db, email)
          db.commit()
          logger.info("User %s verified", email)
          return user, AuthService.issue_token(user)

     @staticmethod
     def login(db: Session, email: str, raw_password: str) -> Tuple[User, str]:
          """
          Raises:
               InvalidCredentials: unknown email or wrong password (same message for both)
               AccountDeactivated: an admin soft-deleted the account
               NotVerified: the email OTP was never confirmed
          """
          user = AuthService.find_user_by_email(db, email)
          password_ok = verify_password(raw_password, user.password if user else None)
          if not user or not password_ok:
               raise InvalidCredentials()
          if not user.is_active:
               raise AccountDeactivated()
          if not user.is_verified:
               raise NotVerified()
          return user, AuthService.issue_token(user)

     @staticmethod
     def oauth_login(db: Session, identity: dict) -> Tuple[User, str, bool]:
          """
          Sign in with an already-decoded Google identity.

          Returns (user, token, created). New accounts are created verified.
          """
          email = identity["email"]
          oauth_id = identity.get("subject") or email

          user = AuthService.find_user_by_email(db, email)
          if user:
               if not user.is_active:
                    raise AccountDeactivated()
               if not user.oauth_id:
                    user.oauth_id = oauth_id
                    db.commit()
               return user, AuthService.issue_token(user), False

          user = User(
               name=identity["name"],
               email=email,
               avatar=identity.get("avatar"),
               oauth_id=oauth_id,
               role=UserRole.USER,
               is_verified=True,
               is_active=True,
          )
          db.add(user)
          db.commit()
          db.refresh(user)
          logger.info("User %s created through Google sign-in (id=%s)", email, user.id)
          return user, AuthService.issue_token(user), True

     @staticmethod
     def forgot_password(db: Session, email_sender, email: str) -> None:
          if not AuthService.find_user_by_email(db, email):
               raise NotFound("User not found")
          code = AuthService._create_otp(db, email)
          db.commit()
          AuthService._send_otp(email_sender, email, code, "Reset Password OTP", "Your password reset code")

     @staticmethod
     def reset_password(db: Session, email: str, code: str, new_password: str) -> None:
          if not AuthService._find_valid_otp(db, email, code):
               raise InvalidOtp()

          user = AuthService.find_user_by_email(db, email)
          if not user:
               raise NotFound("User not found")

          user.password = hash_password(new_password)
          AuthService._consume_otps(db, email)
          db.commit()
          logger.info("Password reset for %s", email)

     @staticmethod
     def get_user(db: Session, user_id: int) -> User:
          user = db.get(User, user_id)
          if not user:
               raise NotFound("User not found")
          return user

     # -----------------------------------------------------------------------
     # OTP helpers
     # -----------------------------------------------------------------------

     @staticmethod
     def _create_otp(db: Session, email: str) -> str:
          code = generate_otp()
          db.add(OTP(
               email=email,
               code=code,
               expires_at=utcnow() + timedelta(minutes=config.OTP_EXPIRE_MINUTES),
          ))
          return code

     @staticmethod
     def _find_valid_otp(db: Session, email: str, code: str) -> OTP | None:
          return (
               db.query(OTP)
               .filter(OTP.email == email, OTP.code == code, OTP.expires_at > utcnow())
               .first()
          )

     @staticmethod
     def _consume_otps(db: Session, email: str) -> int:
          """Delete every code issued for the email, not only the one used."""
          return db.query(OTP).filter(OTP.email == email).delete(synchronize_session=False)

     @staticmethod
     def _send_otp(email_sender, email: str, code: str, subject: str, heading: str) -> None:
          try:
               email_sender.send(email, subject, otp_email_body(code, heading))
          except EmailTransportError as e:
               logger.warning("Could not send '%s' email to %s: %s", subject, email, e)
