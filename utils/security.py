# utils/security.py
"""
Password hashing, bearer tokens and one-time codes.

Tokens are stateless HS256 JWTs carrying the user id and role; resolving one
needs no database lookup.
"""
import secrets
from datetime import datetime, timedelta, timezone
from functools import lru_cache

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

import config
from errors import AppError, InvalidToken, TokenExpired
from models import UserRole

# Bcrypt
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

OTP_LENGTH = 6


def hash_password(raw_password: str) -> str:
     return pwd_context.hash(raw_password)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
     return pwd_context.hash(secrets.token_urlsafe(16))


def verify_password(raw_password: str, hashed_password: str | None) -> bool:
     """
     Check a password against a bcrypt hash. With no hash (unknown account or
     Google-only account) a throwaway hash is checked instead so both paths
     cost one bcrypt round.
     """
     if not hashed_password:
          pwd_context.verify(raw_password, _dummy_hash())
          return False
     return pwd_context.verify(raw_password, hashed_password)


def generate_otp() -> str:
     """Six random digits, zero padded."""
     return f"{secrets.randbelow(10 ** OTP_LENGTH):0{OTP_LENGTH}d}"


def _secret_key() -> str:
     if not config.SECRET_KEY:
          raise AppError("JWT_SECRET is not set")
     return config.SECRET_KEY


def mint_token(user_id: int, role: UserRole, expires_delta: timedelta | None = None) -> str:
     issued_at = datetime.now(timezone.utc)
     expire = issued_at + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
     claims = {
          "id": user_id,
          "role": UserRole(role).value,
          "iat": int(issued_at.timestamp()),
          "exp": int(expire.timestamp()),
     }
     return jwt.encode(claims, _secret_key(), algorithm=config.ALGORITHM)


def decode_token(token: str) -> dict:
     """
     Verify signature and expiry and return the claims.

     Raises:
          TokenExpired: the validity window has passed
          InvalidToken: bad signature, malformed token or missing claims
     """
     try:
          payload = jwt.decode(token, _secret_key(), algorithms=[config.ALGORITHM])
     except ExpiredSignatureError:
          raise TokenExpired()
     except JWTError:
          raise InvalidToken()

     user_id = payload.get("id")
     role = payload.get("role")
     if not isinstance(user_id, int) or role not in {r.value for r in UserRole}:
          raise InvalidToken()
     return payload
