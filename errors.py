# errors.py
"""
Domain errors raised by services and mapped to JSON responses in main.py.

Every error renders as {"message": <message>} with its status_code.
"""
from fastapi import status


class AppError(Exception):
     status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
     message = "Server Error"

     def __init__(self, message: str | None = None):
          if message is not None:
               self.message = message
          super().__init__(self.message)


class ValidationError(AppError):
     status_code = status.HTTP_400_BAD_REQUEST
     message = "Invalid request"


class NotAuthenticated(AppError):
     status_code = status.HTTP_401_UNAUTHORIZED
     message = "Not authorized, no token"


class InvalidToken(NotAuthenticated):
     message = "Not authorized, token failed"


class TokenExpired(NotAuthenticated):
     message = "Not authorized, token expired"


class NotAuthorized(AppError):
     status_code = status.HTTP_401_UNAUTHORIZED
     message = "Not authorized"


class AdminRequired(NotAuthorized):
     status_code = status.HTTP_403_FORBIDDEN
     message = "Not authorized as an admin"


class AccountDeactivated(AppError):
     status_code = status.HTTP_403_FORBIDDEN
     message = "Account has been deactivated"


class NotFound(AppError):
     status_code = status.HTTP_404_NOT_FOUND
     message = "Not found"


class Conflict(AppError):
     status_code = status.HTTP_400_BAD_REQUEST
     message = "Conflict"


class DuplicateEmail(Conflict):
     message = "User already exists"


class InvalidOtp(ValidationError):
     message = "Invalid OTP"


class InvalidCredentials(ValidationError):
     message = "Invalid credentials"


class NotVerified(ValidationError):
     message = "Please verify your email first"


class UpstreamFailure(AppError):
     message = "Upstream service failure"


class StorageError(UpstreamFailure):
     message = "Storage service failure"


class EmailTransportError(UpstreamFailure):
     message = "Email delivery failed"
