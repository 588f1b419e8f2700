# utils/oauth.py
from jose import JWTError, jwt

from errors import ValidationError


class GoogleAssertionDecoder:
     """
     Reads name, email and avatar out of a Google ID token.

     The signature is NOT checked here; callers treat the result as already
     validated identity data.
     """

     def decode(self, raw_assertion: str) -> dict:
          try:
               claims = jwt.get_unverified_claims(raw_assertion)
          except JWTError:
               raise ValidationError("Invalid Google token")

          email = claims.get("email")
          if not email:
               raise ValidationError("Google token has no email")
          return {
               "name": claims.get("name") or email.split("@")[0],
               "email": email,
               "avatar": claims.get("picture"),
               "subject": claims.get("sub"),
          }
