# models/otp.py
from sqlalchemy import Column, Integer, String, DateTime
from .base import Base, utcnow


class OTP(Base):
     """
     One-time code proving control of an email address.

     Used for both registration verification and password reset. Several rows
     may exist per email; a successful check deletes all of them. email is a
     plain string, not a foreign key, because the code can precede the user row.
     """
     __tablename__ = "otps"

     id = Column(Integer, primary_key=True, autoincrement=True)
     email = Column(String(255), nullable=False, index=True)
     code = Column(String(10), nullable=False)
     created_at = Column(DateTime, default=utcnow, nullable=False)
     expires_at = Column(DateTime, nullable=False)

     def __repr__(self):
          return f"<OTP(id={self.id}, email='{self.email}', expires_at={self.expires_at})>"
