# models/contact.py
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, utcnow


class Contact(Base):
     """
     Contact form message. user_id is null for anonymous submissions.
     """
     __tablename__ = "contacts"

     id = Column(Integer, primary_key=True, autoincrement=True)
     name = Column(String(100), nullable=False)
     email = Column(String(255), nullable=False)
     message = Column(Text, nullable=False)
     user_id = Column(
          Integer,
          ForeignKey("users.id", ondelete="SET NULL"),
          nullable=True,
          index=True
     )
     created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
     updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)

     # Relationships
     submitter = relationship("User", back_populates="contacts")

     def __repr__(self):
          return f"<Contact(id={self.id}, email='{self.email}', user_id={self.user_id})>"
