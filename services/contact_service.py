# services/contact_service.py
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from errors import NotFound
from models import Contact
from services.access_policy import Action, Actor, authorize, contact_resource
from utils.logger import get_logger

logger = get_logger(__name__)


class ContactService:
     """Service class for contact messages."""

     @staticmethod
     def submit(db: Session, actor: Optional[Actor], name: str, email: str, message: str) -> Contact:
          contact = Contact(
               name=name,
               email=email,
               message=message,
               user_id=actor.id if actor else None,
          )
          db.add(contact)
          db.commit()
          db.refresh(contact)
          logger.info("Contact message %s submitted (user=%s)", contact.id, contact.user_id)
          return contact

     @staticmethod
     def list_messages(db: Session, actor: Actor, own_only: bool = True) -> List[Contact]:
          """A user only ever sees their own messages; an admin may see all."""
          query = db.query(Contact).options(selectinload(Contact.submitter))
          if own_only or not actor.is_admin:
               query = query.filter(Contact.user_id == actor.id)
          return query.order_by(Contact.created_at.desc(), Contact.id.desc()).all()

     @staticmethod
     def get_contact(db: Session, contact_id: int) -> Contact:
          contact = db.get(Contact, contact_id)
          if not contact:
               raise NotFound("Message not found")
          return contact

     @staticmethod
     def update(db: Session, actor: Actor, contact_id: int, message: Optional[str]) -> Contact:
          contact = ContactService.get_contact(db, contact_id)
          authorize(actor, contact_resource(contact), Action.UPDATE)

          if message:
               contact.message = message
          db.commit()
          db.refresh(contact)
          return contact

     @staticmethod
     def delete(db: Session, actor: Actor, contact_id: int) -> None:
          contact = ContactService.get_contact(db, contact_id)
          authorize(actor, contact_resource(contact), Action.DELETE)
          db.delete(contact)
          db.commit()

     @staticmethod
     def admin_delete(db: Session, contact_id: int) -> None:
          """No ownership check; the route is admin-only."""
          contact = ContactService.get_contact(db, contact_id)
          db.delete(contact)
          db.commit()
          logger.info("Contact message %s removed by admin", contact_id)
