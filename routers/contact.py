# routers/contact.py
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_actor, get_optional_actor
from schemas import ContactCreate, ContactResponse, ContactUpdate, MessageResponse
from services import Actor, ContactService

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("", response_model=ContactResponse, status_code=status.HTTP_201_CREATED)
def submit_contact_form(
     body: ContactCreate,
     db: Session = Depends(get_session),
     actor: Optional[Actor] = Depends(get_optional_actor),
):
     contact = ContactService.submit(db, actor, body.name, body.email, body.message)
     return ContactResponse.model_validate(contact)


@router.get("/my-messages", response_model=List[ContactResponse])
def get_user_messages(db: Session = Depends(get_session), actor: Actor = Depends(get_current_actor)):
     return [ContactResponse.model_validate(c) for c in ContactService.list_messages(db, actor, own_only=True)]


@router.put("/{contact_id}", response_model=ContactResponse)
def update_message(
     contact_id: int,
     body: ContactUpdate,
     db: Session = Depends(get_session),
     actor: Actor = Depends(get_current_actor),
):
     contact = ContactService.update(db, actor, contact_id, body.message)
     return ContactResponse.model_validate(contact)


@router.delete("/{contact_id}", response_model=MessageResponse)
def delete_message(
     contact_id: int,
     db: Session = Depends(get_session),
     actor: Actor = Depends(get_current_actor),
):
     ContactService.delete(db, actor, contact_id)
     return MessageResponse(message="Message removed")
