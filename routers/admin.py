# routers/admin.py
"""
Admin-only routes: every endpoint here requires role=admin (403 otherwise).
"""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import admin_required
from schemas import AdminUserSummary, AdminUserUpdate, ContactResponse, MessageResponse, UserResponse
from services import Actor, ContactService, UserService

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(admin_required)])


# ---------------------------------------------------------------------------
# Contact messages
# ---------------------------------------------------------------------------

@router.get("/contact", response_model=List[ContactResponse])
def get_all_messages(db: Session = Depends(get_session), actor: Actor = Depends(admin_required)):
     return [ContactResponse.model_validate(c) for c in ContactService.list_messages(db, actor, own_only=False)]


@router.delete("/contact/{contact_id}", response_model=MessageResponse)
def admin_delete_message(contact_id: int, db: Session = Depends(get_session)):
     ContactService.admin_delete(db, contact_id)
     return MessageResponse(message="Message removed")


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

@router.get("/users", response_model=List[UserResponse])
def get_users(db: Session = Depends(get_session)):
     return [UserResponse.model_validate(u) for u in UserService.list_users(db)]


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user_by_id(user_id: int, db: Session = Depends(get_session)):
     return UserResponse.model_validate(UserService.get_user(db, user_id))


@router.put("/users/{user_id}", response_model=AdminUserSummary)
def update_user(user_id: int, body: AdminUserUpdate, db: Session = Depends(get_session)):
     user = UserService.update_user(
          db,
          user_id,
          name=body.name,
          email=body.email,
          role=body.role,
          is_active=body.is_active,
     )
     return AdminUserSummary.model_validate(user)


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_session)):
     UserService.deactivate_user(db, user_id)
     return MessageResponse(message="User deactivated")
