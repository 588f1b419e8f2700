# services/user_service.py
from typing import List, Optional

from sqlalchemy.orm import Session

from errors import DuplicateEmail, NotFound
from models import User, UserRole
from utils.logger import get_logger
from utils.security import hash_password

logger = get_logger(__name__)


class UserService:
     """Admin-side user management."""

     @staticmethod
     def list_users(db: Session) -> List[User]:
          return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()

     @staticmethod
     def get_user(db: Session, user_id: int) -> User:
          user = db.get(User, user_id)
          if not user:
               raise NotFound("User not found")
          return user

     @staticmethod
     def update_user(
          db: Session,
          user_id: int,
          name: Optional[str] = None,
          email: Optional[str] = None,
          role: Optional[UserRole] = None,
          is_active: Optional[bool] = None,
     ) -> User:
          user = UserService.get_user(db, user_id)

          if email and email != user.email:
               if db.query(User).filter(User.email == email, User.id != user_id).first():
                    raise DuplicateEmail()
               user.email = email
          if name:
               user.name = name
          if role:
               user.role = role
          if is_active is not None:
               user.is_active = is_active

          db.commit()
          db.refresh(user)
          return user

     @staticmethod
     def deactivate_user(db: Session, user_id: int) -> User:
          """Soft delete: the row and its media stay, login is refused."""
          user = UserService.get_user(db, user_id)
          user.is_active = False
          db.commit()
          logger.info("User %s deactivated", user_id)
          return user

     @staticmethod
     def create_admin(db: Session, name: str, email: str, raw_password: str) -> User:
          """Create a verified admin, or promote the existing account with that email."""
          user = db.query(User).filter(User.email == email).first()
          if user:
               user.role = UserRole.ADMIN
               user.is_verified = True
               user.is_active = True
               user.password = hash_password(raw_password)
          else:
               user = User(
                    name=name,
                    email=email,
                    password=hash_password(raw_password),
                    role=UserRole.ADMIN,
                    is_verified=True,
                    is_active=True,
               )
               db.add(user)
          db.commit()
          db.refresh(user)
          logger.info("Admin account ready: %s (id=%s)", email, user.id)
          return user
