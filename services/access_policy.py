# services/access_policy.py
"""
Access control decisions for media, contact messages and user records.

Pure functions: no database access, no side effects. Callers look the
resource up first (404 when missing) and only then ask the policy, so a
hidden resource and a forbidden one both surface as NotAuthorized.

| Resource | Action        | Allowed when                              |
|----------|---------------|-------------------------------------------|
| media    | read          | admin, owner, or the item is shared       |
| media    | update/delete | admin or owner                            |
| contact  | read          | admin or submitter                        |
| contact  | update        | submitter only                            |
| contact  | delete        | admin or submitter                        |
| user     | any           | admin only                                |
"""
import enum
from dataclasses import dataclass
from typing import Optional

from errors import AdminRequired, NotAuthorized
from models import Contact, Media, UserRole


class Action(str, enum.Enum):
     READ = "read"
     UPDATE = "update"
     DELETE = "delete"


class ResourceKind(str, enum.Enum):
     MEDIA = "media"
     CONTACT = "contact"
     USER = "user"


@dataclass(frozen=True)
class Actor:
     id: int
     role: UserRole

     @property
     def is_admin(self) -> bool:
          return self.role == UserRole.ADMIN


@dataclass(frozen=True)
class Resource:
     kind: ResourceKind
     owner_id: Optional[int]
     is_shared: bool = False


def media_resource(media: Media) -> Resource:
     return Resource(ResourceKind.MEDIA, media.user_id, bool(media.is_shared))


def contact_resource(contact: Contact) -> Resource:
     return Resource(ResourceKind.CONTACT, contact.user_id)


def is_allowed(actor: Actor, resource: Resource, action: Action) -> bool:
     is_owner = resource.owner_id is not None and resource.owner_id == actor.id

     if resource.kind == ResourceKind.MEDIA:
          if action == Action.READ:
               return actor.is_admin or is_owner or resource.is_shared
          return is_owner or actor.is_admin

     if resource.kind == ResourceKind.CONTACT:
          if action == Action.UPDATE:
               # Admins may delete other people's messages but never rewrite them
               return is_owner
          return is_owner or actor.is_admin

     if resource.kind == ResourceKind.USER:
          return actor.is_admin

     return False


def authorize(actor: Actor, resource: Resource, action: Action) -> None:
     """Raise NotAuthorized (AdminRequired for the user surface) when denied."""
     if is_allowed(actor, resource, action):
          return
     if resource.kind == ResourceKind.USER:
          raise AdminRequired()
     raise NotAuthorized()


def require_admin(actor: Actor) -> None:
     authorize(actor, Resource(ResourceKind.USER, None), Action.UPDATE)
