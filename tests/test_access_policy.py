# tests/test_access_policy.py
import pytest

from errors import AdminRequired, NotAuthorized
from models import UserRole
from services.access_policy import (
     Action,
     Actor,
     Resource,
     ResourceKind,
     authorize,
     is_allowed,
     require_admin,
)

OWNER = Actor(id=1, role=UserRole.USER)
OTHER = Actor(id=2, role=UserRole.USER)
ADMIN = Actor(id=3, role=UserRole.ADMIN)

PRIVATE_MEDIA = Resource(ResourceKind.MEDIA, owner_id=1, is_shared=False)
SHARED_MEDIA = Resource(ResourceKind.MEDIA, owner_id=1, is_shared=True)
MESSAGE = Resource(ResourceKind.CONTACT, owner_id=1)
ANONYMOUS_MESSAGE = Resource(ResourceKind.CONTACT, owner_id=None)


@pytest.mark.parametrize("action", list(Action))
def test_owner_and_admin_may_do_anything_with_private_media(action):
     assert is_allowed(OWNER, PRIVATE_MEDIA, action)
     assert is_allowed(ADMIN, PRIVATE_MEDIA, action)


@pytest.mark.parametrize("action", list(Action))
def test_other_user_is_denied_private_media(action):
     assert not is_allowed(OTHER, PRIVATE_MEDIA, action)


def test_shared_media_is_readable_but_not_writable_by_others():
     assert is_allowed(OTHER, SHARED_MEDIA, Action.READ)
     assert not is_allowed(OTHER, SHARED_MEDIA, Action.UPDATE)
     assert not is_allowed(OTHER, SHARED_MEDIA, Action.DELETE)


def test_only_submitter_may_edit_a_message():
     assert is_allowed(OWNER, MESSAGE, Action.UPDATE)
     assert not is_allowed(ADMIN, MESSAGE, Action.UPDATE)
     assert not is_allowed(OTHER, MESSAGE, Action.UPDATE)


def test_submitter_or_admin_may_delete_a_message():
     assert is_allowed(OWNER, MESSAGE, Action.DELETE)
     assert is_allowed(ADMIN, MESSAGE, Action.DELETE)
     assert not is_allowed(OTHER, MESSAGE, Action.DELETE)


def test_message_read_follows_ownership():
     assert is_allowed(OWNER, MESSAGE, Action.READ)
     assert is_allowed(ADMIN, MESSAGE, Action.READ)
     assert not is_allowed(OTHER, MESSAGE, Action.READ)


def test_anonymous_message_cannot_be_edited_by_anyone():
     for actor in (OWNER, OTHER, ADMIN):
          assert not is_allowed(actor, ANONYMOUS_MESSAGE, Action.UPDATE)
     assert is_allowed(ADMIN, ANONYMOUS_MESSAGE, Action.DELETE)


def test_user_records_are_admin_only():
     record = Resource(ResourceKind.USER, owner_id=1)
     assert is_allowed(ADMIN, record, Action.UPDATE)
     assert not is_allowed(OWNER, record, Action.UPDATE)
     assert not is_allowed(OWNER, record, Action.DELETE)


def test_authorize_raises_not_authorized_for_resources():
     with pytest.raises(NotAuthorized) as exc:
          authorize(OTHER, PRIVATE_MEDIA, Action.READ)
     assert exc.value.status_code == 401


def test_require_admin_raises_forbidden():
     require_admin(ADMIN)
     with pytest.raises(AdminRequired) as exc:
          require_admin(OWNER)
     assert exc.value.status_code == 403
