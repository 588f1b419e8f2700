# tests/conftest.py
import itertools
import os
import re
import sys

# Must be set before config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BREVO_API_KEY"] = ""

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
from fastapi.testclient import TestClient

from azure_blob import StoredObject
from database import SessionLocal, drop_db, init_db
from dependencies import get_assertion_decoder, get_email_sender, get_object_store
from errors import EmailTransportError, StorageError
from main import app
from models import User, UserRole
from utils.oauth import GoogleAssertionDecoder
from utils.security import hash_password, mint_token

PASSWORD = "secret123"


class FakeObjectStore:
     """In-memory stand-in for AzureBlobStore that records deletes."""

     def __init__(self):
          self.objects = {}
          self.deleted = []
          self.fail_delete = False
          self._ids = itertools.count(1)

     def put(self, data, folder, filename="", content_type=None):
          ext = os.path.splitext(filename)[1].lower()
          key = f"{folder}/{next(self._ids)}{ext}"
          self.objects[key] = data.read() if hasattr(data, "read") else data
          return StoredObject(url=f"https://fake.blob.core.windows.net/media-gallery/{key}", delete_key=key)

     def delete(self, delete_key):
          if self.fail_delete:
               raise StorageError("Delete failed: simulated outage")
          self.deleted.append(delete_key)
          self.objects.pop(delete_key, None)

     def fetch(self, url):
          return self.objects[url.split("/media-gallery/", 1)[1]]


class FakeEmailSender:
     def __init__(self):
          self.sent = []
          self.fail = False

     def send(self, to_email, subject, html_body):
          if self.fail:
               raise EmailTransportError("simulated SMTP outage")
          self.sent.append((to_email, subject, html_body))

     def last_otp(self, to_email):
          for address, _, body in reversed(self.sent):
               if address == to_email:
                    return re.search(r">(\d{6})<", body).group(1)
          raise AssertionError(f"no email sent to {to_email}")


@pytest.fixture(autouse=True)
def database():
     init_db()
     yield
     drop_db()


@pytest.fixture
def store():
     return FakeObjectStore()


@pytest.fixture
def mailer():
     return FakeEmailSender()


@pytest.fixture
def client(store, mailer):
     app.dependency_overrides[get_object_store] = lambda: store
     app.dependency_overrides[get_email_sender] = lambda: mailer
     app.dependency_overrides[get_assertion_decoder] = lambda: GoogleAssertionDecoder()
     with TestClient(app) as c:
          yield c
     app.dependency_overrides.clear()


@pytest.fixture
def db():
     session = SessionLocal()
     try:
          yield session
     finally:
          session.close()


def create_user(email, role=UserRole.USER, verified=True, active=True, password=PASSWORD, name=None):
     with SessionLocal() as session:
          user = User(
               name=name or email.split("@")[0],
               email=email,
               password=hash_password(password) if password else None,
               role=role,
               is_verified=verified,
               is_active=active,
          )
          session.add(user)
          session.commit()
          return user.id


def auth_headers(user_id, role=UserRole.USER):
     return {"Authorization": f"Bearer {mint_token(user_id, role)}"}


@pytest.fixture
def alice():
     user_id = create_user("alice@x.com")
     return user_id, auth_headers(user_id)


@pytest.fixture
def bob():
     user_id = create_user("bob@x.com")
     return user_id, auth_headers(user_id)


@pytest.fixture
def admin():
     user_id = create_user("admin@x.com", role=UserRole.ADMIN)
     return user_id, auth_headers(user_id, UserRole.ADMIN)
