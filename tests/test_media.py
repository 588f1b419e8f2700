# tests/test_media.py
import io
import zipfile

import pytest
from fastapi import UploadFile

from errors import ValidationError
from models import Media, UserRole
from routers.media import upload_media
from services import Actor, MediaService

PNG = b"\x89PNG\r\n\x1a\nfake-image-bytes"


def upload(client, headers, title="Sunset", tags=None, is_shared=None, filename="sunset.png", content=PNG):
     data = {"title": title}
     if tags is not None:
          data["tags"] = tags
     if is_shared is not None:
          data["isShared"] = is_shared
     return client.post(
          "/api/media",
          headers=headers,
          data=data,
          files={"image": (filename, content, "image/png")},
     )


def test_upload_stores_blob_then_row(client, store, alice):
     alice_id, headers = alice

     res = upload(client, headers, tags="beach, summer,beach", is_shared="true")

     assert res.status_code == 201
     body = res.json()
     assert body["title"] == "Sunset"
     assert body["tags"] == ["beach", "summer"]
     assert body["isShared"] is True
     assert body["owner"]["id"] == alice_id
     assert body["imageUrl"].startswith("https://fake.blob.core.windows.net/media-gallery/media-gallery/")
     assert list(store.objects.values()) == [PNG]


def test_upload_defaults_to_private_without_tags(client, alice):
     _, headers = alice

     body = upload(client, headers).json()

     assert body["tags"] == []
     assert body["isShared"] is False


def test_upload_without_file_is_rejected(client, store, alice):
     _, headers = alice

     res = client.post("/api/media", headers=headers, data={"title": "Nothing"})

     assert res.status_code == 400
     assert res.json() == {"message": "Please upload a file"}
     assert store.objects == {}


def test_upload_rejects_non_images(client, store, alice):
     _, headers = alice

     res = client.post(
          "/api/media",
          headers=headers,
          data={"title": "Notes"},
          files={"image": ("notes.txt", b"hello", "text/plain")},
     )

     assert res.status_code == 400
     assert store.objects == {}


def test_upload_requires_authentication(client):
     res = client.post("/api/media", data={"title": "x"}, files={"image": ("a.png", PNG, "image/png")})
     assert res.status_code == 401


def test_private_media_hidden_from_other_users_but_not_admin(client, alice, bob, admin):
     _, alice_headers = alice
     _, bob_headers = bob
     _, admin_headers = admin
     media_id = upload(client, alice_headers, is_shared="false").json()["id"]

     as_bob = client.get(f"/api/media/{media_id}", headers=bob_headers)
     as_admin = client.get(f"/api/media/{media_id}", headers=admin_headers)

     assert as_bob.status_code == 401
     assert as_bob.json() == {"message": "Not authorized"}
     assert as_admin.status_code == 200


def test_missing_media_is_404_not_401(client, bob):
     _, headers = bob
     res = client.get("/api/media/9999", headers=headers)
     assert res.status_code == 404
     assert res.json() == {"message": "Media not found"}


def test_other_users_cannot_update_or_delete_private_media(client, store, alice, bob):
     _, alice_headers = alice
     _, bob_headers = bob
     media_id = upload(client, alice_headers).json()["id"]

     put = client.put(f"/api/media/{media_id}", headers=bob_headers, json={"title": "Mine now"})
     delete = client.delete(f"/api/media/{media_id}", headers=bob_headers)

     assert put.status_code == 401
     assert delete.status_code == 401
     assert store.deleted == []


def test_sharing_makes_media_readable_but_not_writable(client, alice, bob):
     _, alice_headers = alice
     _, bob_headers = bob
     media_id = upload(client, alice_headers).json()["id"]
     assert client.get(f"/api/media/{media_id}", headers=bob_headers).status_code == 401

     shared = client.put(f"/api/media/{media_id}", headers=alice_headers, json={"isShared": "true"})
     assert shared.status_code == 200
     assert shared.json()["isShared"] is True

     assert client.get(f"/api/media/{media_id}", headers=bob_headers).status_code == 200
     assert client.put(f"/api/media/{media_id}", headers=bob_headers, json={"title": "x"}).status_code == 401
     assert client.delete(f"/api/media/{media_id}", headers=bob_headers).status_code == 401


def test_update_only_changes_provided_fields(client, alice):
     _, headers = alice
     media_id = upload(client, headers, title="Old", tags="a,b").json()["id"]

     res = client.put(f"/api/media/{media_id}", headers=headers, json={"description": "Golden hour", "tags": "c, d"})

     body = res.json()
     assert res.status_code == 200
     assert body["title"] == "Old"
     assert body["description"] == "Golden hour"
     assert body["tags"] == ["c", "d"]
     assert body["isShared"] is False


def test_update_ignores_unrecognised_share_flag(client, alice):
     _, headers = alice
     media_id = upload(client, headers, is_shared="true").json()["id"]

     res = client.put(f"/api/media/{media_id}", headers=headers, json={"isShared": "perhaps"})

     assert res.json()["isShared"] is True


def test_admin_can_update_any_media(client, alice, admin):
     _, alice_headers = alice
     _, admin_headers = admin
     media_id = upload(client, alice_headers).json()["id"]

     res = client.put(f"/api/media/{media_id}", headers=admin_headers, json={"title": "Moderated"})

     assert res.status_code == 200
     assert res.json()["title"] == "Moderated"


def test_list_visibility(client, alice, bob, admin):
     _, alice_headers = alice
     _, bob_headers = bob
     _, admin_headers = admin
     upload(client, alice_headers, title="alice private")
     upload(client, alice_headers, title="alice shared", is_shared="true")
     upload(client, bob_headers, title="bob private")

     def titles(headers):
          return {m["title"] for m in client.get("/api/media", headers=headers).json()}

     assert titles(alice_headers) == {"alice private", "alice shared"}
     assert titles(bob_headers) == {"alice shared", "bob private"}
     assert titles(admin_headers) == {"alice private", "alice shared", "bob private"}


def test_list_is_newest_first(client, alice):
     _, headers = alice
     for title in ("first", "second", "third"):
          upload(client, headers, title=title)

     res = client.get("/api/media", headers=headers)

     assert [m["title"] for m in res.json()] == ["third", "second", "first"]


def test_list_search_is_case_insensitive_substring(client, alice):
     _, headers = alice
     upload(client, headers, title="Beach Sunset")
     upload(client, headers, title="Mountain")
     upload(client, headers, title="100% fun")

     found = client.get("/api/media", headers=headers, params={"search": "sUNs"}).json()
     percent = client.get("/api/media", headers=headers, params={"search": "%"}).json()

     assert [m["title"] for m in found] == ["Beach Sunset"]
     assert [m["title"] for m in percent] == ["100% fun"]


def test_list_tag_filter_matches_any_overlap(client, alice):
     _, headers = alice
     upload(client, headers, title="one", tags="cat,dog")
     upload(client, headers, title="two", tags="bird")
     upload(client, headers, title="three", tags="fish")

     res = client.get("/api/media", headers=headers, params={"tags": "dog,bird"})

     assert sorted(m["title"] for m in res.json()) == ["one", "two"]


def test_delete_removes_row_and_blob(client, store, db, alice):
     _, headers = alice
     body = upload(client, headers).json()
     key = next(iter(store.objects))

     res = client.delete(f"/api/media/{body['id']}", headers=headers)

     assert res.status_code == 200
     assert res.json() == {"message": "Media removed"}
     assert store.deleted == [key]
     assert db.get(Media, body["id"]) is None
     assert client.get(f"/api/media/{body['id']}", headers=headers).status_code == 404


def test_admin_can_delete_any_media(client, store, alice, admin):
     _, alice_headers = alice
     _, admin_headers = admin
     media_id = upload(client, alice_headers).json()["id"]

     assert client.delete(f"/api/media/{media_id}", headers=admin_headers).status_code == 200
     assert len(store.deleted) == 1


def test_delete_keeps_row_when_blob_release_fails(client, store, alice):
     _, headers = alice
     media_id = upload(client, headers).json()["id"]
     store.fail_delete = True

     res = client.delete(f"/api/media/{media_id}", headers=headers)

     assert res.status_code == 500
     assert res.json() == {"message": "Storage service failure"}
     assert client.get(f"/api/media/{media_id}", headers=headers).status_code == 200


def test_bulk_download_contains_only_visible_items(client, alice, bob):
     _, alice_headers = alice
     _, bob_headers = bob
     mine = upload(client, bob_headers, title="mine", content=b"mine-bytes").json()["id"]
     shared = upload(client, alice_headers, title="shared", is_shared="true", content=b"shared-bytes").json()["id"]
     hidden = upload(client, alice_headers, title="hidden", content=b"hidden-bytes").json()["id"]

     res = client.post("/api/media/download", headers=bob_headers, json={"mediaIds": [mine, shared, hidden]})

     assert res.status_code == 200
     assert res.headers["content-type"] == "application/zip"
     with zipfile.ZipFile(io.BytesIO(res.content)) as zf:
          assert sorted(zf.namelist()) == ["mine.png", "shared.png"]
          assert zf.read("shared.png") == b"shared-bytes"


def test_bulk_download_with_nothing_visible_is_404(client, alice, bob):
     _, alice_headers = alice
     _, bob_headers = bob
     hidden = upload(client, alice_headers).json()["id"]

     res = client.post("/api/media/download", headers=bob_headers, json={"mediaIds": [hidden, 4242]})

     assert res.status_code == 404
     assert res.json() == {"message": "No media found"}


def test_bulk_download_requires_ids(client, alice):
     _, headers = alice
     res = client.post("/api/media/download", headers=headers, json={"mediaIds": []})
     assert res.status_code == 400


def test_upload_removes_blob_when_row_commit_fails(db, store, alice, monkeypatch):
     alice_id, _ = alice

     def failing_commit():
          raise RuntimeError("database went away")

     monkeypatch.setattr(db, "commit", failing_commit)

     with pytest.raises(RuntimeError):
          MediaService.upload(
               db, store, Actor(alice_id, UserRole.USER), io.BytesIO(PNG), "sunset.png", "image/png", title="Sunset"
          )

     assert len(store.deleted) == 1
     assert store.objects == {}
     monkeypatch.undo()
     assert db.query(Media).count() == 0


def test_upload_closes_file_when_filename_is_empty(db, store, alice):
     alice_id, _ = alice
     image = UploadFile(file=io.BytesIO(PNG), filename="")

     with pytest.raises(ValidationError):
          upload_media(
               image=image,
               title="Nothing",
               description=None,
               tags=None,
               isShared=None,
               db=db,
               store=store,
               actor=Actor(alice_id, UserRole.USER),
          )

     assert image.file.closed
     assert store.objects == {}


def test_bulk_download_gives_every_item_its_own_entry(client, alice):
     _, headers = alice
     ids = [
          upload(client, headers, title="a (2)", content=b"titled").json()["id"],
          upload(client, headers, title="a", content=b"first").json()["id"],
          upload(client, headers, title="a", content=b"second").json()["id"],
     ]

     res = client.post("/api/media/download", headers=headers, json={"mediaIds": ids})

     assert res.status_code == 200
     with zipfile.ZipFile(io.BytesIO(res.content)) as zf:
          names = zf.namelist()
          assert len(names) == len(set(names)) == 3
          assert sorted(zf.read(name) for name in names) == [b"first", b"second", b"titled"]
