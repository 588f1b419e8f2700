# tests/test_contact.py
MESSAGE = {"name": "Ann", "email": "ann@x.com", "message": "Hello there"}


def submit(client, headers=None, **overrides):
     return client.post("/api/contact", json={**MESSAGE, **overrides}, headers=headers or {})


def test_anonymous_submission_is_allowed(client):
     res = submit(client)

     assert res.status_code == 201
     body = res.json()
     assert body["message"] == "Hello there"
     assert body["userId"] is None


def test_authenticated_submission_records_submitter(client, alice):
     alice_id, headers = alice

     res = submit(client, headers)

     assert res.status_code == 201
     assert res.json()["userId"] == alice_id


def test_submission_with_bad_token_is_rejected(client):
     res = submit(client, {"Authorization": "Bearer broken"})
     assert res.status_code == 401


def test_my_messages_only_lists_own_newest_first(client, alice, bob):
     _, alice_headers = alice
     _, bob_headers = bob
     submit(client, alice_headers, message="first")
     submit(client, alice_headers, message="second")
     submit(client, bob_headers, message="bob's")
     submit(client)

     res = client.get("/api/contact/my-messages", headers=alice_headers)

     assert res.status_code == 200
     assert [m["message"] for m in res.json()] == ["second", "first"]


def test_only_submitter_can_edit(client, alice, bob, admin):
     _, alice_headers = alice
     _, bob_headers = bob
     _, admin_headers = admin
     contact_id = submit(client, alice_headers).json()["id"]

     as_bob = client.put(f"/api/contact/{contact_id}", headers=bob_headers, json={"message": "hijack"})
     as_admin = client.put(f"/api/contact/{contact_id}", headers=admin_headers, json={"message": "moderated"})
     as_alice = client.put(f"/api/contact/{contact_id}", headers=alice_headers, json={"message": "edited"})

     assert as_bob.status_code == 401
     assert as_admin.status_code == 401
     assert as_alice.status_code == 200
     assert as_alice.json()["message"] == "edited"


def test_empty_edit_keeps_message(client, alice):
     _, headers = alice
     contact_id = submit(client, headers).json()["id"]

     res = client.put(f"/api/contact/{contact_id}", headers=headers, json={"message": ""})

     assert res.json()["message"] == "Hello there"


def test_anonymous_message_cannot_be_edited(client, alice):
     _, headers = alice
     contact_id = submit(client).json()["id"]

     res = client.put(f"/api/contact/{contact_id}", headers=headers, json={"message": "claim"})

     assert res.status_code == 401


def test_edit_missing_message_is_404(client, alice):
     _, headers = alice
     res = client.put("/api/contact/999", headers=headers, json={"message": "x"})
     assert res.status_code == 404
     assert res.json() == {"message": "Message not found"}


def test_delete_by_submitter_or_admin(client, alice, bob, admin):
     _, alice_headers = alice
     _, bob_headers = bob
     _, admin_headers = admin
     first = submit(client, alice_headers).json()["id"]
     second = submit(client, alice_headers).json()["id"]

     assert client.delete(f"/api/contact/{first}", headers=bob_headers).status_code == 401
     assert client.delete(f"/api/contact/{first}", headers=alice_headers).status_code == 200
     assert client.delete(f"/api/contact/{second}", headers=admin_headers).status_code == 200
     assert client.get("/api/contact/my-messages", headers=alice_headers).json() == []


def test_admin_inbox_lists_everything_with_submitter(client, alice, admin):
     alice_id, alice_headers = alice
     _, admin_headers = admin
     submit(client, alice_headers, message="from alice")
     submit(client, message="anonymous")

     res = client.get("/api/admin/contact", headers=admin_headers)

     assert res.status_code == 200
     messages = res.json()
     assert [m["message"] for m in messages] == ["anonymous", "from alice"]
     assert messages[0]["submitter"] is None
     assert messages[1]["submitter"] == {"id": alice_id, "name": "alice", "email": "alice@x.com"}


def test_admin_delete_bypasses_ownership(client, alice, admin):
     _, alice_headers = alice
     _, admin_headers = admin
     contact_id = submit(client, alice_headers).json()["id"]

     res = client.delete(f"/api/admin/contact/{contact_id}", headers=admin_headers)

     assert res.status_code == 200
     assert client.delete(f"/api/admin/contact/{contact_id}", headers=admin_headers).status_code == 404


def test_admin_inbox_is_forbidden_for_users(client, alice):
     _, headers = alice
     assert client.get("/api/admin/contact", headers=headers).status_code == 403
     assert client.get("/api/admin/contact").status_code == 401
