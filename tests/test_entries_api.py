"""Journal entries: owner-scoped CRUD."""

from sqlalchemy import text


def _create(client, headers, title="Day one", body="Went for a walk"):
    response = client.post("/api/entries", json={"title": title, "text": body}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestCreateAndList:

    def test_create_stamps_owner(self, client, alice_headers):
        me = client.get("/api/auth/me", headers=alice_headers).json()
        entry = _create(client, alice_headers)
        assert entry["ownerId"] == me["id"]
        assert entry["title"] == "Day one"
        assert entry["createdAt"]

    def test_title_and_text_required(self, client, alice_headers):
        assert client.post("/api/entries", json={"title": "x"}, headers=alice_headers).status_code == 400
        assert client.post("/api/entries", json={"text": "x"}, headers=alice_headers).status_code == 400
        assert client.post("/api/entries", json={"title": "", "text": "x"}, headers=alice_headers).status_code == 400

    def test_list_newest_first_and_owner_only(self, client, alice_headers, bob_headers):
        first = _create(client, alice_headers, title="first")
        second = _create(client, alice_headers, title="second")
        _create(client, bob_headers, title="bob's")

        listed = client.get("/api/entries", headers=alice_headers).json()
        assert [e["id"] for e in listed] == [second["id"], first["id"]]

    def test_text_is_encrypted_at_rest(self, client, alice_headers, db_session):
        _create(client, alice_headers, body="a secret thought")
        stored = db_session.execute(text("SELECT text FROM journal_entries")).scalar()
        assert stored != "a secret thought"


class TestUpdateAndDelete:

    def test_partial_update_keeps_falsy_fields(self, client, alice_headers):
        entry = _create(client, alice_headers)
        response = client.put(f"/api/entries/{entry['id']}", json={"title": "Renamed", "text": ""}, headers=alice_headers)
        assert response.status_code == 200
        assert response.json()["title"] == "Renamed"
        assert response.json()["text"] == "Went for a walk"

    def test_blank_title_rejected_on_update(self, client, alice_headers):
        entry = _create(client, alice_headers)
        response = client.put(f"/api/entries/{entry['id']}", json={"title": "   ", "text": "new"}, headers=alice_headers)
        assert response.status_code == 400

        # Nothing from the rejected request is applied
        stored = client.get(f"/api/entries/{entry['id']}", headers=alice_headers).json()
        assert stored["title"] == "Day one"
        assert stored["text"] == "Went for a walk"

    def test_missing_entry(self, client, alice_headers):
        assert client.put("/api/entries/999", json={"title": "x"}, headers=alice_headers).status_code == 404
        assert client.delete("/api/entries/999", headers=alice_headers).status_code == 404
        assert client.get("/api/entries/999", headers=alice_headers).status_code == 404

    def test_other_user_is_refused(self, client, alice_headers, bob_headers):
        entry = _create(client, alice_headers)
        url = f"/api/entries/{entry['id']}"

        for response in (
            client.get(url, headers=bob_headers),
            client.put(url, json={"title": "hijacked"}, headers=bob_headers),
            client.delete(url, headers=bob_headers),
        ):
            assert response.status_code == 401
            assert response.json() == {"msg": "User not authorized"}

        assert client.get(url, headers=alice_headers).json()["title"] == "Day one"

    def test_delete_is_permanent(self, client, alice_headers):
        entry = _create(client, alice_headers)
        response = client.delete(f"/api/entries/{entry['id']}", headers=alice_headers)
        assert response.json() == {"msg": "Entry removed"}
        assert client.get(f"/api/entries/{entry['id']}", headers=alice_headers).status_code == 404
        assert client.get("/api/entries", headers=alice_headers).json() == []

    def test_non_numeric_id_is_not_found(self, client, alice_headers):
        assert client.get("/api/entries/abc", headers=alice_headers).status_code == 404
