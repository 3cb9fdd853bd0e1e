"""Activities: validation on top of the shared repository behaviour."""


def _create(client, headers, **fields):
    body = {"activityName": "Reading"}
    body.update(fields)
    return client.post("/api/activities", json=body, headers=headers)


class TestCreate:

    def test_duration_defaults_to_zero(self, client, alice_headers):
        response = _create(client, alice_headers)
        assert response.status_code == 200
        assert response.json()["durationMinutes"] == 0
        assert response.json()["quality"] is None

    def test_legacy_duration_key(self, client, alice_headers):
        response = _create(client, alice_headers, duration=25, quality=4, details="Chapter 3")
        assert response.status_code == 200
        assert response.json()["durationMinutes"] == 25
        assert response.json()["details"] == "Chapter 3"

    def test_name_required(self, client, alice_headers):
        response = client.post("/api/activities", json={"durationMinutes": 10}, headers=alice_headers)
        assert response.status_code == 400

    def test_quality_range(self, client, alice_headers):
        assert _create(client, alice_headers, quality=6).status_code == 400
        assert _create(client, alice_headers, quality=0).status_code == 400
        assert _create(client, alice_headers, quality=5).status_code == 200

    def test_negative_duration(self, client, alice_headers):
        assert _create(client, alice_headers, durationMinutes=-5).status_code == 400

    def test_requires_token(self, client):
        assert _create(client, {}).status_code == 401


class TestUpdate:

    def test_zero_does_not_overwrite(self, client, alice_headers):
        activity = _create(client, alice_headers, durationMinutes=30, quality=3).json()
        response = client.put(
            f"/api/activities/{activity['id']}",
            json={"durationMinutes": 0, "quality": 5},
            headers=alice_headers,
        )
        assert response.status_code == 200
        assert response.json()["durationMinutes"] == 30
        assert response.json()["quality"] == 5

    def test_update_is_validated(self, client, alice_headers):
        activity = _create(client, alice_headers).json()
        response = client.put(f"/api/activities/{activity['id']}", json={"quality": 9}, headers=alice_headers)
        assert response.status_code == 400

    def test_blank_name_rejected_on_update(self, client, alice_headers):
        activity = _create(client, alice_headers).json()
        response = client.put(f"/api/activities/{activity['id']}", json={"activityName": "   "}, headers=alice_headers)
        assert response.status_code == 400
        assert client.get(f"/api/activities/{activity['id']}", headers=alice_headers).json()["activityName"] == "Reading"

    def test_other_user_cannot_delete(self, client, alice_headers, bob_headers):
        activity = _create(client, alice_headers).json()
        assert client.delete(f"/api/activities/{activity['id']}", headers=bob_headers).status_code == 401
        assert client.delete(f"/api/activities/{activity['id']}", headers=alice_headers).json() == {"msg": "Activity removed"}
