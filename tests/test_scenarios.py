# tests/test_scenarios.py

from tests.conftest import bearer


def test_signup_folder_and_note_flow(client):
    signed_up = client.post("/api/v1/signup", json={"username": "alice", "password": "secret1"})
    assert signed_up.status_code == 201
    token_a = signed_up.get_json()["token"]

    signed_in = client.post("/api/v1/signin", json={"username": "alice", "password": "secret1"})
    assert signed_in.status_code == 200
    token_b = signed_in.get_json()["token"]

    for token in (token_a, token_b):
        assert client.post("/api/v1/validate-token", headers=bearer(token)).status_code == 200

    headers = bearer(token_a)
    work = client.post("/api/v1/folders", headers=headers, json={"name": "Work"})
    assert work.status_code == 200
    work_id = work.get_json()["folder"]["id"]
    assert client.post("/api/v1/folders", headers=headers, json={"name": "Work"}).status_code == 409

    note = client.post("/api/v1/content", headers=headers, json={"type": "text", "title": "note", "text": "hi"})
    assert note.status_code == 200
    note = note.get_json()["content"]
    assert note["folderId"] is None

    listed = client.get("/api/v1/content", headers=headers).get_json()["contents"]
    assert len(listed) == 1
    assert listed[0]["folderId"] is None

    moved = client.put(f"/api/v1/content/{note['id']}", headers=headers, json={
        "type": "text", "title": "note", "text": "hi", "folderId": work_id,
    })
    assert moved.status_code == 200

    in_work = client.get(f"/api/v1/content?folderId={work_id}", headers=headers).get_json()["contents"]
    assert [c["id"] for c in in_work] == [note["id"]]
    assert in_work[0]["folder"]["name"] == "Work"


def test_share_and_unshare_flow(client):
    token = client.post("/api/v1/signup", json={"username": "alice", "password": "secret1"}).get_json()["token"]
    headers = bearer(token)
    work_id = client.post("/api/v1/folders", headers=headers, json={"name": "Work"}).get_json()["folder"]["id"]
    client.post("/api/v1/content", headers=headers, json={
        "type": "youtube", "title": "talk", "link": "https://youtu.be/abc", "folderId": work_id,
    })

    share_hash = client.post("/api/v1/brain/share", headers=headers, json={"share": True}).get_json()["hash"]

    snapshot = client.get(f"/api/v1/brain/{share_hash}").get_json()
    assert snapshot["owner"] == "alice"
    assert [f["id"] for f in snapshot["folders"]] == [work_id]
    assert len(snapshot["contents"]) == 1
    assert snapshot["contents"][0]["folder"] == {"id": work_id, "name": "Work", "color": "#3B82F6"}

    client.post("/api/v1/brain/share", headers=headers, json={"share": False})
    assert client.get(f"/api/v1/brain/{share_hash}").status_code == 404


def test_service_endpoints(client):
    assert client.get("/").get_json()["status"] == "online"
    assert client.get("/ping").get_json()["pong"] is True

    health = client.get("/health")
    assert health.status_code == 200
    assert health.get_json()["checks"]["database"]["status"] == "healthy"
    assert health.headers["X-Content-Type-Options"] == "nosniff"
    assert health.headers["X-Request-ID"]


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/api/v1/nothing-here")
    assert response.status_code == 404
    assert response.get_json() == {
        "success": False,
        "error": "NOT_FOUND",
        "message": "The requested resource was not found",
    }
