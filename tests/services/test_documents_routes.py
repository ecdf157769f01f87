"""Documents Routes — HTTP adapter over a SQLite-backed DocumentService (page_size=2).

Tests cover:
    - PUT creates, repeated identical PUT is 200, conflicting PUT is 409 with stored entity
    - POST updates with revision check
    - GET / DELETE by id with 404s
    - GET list with and without cursor query parameters, malformed or beyond-int64
      cursors are 400
    - Unparseable bodies are 400 through the validation handler
    - Requests before the service is wired get the 503 error envelope
"""

from docstore.main import app

from tests.builders import make_document


def _payload(**overrides) -> dict:
    body = make_document().to_dict()
    body.update(overrides)
    return body


async def test_put_creates_document(client, clock):
    res = await client.put("/api/v1/documents", json=_payload())
    assert res.status_code == 200
    data = res.json()
    assert data["errors"] == []
    assert data["entity"]["id"] == "first-post"
    assert data["entity"]["creationTimestamp"] == clock.now


async def test_repeated_put_is_idempotent(client, clock):
    first = await client.put("/api/v1/documents", json=_payload())
    clock.tick(10)
    second = await client.put("/api/v1/documents", json=_payload())
    assert second.status_code == 200
    assert second.json() == first.json()


async def test_conflicting_put_returns_stored_document(client):
    first = await client.put("/api/v1/documents", json=_payload())
    res = await client.put("/api/v1/documents", json=_payload(title="Different"))
    assert res.status_code == 409
    assert res.json()["entity"] == first.json()["entity"]


async def test_put_empty_document_lists_validation_messages(client):
    res = await client.put("/api/v1/documents", json={})
    assert res.status_code == 400
    assert "The id is required." in res.json()["errors"]


async def test_put_with_wrongly_typed_field_is_400(client):
    res = await client.put("/api/v1/documents", json=_payload(revision="one"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_post_updates_and_rejects_stale_revision(client):
    await client.put("/api/v1/documents", json=_payload())

    updated = await client.post("/api/v1/documents", json=_payload(title="Edited"))
    assert updated.status_code == 200
    assert updated.json()["entity"]["revision"] == 2

    stale = await client.post("/api/v1/documents", json=_payload(title="Other"))
    assert stale.status_code == 409
    assert stale.json()["entity"]["title"] == "Edited"


async def test_get_and_delete_by_id(client):
    await client.put("/api/v1/documents", json=_payload())

    got = await client.get("/api/v1/documents/first-post")
    assert got.status_code == 200
    assert got.json()["entity"]["title"] == "First post"

    deleted = await client.delete("/api/v1/documents/first-post")
    assert deleted.status_code == 200
    assert deleted.json()["entity"] == "first-post"

    assert (await client.get("/api/v1/documents/first-post")).status_code == 404
    assert (await client.delete("/api/v1/documents/first-post")).status_code == 404


async def test_list_pages_with_cursor(client, clock):
    for doc_id in ("a", "b", "c"):
        clock.tick()
        await client.put("/api/v1/documents", json=_payload(id=doc_id))

    first = (await client.get("/api/v1/documents")).json()["entity"]
    assert [d["id"] for d in first["documents"]] == ["a", "b"]
    cursor = first["cursor"]
    assert cursor["id"] == "b"

    rest = await client.get(
        "/api/v1/documents",
        params={"lastID": cursor["id"], "lastCreationTimestamp": cursor["creationTimestamp"]},
    )
    assert rest.status_code == 200
    assert [d["id"] for d in rest.json()["entity"]["documents"]] == ["c"]
    assert rest.json()["entity"]["cursor"] == {"id": "", "creationTimestamp": 0}


async def test_list_with_malformed_cursor_is_400(client):
    res = await client.get(
        "/api/v1/documents", params={"lastID": "a", "lastCreationTimestamp": "soon"},
    )
    assert res.status_code == 400
    assert res.json()["errors"] == ["The cursor is invalid."]


async def test_list_with_half_a_cursor_is_400(client):
    res = await client.get("/api/v1/documents", params={"lastID": "a"})
    assert res.status_code == 400


async def test_readiness_reports_database(client):
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_list_with_cursor_timestamp_beyond_int64_is_400(client):
    res = await client.get(
        "/api/v1/documents",
        params={"lastID": "a", "lastCreationTimestamp": "9223372036854775808"},
    )
    assert res.status_code == 400
    assert res.json()["errors"] == ["The cursor is invalid."]


async def test_request_before_service_is_wired_is_503(client):
    app.state.document_service = None

    res = await client.get("/api/v1/documents/first-post")
    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "SERVICE_UNAVAILABLE"
    assert error["category"] == "unavailable"
    assert error["message"] == "The document service is not available."
    assert "timestamp" in error


async def test_put_with_numeric_string_revision_is_400(client):
    res = await client.put("/api/v1/documents", json=_payload(revision="5"))
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
