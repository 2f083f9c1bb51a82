from sqlalchemy.exc import OperationalError

import ambassador_api.routes.submissions as submissions_routes
from ambassador_api.services import records
from conftest import LogRecorder, create_ambassador, login_ambassador


def _submission(**overrides):
    payload = {
        "eventId": "evt-1",
        "email": "viewer@student.edu",
        "campus": "North",
        "blobPath": "1700000000000-abc123-proof.png",
        "screenshotName": "proof.png",
    }
    payload.update(overrides)
    return payload


async def test_anonymous_submission_for_unknown_event_is_accepted(client):
    r = await client.post("/submissions", json=_submission(eventId="does-not-exist"))
    assert r.status_code == 201, r.text
    body = r.json()
    assert body["eventId"] == "does-not-exist"
    assert body["blobPath"] == "1700000000000-abc123-proof.png"
    assert body["id"]
    assert isinstance(body["uploadedAt"], int)
    assert "sasUrl" not in body


async def test_screenshot_name_is_optional(client):
    payload = _submission()
    payload.pop("screenshotName")
    r = await client.post("/submissions", json=payload)
    assert r.status_code == 201
    assert r.json()["screenshotName"] is None


async def test_submission_requires_fields(client):
    payload = _submission()
    payload.pop("blobPath")
    r = await client.post("/submissions", json=payload)
    assert r.status_code == 400
    assert r.json() == {"error": "Missing required fields"}


async def test_list_requires_token(client):
    r = await client.get("/submissions")
    assert r.status_code == 401


async def test_any_identity_lists_all_and_can_filter(client, admin_headers):
    await create_ambassador(client, admin_headers, "amb@campus.edu")
    headers, _ = await login_ambassador(client, "amb@campus.edu")
    await client.post("/submissions", json=_submission(eventId="evt-1"))
    await client.post("/submissions", json=_submission(eventId="evt-1", email="second@student.edu"))
    await client.post("/submissions", json=_submission(eventId="evt-2"))

    # the ambassador is on neither event and still sees everything
    r = await client.get("/submissions", headers=headers)
    assert r.status_code == 200
    assert len(r.json()) == 3

    r = await client.get("/submissions", params={"eventId": "evt-1"}, headers=headers)
    assert {s["email"] for s in r.json()} == {"viewer@student.edu", "second@student.edu"}

    r = await client.get("/submissions", params={"eventId": "evt-2"}, headers=admin_headers)
    assert [s["eventId"] for s in r.json()] == ["evt-2"]


async def test_audience_email_is_stored_as_typed(client):
    r = await client.post("/submissions", json=_submission(email="not-an-email"))
    assert r.status_code == 201
    assert r.json()["email"] == "not-an-email"

    r = await client.post("/submissions", json=_submission(email="Viewer@Student.EDU"))
    assert r.json()["email"] == "Viewer@Student.EDU"


async def test_store_failure_on_submit_is_generic(client, monkeypatch):
    async def broken(session, **kw):
        raise OperationalError("INSERT INTO submissions", {}, Exception("disk I/O error"))

    recorder = LogRecorder()
    monkeypatch.setattr(records, "insert_submission", broken)
    monkeypatch.setattr(submissions_routes, "log", recorder)

    r = await client.post("/submissions", json=_submission())
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to create submission"}
    assert recorder.logged("exception", "submission_create_failed")
