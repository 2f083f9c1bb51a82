from datetime import datetime, timedelta, timezone

import jwt
import pytest

from ambassador_api.config import settings
from ambassador_api.security import issue_token, verify_token
from conftest import ADMIN_EMAIL, create_ambassador, login_ambassador


def test_issued_token_verifies_to_its_claims():
    token = issue_token("amb-1", "a@x.com", "ambassador", {"campus": "North"})
    claims = verify_token(token)
    assert claims["id"] == "amb-1"
    assert claims["email"] == "a@x.com"
    assert claims["role"] == "ambassador"
    assert claims["campus"] == "North"
    assert claims["exp"] - claims["iat"] == 8 * 3600


def test_token_still_valid_just_before_expiry():
    issued = datetime.now(timezone.utc) - timedelta(hours=7, minutes=59)
    assert verify_token(issue_token("adm-1", "root@x.com", "admin", now=issued)) is not None


def test_token_invalid_after_eight_hours():
    issued = datetime.now(timezone.utc) - timedelta(hours=8, seconds=1)
    assert verify_token(issue_token("adm-1", "root@x.com", "admin", now=issued)) is None


@pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
def test_malformed_tokens_are_invalid(token):
    assert verify_token(token) is None


def test_foreign_signature_is_invalid():
    forged = jwt.encode(
        {"id": "x", "email": "x@x.com", "role": "admin", "exp": 9999999999},
        "some-other-secret-of-sufficient-length-000",
        algorithm="HS256",
    )
    assert verify_token(forged) is None


def test_unknown_role_is_invalid():
    token = jwt.encode(
        {"id": "x", "email": "x@x.com", "role": "superuser", "exp": 9999999999},
        settings.jwt_secret,
        algorithm="HS256",
    )
    assert verify_token(token) is None


async def test_admin_login(client, admin_headers):
    # admin_headers already logged in once; check the response shape directly
    r = await client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "admin-password", "role": "admin"})
    assert r.status_code == 200
    body = r.json()
    assert body["user"] == {"email": ADMIN_EMAIL, "role": "admin"}
    assert verify_token(body["token"])["role"] == "admin"


async def test_admin_credentials_do_not_work_as_ambassador(client, admin_headers):
    r = await client.post("/auth/login", json={"email": ADMIN_EMAIL, "password": "admin-password"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid credentials"}


async def test_ambassador_login_returns_profile_without_password(client, admin_headers):
    created = await create_ambassador(client, admin_headers, "amb@campus.edu", name="Ada", campus="South")
    headers, user = await login_ambassador(client, "amb@campus.edu")
    assert user["id"] == created["id"]
    assert user["role"] == "ambassador"
    assert user["campus"] == "South"
    assert not any("password" in k.lower() for k in user)
    claims = verify_token(headers["Authorization"].split(" ", 1)[1])
    assert claims["campus"] == "South"
    assert claims["id"] == created["id"]


async def test_wrong_password(client, admin_headers):
    await create_ambassador(client, admin_headers, "amb@campus.edu")
    r = await client.post("/auth/login", json={"email": "amb@campus.edu", "password": "nope"})
    assert r.status_code == 401


async def test_unknown_email(client):
    r = await client.post("/auth/login", json={"email": "ghost@campus.edu", "password": "whatever"})
    assert r.status_code == 401
    assert r.json()["error"] == "Invalid credentials"


async def test_login_requires_email_and_password(client):
    r = await client.post("/auth/login", json={"email": "amb@campus.edu"})
    assert r.status_code == 400
    assert "error" in r.json()


async def test_login_looks_up_the_email_exactly_as_stored(client, admin_headers):
    await create_ambassador(client, admin_headers, "Mixed@Campus.edu")
    _, user = await login_ambassador(client, "Mixed@Campus.edu")
    assert user["email"] == "Mixed@Campus.edu"

    r = await client.post("/auth/login", json={"email": "mixed@campus.edu", "password": "amb-password"})
    assert r.status_code == 401
