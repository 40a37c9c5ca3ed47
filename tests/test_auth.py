"""Access-token verification and account roles."""

import time
from uuid import uuid4

import jwt
import pytest
from fastapi import HTTPException

from app.api import auth
from app.api.auth import account_from_claims, decode_access_token, get_current_account

_SECRET = "test-secret-with-enough-length-for-hs256"


@pytest.fixture(autouse=True)
def jwt_secret(monkeypatch):
    monkeypatch.setattr(auth, "SUPABASE_JWT_SECRET", _SECRET)
    monkeypatch.setattr(auth, "SUPABASE_JWT_AUD", "authenticated")


def _token(secret=_SECRET, **claims) -> str:
    payload = {"aud": "authenticated", "exp": int(time.time()) + 3600, "sub": str(uuid4())}
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


async def test_parent_token():
    user_id = uuid4()
    token = _token(sub=str(user_id), email="sam@example.com", user_metadata={"user_type": "parent"})
    account = await get_current_account(authorization=f"Bearer {token}")
    assert account.user_id == user_id
    assert account.email == "sam@example.com"
    assert account.role == "parent"


async def test_creator_token():
    token = _token(user_metadata={"user_type": "creator"})
    account = await get_current_account(authorization=f"Bearer {token}")
    assert account.role == "creator"


def test_role_defaults_to_parent():
    assert account_from_claims({"sub": str(uuid4())}).role == "parent"


def test_unknown_role_rejected():
    with pytest.raises(HTTPException) as exc:
        account_from_claims({"sub": str(uuid4()), "user_metadata": {"user_type": "admin"}})
    assert exc.value.status_code == 403


def test_bad_subject_rejected():
    with pytest.raises(HTTPException) as exc:
        account_from_claims({"sub": "not-a-uuid"})
    assert exc.value.status_code == 401


@pytest.mark.parametrize(
    "token",
    [
        _token(secret="another-secret-with-enough-length-for-hs256"),
        _token(exp=int(time.time()) - 10),
        _token(aud="anon"),
        "garbage",
    ],
)
def test_invalid_tokens(token):
    with pytest.raises(HTTPException) as exc:
        decode_access_token(token)
    assert exc.value.status_code == 401


@pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer"])
async def test_malformed_header(header):
    with pytest.raises(HTTPException) as exc:
        await get_current_account(authorization=header)
    assert exc.value.status_code == 401
