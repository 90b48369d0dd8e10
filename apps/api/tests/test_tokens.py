from __future__ import annotations

import uuid

import jwt
import pytest

from eventhub.auth.jwt import InvalidTokenError, issue_token, verify_token

SECRET = "unit-test-secret-with-enough-length"


def test_issue_then_verify_returns_user_id():
    user_id = uuid.uuid4()
    token = issue_token(user_id, secret=SECRET)
    assert verify_token(token, secret=SECRET) == user_id


def test_token_expires_after_one_hour_by_default():
    token = issue_token(uuid.uuid4(), secret=SECRET)
    claims = jwt.decode(token, SECRET, algorithms=["HS256"])
    assert claims["exp"] - claims["iat"] == 3600


def test_expired_token_rejected():
    token = issue_token(uuid.uuid4(), secret=SECRET, ttl_seconds=-10)
    with pytest.raises(InvalidTokenError):
        verify_token(token, secret=SECRET)


def test_token_signed_with_other_secret_rejected():
    token = issue_token(uuid.uuid4(), secret="some-other-secret-of-decent-length")
    with pytest.raises(InvalidTokenError):
        verify_token(token, secret=SECRET)


def test_token_without_uuid_subject_rejected():
    token = jwt.encode({"sub": "42", "exp": 4102444800}, SECRET, algorithm="HS256")
    with pytest.raises(InvalidTokenError):
        verify_token(token, secret=SECRET)
