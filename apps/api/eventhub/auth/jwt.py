from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone

import jwt
from jwt import PyJWTError


class InvalidTokenError(ValueError):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


def issue_token(
    user_id: uuid.UUID,
    *,
    secret: str,
    ttl_seconds: int = 3600,
    algorithm: str = "HS256",
) -> str:
    now = _now()
    payload = {
        "sub": str(user_id),
        "iat": int(now.timestamp()),
        "exp": int((now + timedelta(seconds=ttl_seconds)).timestamp()),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_token(token: str, *, secret: str, algorithm: str = "HS256") -> uuid.UUID:
    """Check signature and expiry and return the user id the token carries."""
    try:
        claims = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require": ["sub", "exp"]},
        )
    except PyJWTError as exc:
        raise InvalidTokenError("invalid access token") from exc

    try:
        return uuid.UUID(str(claims["sub"]))
    except ValueError as exc:
        raise InvalidTokenError("invalid token subject") from exc
