from __future__ import annotations

from argon2 import PasswordHasher
from argon2.exceptions import HashingError, InvalidHashError, VerificationError, VerifyMismatchError

DEFAULT_TIME_COST = 3

_hashers: dict[int, PasswordHasher] = {}


def _hasher(time_cost: int) -> PasswordHasher:
    hasher = _hashers.get(time_cost)
    if hasher is None:
        hasher = _hashers[time_cost] = PasswordHasher(time_cost=time_cost)
    return hasher


def hash_password(plain: str, time_cost: int = DEFAULT_TIME_COST) -> str:
    if not plain:
        raise ValueError("password is required")
    try:
        return _hasher(time_cost).hash(plain)
    except HashingError as exc:
        raise ValueError("failed to hash password") from exc


def verify_password(plain: str, hashed: str) -> bool:
    # The cost parameters are read back from the encoded hash, so any hasher
    # instance can verify hashes made with a different time cost.
    if not plain or not hashed:
        return False
    try:
        return _hasher(DEFAULT_TIME_COST).verify(hashed, plain)
    except (VerifyMismatchError, VerificationError, InvalidHashError):
        return False
