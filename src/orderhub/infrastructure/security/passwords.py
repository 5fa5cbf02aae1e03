"""Argon2id password hashing."""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2
from argon2.exceptions import InvalidHashError, VerificationError

from orderhub.domain.service.security import PasswordHasher


class Argon2PasswordHasher(PasswordHasher):
    """Wraps argon2-cffi; the cost parameters default to the library's."""

    def __init__(self, **params: int) -> None:
        self._hasher = _Argon2(**params)

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False
