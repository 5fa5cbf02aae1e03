"""Security ports the application layer depends on.

Implementations live in ``orderhub.infrastructure.security``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenService(ABC):

    @abstractmethod
    def issue(self, username: str) -> str:
        """Issue a bearer token identifying *username*."""

    @abstractmethod
    def decode(self, token: str) -> str:
        """Return the username carried by *token*.

        Raises AuthError if the token is malformed, forged or expired.
        """


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash of *password*."""

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """Return True if *password* matches *password_hash*."""
