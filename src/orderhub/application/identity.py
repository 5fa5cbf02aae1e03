"""Resolve the caller's identity from a bearer token."""

from __future__ import annotations

from orderhub.domain.exceptions import AuthError
from orderhub.domain.service.security import TokenService

BEARER_PREFIX = "Bearer "


def authenticate(tokens: TokenService, raw_token: str | None) -> str:
    """Return the username behind *raw_token*.

    Accepts either the bare token or an ``Authorization`` header value.
    """
    token = (raw_token or "").strip()
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthError("Token is missing!")
    return tokens.decode(token)


def require_identity(username: str | None) -> str:
    if not username:
        raise AuthError("Token is missing!")
    return username
