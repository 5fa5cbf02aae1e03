"""HMAC-SHA256 signed bearer tokens.

Format: ``header.payload.signature``, each part URL-safe base64 without
padding. The payload carries ``sub`` (username), ``iat`` and ``exp``.
"""

from __future__ import annotations

import base64
import binascii
import json
import time
from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes, hmac

from orderhub.domain.exceptions import AuthError
from orderhub.domain.service.security import TokenService

_HEADER = {"alg": "HS256", "typ": "JWT"}


class HmacTokenService(TokenService):

    def __init__(self, secret_key: str, ttl_seconds: int = 3600) -> None:
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        self._key = secret_key.encode("utf-8")
        self._ttl = ttl_seconds

    def issue(self, username: str) -> str:
        now = int(time.time())
        payload = {"sub": username, "iat": now, "exp": now + self._ttl}
        signing_input = f"{_encode_json(_HEADER)}.{_encode_json(payload)}"
        signature = self._sign(signing_input.encode("ascii"))
        return f"{signing_input}.{_b64encode(signature)}"

    def decode(self, token: str) -> str:
        if not token.isascii():
            raise AuthError("Malformed token")
        try:
            header_b64, payload_b64, signature_b64 = token.split(".")
        except ValueError:
            raise AuthError("Malformed token") from None

        try:
            header = _decode_json(header_b64)
            signature = _b64decode(signature_b64)
        except ValueError:
            raise AuthError("Malformed token") from None
        if header.get("alg") != _HEADER["alg"]:
            raise AuthError("Unsupported token algorithm")

        verifier = hmac.HMAC(self._key, hashes.SHA256())
        verifier.update(f"{header_b64}.{payload_b64}".encode("ascii"))
        try:
            verifier.verify(signature)
        except InvalidSignature:
            raise AuthError("Invalid token signature") from None

        try:
            payload = _decode_json(payload_b64)
        except ValueError:
            raise AuthError("Malformed token") from None

        exp = payload.get("exp")
        if not isinstance(exp, int) or exp < int(time.time()):
            raise AuthError("Token expired")

        username = payload.get("sub")
        if not isinstance(username, str) or not username:
            raise AuthError("Token carries no identity")
        return username

    def _sign(self, message: bytes) -> bytes:
        signer = hmac.HMAC(self._key, hashes.SHA256())
        signer.update(message)
        return signer.finalize()


# --- Encoding helpers ---------------------------------------------------------

def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(data: str) -> bytes:
    padding = -len(data) % 4
    try:
        return base64.urlsafe_b64decode(data + "=" * padding)
    except (binascii.Error, ValueError) as exc:
        raise ValueError("invalid base64") from exc


def _encode_json(obj: dict[str, Any]) -> str:
    return _b64encode(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def _decode_json(data: str) -> dict[str, Any]:
    try:
        value = json.loads(_b64decode(data))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ValueError("invalid json") from exc
    if not isinstance(value, dict):
        raise ValueError("expected a JSON object")
    return value
