"""Application service: Login use case.

Checks a username/password pair against the configured credentials and,
on success, issues an HS256-signed JWT.  There is no user store: exactly
one set of credentials is accepted.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import jwt

from northwind.application.dto import TokenDTO

logger = logging.getLogger(__name__)

MIN_KEY_BYTES = 32  # HS256 wants at least 256 bits
DEFAULT_TOKEN_LIFETIME_MINUTES = 60


@dataclass(frozen=True)
class AuthSettings:
    """The single set of credentials accepted by the login."""

    username: str | None = None
    password: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class JwtSettings:
    key: str = field(default="", repr=False)
    issuer: str | None = None
    audience: str | None = None
    lifetime_minutes: int = DEFAULT_TOKEN_LIFETIME_MINUTES


class LoginHandler:

    def __init__(self, auth: AuthSettings, jwt_settings: JwtSettings) -> None:
        self._auth = auth
        self._jwt = jwt_settings

    def handle(self, username: str, password: str) -> TokenDTO | None:
        """Return a signed token, or None if the credentials are rejected."""
        if not self._auth.username or not self._auth.password:
            logger.warning("Login attempted but no credentials are configured")
            return None

        user_ok = hmac.compare_digest(username.encode(), self._auth.username.encode())
        pass_ok = hmac.compare_digest(password.encode(), self._auth.password.encode())
        if not (user_ok and pass_ok):
            logger.info("Rejected login for '%s'", username)
            return None

        expires = datetime.now(timezone.utc) + timedelta(minutes=self._jwt.lifetime_minutes)
        claims = {"name": username, "exp": expires}
        if self._jwt.issuer:
            claims["iss"] = self._jwt.issuer
        if self._jwt.audience:
            claims["aud"] = self._jwt.audience

        token = jwt.encode(claims, signing_key(self._jwt.key), algorithm="HS256")
        return TokenDTO(token=token, expiration=expires)


def signing_key(key: str) -> bytes:
    """Key bytes for HS256; keys shorter than 256 bits are stretched with SHA-256."""
    key_bytes = key.encode("utf-8")
    if len(key_bytes) < MIN_KEY_BYTES:
        key_bytes = hashlib.sha256(key_bytes).digest()
    return key_bytes
