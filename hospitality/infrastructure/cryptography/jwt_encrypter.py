"""Access token issuing backed by PyJWT."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Mapping

import jwt

logger = logging.getLogger(__name__)


class JwtEncrypter:
    """Signs claims into a JWT with issued-at and expiry added."""

    def __init__(
        self,
        secret_key: str,
        token_exp_minutes: int = 1440,
        algorithm: str = "HS256",
    ) -> None:
        if not secret_key:
            raise RuntimeError("TOKEN_SECRET is not configured.")
        if secret_key == "change-me":
            logger.warning(
                "TOKEN_SECRET is using the default value. Configure a secure secret in production."
            )
        self._secret_key = secret_key
        self._token_exp_minutes = token_exp_minutes
        self._algorithm = algorithm

    async def encrypt(self, claims: Mapping[str, str]) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = {
            **claims,
            "iat": now,
            "exp": now + timedelta(minutes=self._token_exp_minutes),
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode(self, token: str) -> dict:
        """
        Verify and decode a token issued by :meth:`encrypt`.

        Raises:
            jwt.InvalidTokenError: If the signature is wrong or the token expired
        """
        return jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
