"""
Credential Token Service

Issues the signed session credential carried in the ``token`` cookie and
writes or clears that cookie. There is no server-side session store:
clearing the cookie is the only invalidation, so a copied token stays valid
until it expires.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Response

from catalog.core.config import config
from catalog.core.logger import logger

DECODE_OPTIONS = {"verify_aud": False, "verify_sub": False, "verify_jti": False}


class TokenService:
    """Signs and verifies session credentials and manages their cookie"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expiration_seconds: int = 7 * 24 * 60 * 60,
        cookie_name: str = "token",
        environment: str = "development",
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expiration = timedelta(seconds=expiration_seconds)
        self.cookie_name = cookie_name
        self.environment = environment

    @property
    def cookie_options(self) -> Dict[str, Any]:
        """Cookie attributes; production requires cross-site HTTPS cookies"""
        production = self.environment == "production"
        return {
            "httponly": True,
            "secure": production,
            "samesite": "none" if production else "strict",
        }

    def issue(self, claims: Dict[str, Any], now: Optional[datetime] = None) -> str:
        """
        Sign identity claims into a credential.

        Args:
            claims: identity claims, at least ``email``
            now: issue time, defaults to the current UTC time

        Returns:
            Encoded token carrying the claims plus ``iat`` and ``exp``
        """
        issued_at = now or datetime.now(timezone.utc)
        payload = dict(claims)
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self.expiration

        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)

        logger.info(
            "Issued session credential",
            user_id=claims.get("email"),
            metadata={"event": "credential_issued", "expires_at": payload["exp"].isoformat()},
        )
        return token

    def decode(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry of a credential.

        Claims are signed as the client submitted them, so registered claims
        this service does not use (``aud``, ``sub``, ``jti``) are not
        validated.

        Raises:
            jwt.InvalidTokenError: malformed, tampered or expired token
        """
        return jwt.decode(
            token,
            self.secret,
            algorithms=[self.algorithm],
            options=DECODE_OPTIONS,
        )

    def set_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=int(self.expiration.total_seconds()),
            **self.cookie_options,
        )

    def clear_cookie(self, response: Response) -> None:
        response.delete_cookie(key=self.cookie_name, **self.cookie_options)
        logger.info("Cleared session credential cookie", metadata={"event": "credential_cleared"})


def get_token_service() -> TokenService:
    """Get token service instance"""
    return TokenService(
        secret=config.access_token_secret,
        algorithm=config.jwt_algorithm,
        expiration_seconds=config.jwt_expiration,
        cookie_name=config.cookie_name,
        environment=config.environment,
    )
