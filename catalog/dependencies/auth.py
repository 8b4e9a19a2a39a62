"""
Authentication and authorization dependencies for FastAPI

Two guards, applied per route:

    @router.post("/products")
    async def create_product(identity: AuthenticatedIdentity = Depends(require_admin)):
        ...

``require_admin`` depends on ``authenticate`` itself, so a route can only
reach the role check with an identity decoded from a verified credential.
"""

import jwt
from fastapi import Depends, Request

from catalog.core.errors import unauthorized
from catalog.core.logger import logger
from catalog.dependencies.services import get_user_repository
from catalog.models.user import AuthenticatedIdentity, UserRecord
from catalog.repositories.user import UserRepository
from catalog.services.token import TokenService, get_token_service


class AuthenticationGuard:
    """
    Validates the session credential cookie.

    Missing, malformed, tampered or expired credentials all fail with the
    same 401; the verification detail is only logged.
    """

    async def __call__(
        self,
        request: Request,
        tokens: TokenService = Depends(get_token_service),
    ) -> AuthenticatedIdentity:
        token = request.cookies.get(tokens.cookie_name)

        if not token:
            logger.security(
                "Authentication required: no credential cookie",
                metadata={"event": "authentication_failed", "outcome": "denied", "reason": "missing_token"},
            )
            raise unauthorized()

        try:
            claims = tokens.decode(token)
        except jwt.ExpiredSignatureError:
            logger.security(
                "Authentication failed: credential expired",
                metadata={"event": "authentication_failed", "outcome": "denied", "reason": "expired_token"},
            )
            raise unauthorized()
        except jwt.InvalidTokenError as e:
            logger.security(
                "Authentication failed: invalid credential",
                metadata={
                    "event": "authentication_failed",
                    "outcome": "denied",
                    "reason": "invalid_token",
                    "detail": str(e),
                },
            )
            raise unauthorized()

        email = claims.get("email")
        if not email or not isinstance(email, str):
            logger.security(
                "Authentication failed: credential has no email claim",
                metadata={"event": "authentication_failed", "outcome": "denied", "reason": "missing_email"},
            )
            raise unauthorized()

        identity = AuthenticatedIdentity(email=email, claims=claims)
        request.state.identity = identity

        logger.debug("Authentication successful", user_id=email, metadata={"event": "authenticated"})
        return identity


authenticate = AuthenticationGuard()


class AdminGuard:
    """
    Requires the authenticated user's stored role to be exactly "admin".

    Unknown users, absent roles and any other role value are all denied
    with the same 401.
    """

    async def __call__(
        self,
        identity: AuthenticatedIdentity = Depends(authenticate),
        users: UserRepository = Depends(get_user_repository),
    ) -> AuthenticatedIdentity:
        return await self.authorize(identity, users)

    async def authorize(self, identity: AuthenticatedIdentity, users: UserRepository) -> AuthenticatedIdentity:
        if not isinstance(identity, AuthenticatedIdentity):
            raise TypeError("AdminGuard requires an AuthenticatedIdentity from AuthenticationGuard")

        doc = await users.find_by_email(identity.email)
        user = UserRecord(**doc) if doc else None

        if user is None or not user.is_admin():
            logger.security(
                "Admin access denied",
                user_id=identity.email,
                metadata={
                    "event": "authorization_failed",
                    "outcome": "denied",
                    "reason": "unknown_user" if user is None else "not_admin",
                },
            )
            raise unauthorized()

        logger.security(
            "Admin access granted",
            user_id=identity.email,
            metadata={"event": "authorization_granted", "outcome": "granted"},
        )
        return identity


require_admin = AdminGuard()
