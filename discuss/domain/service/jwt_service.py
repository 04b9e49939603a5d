"""Authentication token service.

Tokens are issued by the identity service and carried in the ``auth_token``
cookie. This service only needs to read the acting user back out of them;
``issue_token`` exists for tooling and tests.
"""

from datetime import datetime, timedelta, timezone

import jwt
import logfire
from pydantic import BaseModel

from discuss.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an auth token."""

    user_id: str
    exp: datetime


class JWTError(Exception):
    """Raised when a token is malformed, forged or expired."""


class JWTService:
    """Resolves the acting user from an auth token."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue_token(self, user_id: str) -> str:
        """Sign a token for ``user_id`` valid for the configured number of days."""
        expires = datetime.now(timezone.utc) + timedelta(
            days=self.auth_settings.jwt_expiry_days
        )
        return jwt.encode(
            {"user_id": user_id, "exp": expires},
            self.auth_settings.jwt_secret,
            algorithm=self.auth_settings.jwt_algorithm,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Decode and check a token.

        Raises:
            JWTError: If the signature is wrong, the token is expired or the
                claims are missing
        """
        try:
            claims = jwt.decode(
                token,
                self.auth_settings.jwt_secret,
                algorithms=[self.auth_settings.jwt_algorithm],
            )
        except jwt.ExpiredSignatureError as e:
            raise JWTError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise JWTError("Invalid token") from e

        if "user_id" not in claims:
            raise JWTError("Token carries no user_id claim")
        return TokenPayload(**claims)

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Return the token's user, or None when absent or invalid.

        Reads work anonymously, so routes call this for optional auth and
        check for None themselves before writes.
        """
        if not token:
            return None
        try:
            return self.verify_token(token).user_id
        except JWTError as e:
            logfire.debug("Ignoring unusable auth token", error=str(e))
            return None
