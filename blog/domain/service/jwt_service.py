"""JWT token domain service."""

from typing import Optional

import logfire

from blog.config import AuthSettings
from blog.domain.model.user import User
from blog.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create an access token carrying the user's id, email and role."""
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = create_token(
                str(user.id), user.email.root, user.role.value, self.auth_settings
            )
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.user_id)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_payload_from_token(self, token: Optional[str]) -> Optional[TokenPayload]:
        """Verify a token without raising.

        For routes where authentication is optional.

        Returns:
            Token payload if valid, None if the token is missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError:
            return None
