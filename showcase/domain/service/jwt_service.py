"""Session token domain service."""

import logfire

from showcase.config import AuthSettings
from showcase.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, profile_id: str, username: str, email: str) -> str:
        """Create a session token for a profile.

        Args:
            profile_id: Profile ID
            username: Profile username
            email: Profile email

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", profile_id=profile_id):
            token = create_token(profile_id, username, email, self.auth_settings)
            logfire.info("Session token created", profile_id=profile_id)
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Session token verification failed", error=str(e))
                raise

    def get_profile_id_from_token(self, token: str | None) -> str | None:
        """Extract the profile ID from a session token without raising.

        Missing, expired and tampered tokens all yield None so routes can
        treat them as "no session".

        Args:
            token: JWT token string (optional)

        Returns:
            Profile ID if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            return self.verify_token(token).profile_id
        except JWTError:
            return None
