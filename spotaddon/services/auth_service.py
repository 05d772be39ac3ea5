"""
Authentication service for the Spotify OAuth flow.

Handles authorize URL generation, code exchange, and the token validity
check that runs in front of every protected route.
"""

import logging

from spotaddon.services.session import PlayerSession
from spotaddon.spotify import SpotifyClient, SpotifyError

logger = logging.getLogger(__name__)


class AuthenticationError(Exception):
    """Raised when the OAuth flow fails."""

    pass


class NotInitializedError(AuthenticationError):
    """Raised when no Spotify client has been constructed yet."""

    pass


class NotAuthenticatedError(AuthenticationError):
    """Raised when the client exists but no one has logged in."""

    pass


class AuthService:
    """Service for managing Spotify OAuth authentication."""

    @staticmethod
    def get_auth_url(session: PlayerSession) -> str:
        """
        Generate the Spotify authorization URL.

        Raises:
            NotInitializedError: If credentials were never installed.
            AuthenticationError: If URL generation fails.
        """
        client = AuthService.require_initialized(session)
        try:
            return client.get_auth_url()
        except Exception as e:
            logger.error(f"Failed to generate auth URL: {e}", exc_info=True)
            raise AuthenticationError(f"Failed to generate authorization URL: {e}")

    @staticmethod
    def complete_login(session: PlayerSession, code: str) -> None:
        """
        Exchange an authorization code and store the resulting tokens.

        Raises:
            NotInitializedError: If credentials were never installed.
            AuthenticationError: If the exchange fails.
        """
        client = AuthService.require_initialized(session)
        try:
            client.exchange_code(code)
        except SpotifyError as e:
            logger.error(f"Error during authentication: {e}")
            raise AuthenticationError(f"Failed to exchange code for token: {e}")
        logger.info("Login completed; access and refresh tokens stored")

    @staticmethod
    def require_initialized(session: PlayerSession) -> SpotifyClient:
        """
        Return the session's client.

        Raises:
            NotInitializedError: If the slot is empty.
        """
        if not session.is_initialized:
            raise NotInitializedError("Spotify client not initialized")
        return session.client

    @staticmethod
    def require_authenticated(session: PlayerSession) -> SpotifyClient:
        """
        Return the session's client once it holds an access token.

        Raises:
            NotInitializedError: If the slot is empty.
            NotAuthenticatedError: If nobody has logged in.
        """
        client = AuthService.require_initialized(session)
        if not session.is_authenticated:
            raise NotAuthenticatedError("No access token; log in at /login")
        return client

    @staticmethod
    def ensure_token(client: SpotifyClient) -> bool:
        """
        Probe the access token and refresh it once if the probe fails.

        The caller proceeds whatever happens here; a request that hit an
        expired token is not replayed against the refreshed one.

        Returns:
            True if the probe succeeded, False if a refresh was attempted.
        """
        try:
            client.get_current_user()
            return True
        except SpotifyError as e:
            logger.info(f"Access token check failed ({e}); refreshing")

        try:
            client.refresh()
        except SpotifyError as e:
            logger.error(f"Could not refresh access token: {e}")
        return False
