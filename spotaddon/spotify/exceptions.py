"""
Spotify module exceptions.

Every failure raised out of ``spotaddon.spotify`` derives from
``SpotifyError`` so callers can catch the vendor layer as a whole.
"""


class SpotifyError(Exception):
    """Base exception for all Spotify-related errors."""
    pass


class SpotifyAuthError(SpotifyError):
    """Raised when the OAuth flow cannot be completed."""
    pass


class SpotifyTokenError(SpotifyAuthError):
    """Raised when a token exchange or refresh fails."""
    pass


class SpotifyTokenExpiredError(SpotifyTokenError):
    """Raised when Spotify rejects the current access token."""
    pass


class SpotifyAPIError(SpotifyError):
    """Raised when a Spotify Web API call fails."""
    pass


class SpotifyRateLimitError(SpotifyAPIError):
    """Raised when Spotify answers 429."""

    def __init__(self, message: str, retry_after: int = None):
        super().__init__(message)
        self.retry_after = retry_after


class SpotifyNotFoundError(SpotifyAPIError):
    """Raised when a device, playlist or context URI does not exist."""
    pass
