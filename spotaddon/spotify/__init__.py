"""
Spotify API integration module.

Architecture:
    - credentials.py: SpotifyCredentials (static config or remote payload)
    - auth.py: SpotifyAuthManager for the authorization-code flow
    - api.py: SpotifyAPI, spotipy-backed data and player operations
    - client.py: SpotifyClient facade owning the current token pair
    - error_handling.py: vendor error translation
    - exceptions.py: Exception hierarchy

Usage:
    from spotaddon.spotify import SpotifyClient, SpotifyCredentials

    client = SpotifyClient(SpotifyCredentials.from_flask_config(app.config))
    auth_url = client.get_auth_url()
    client.exchange_code(code)
    client.search_tracks("daft punk")
"""

from .credentials import SpotifyCredentials

from .auth import (
    SpotifyAuthManager,
    TokenInfo,
    DEFAULT_SCOPES,
)

from .api import SpotifyAPI

from .client import SpotifyClient

from .exceptions import (
    SpotifyError,
    SpotifyAuthError,
    SpotifyTokenError,
    SpotifyTokenExpiredError,
    SpotifyAPIError,
    SpotifyRateLimitError,
    SpotifyNotFoundError,
)


__all__ = [
    'SpotifyCredentials',
    'SpotifyAuthManager',
    'TokenInfo',
    'DEFAULT_SCOPES',
    'SpotifyAPI',
    'SpotifyClient',
    'SpotifyError',
    'SpotifyAuthError',
    'SpotifyTokenError',
    'SpotifyTokenExpiredError',
    'SpotifyAPIError',
    'SpotifyRateLimitError',
    'SpotifyNotFoundError',
]
