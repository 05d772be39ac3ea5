"""
spotaddon Services Package

Usage:
    from spotaddon.services import AuthService, PlayerService, PlayerSession

Example:
    session = PlayerSession()
    bootstrap_credentials(app, session)

    client = AuthService.require_authenticated(session)
    AuthService.ensure_token(client)
    PlayerService(client).search_tracks("daft punk")
"""

# Session slot
from spotaddon.services.session import PlayerSession

# Auth Service
from spotaddon.services.auth_service import (
    AuthService,
    AuthenticationError,
    NotInitializedError,
    NotAuthenticatedError,
)

# Player Service
from spotaddon.services.player_service import (
    PlayerService,
    PlayerError,
    PlaylistFetchError,
    DeviceFetchError,
    SearchError,
    PlaybackError,
    StopPlaybackError,
)

# Credential bootstrap
from spotaddon.services.bootstrap_service import (
    CredentialBootstrapper,
    CredentialFetchError,
    RetryPolicy,
    bootstrap_credentials,
)

__all__ = [
    "PlayerSession",
    "AuthService",
    "AuthenticationError",
    "NotInitializedError",
    "NotAuthenticatedError",
    "PlayerService",
    "PlayerError",
    "PlaylistFetchError",
    "DeviceFetchError",
    "SearchError",
    "PlaybackError",
    "StopPlaybackError",
    "CredentialBootstrapper",
    "CredentialFetchError",
    "RetryPolicy",
    "bootstrap_credentials",
]
