"""
Spotify OAuth2 authorization-code flow.

Builds the authorize URL, exchanges the callback code for tokens, and
refreshes an access token from its refresh token. Token *storage* is not
handled here: see ``SpotifyClient`` and ``PlayerSession``.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import requests

from .credentials import SpotifyCredentials
from .exceptions import SpotifyAuthError, SpotifyTokenError

logger = logging.getLogger(__name__)


# Scopes requested at /login: playback control plus playlist/library reads
DEFAULT_SCOPES = [
    "user-read-playback-state",
    "user-modify-playback-state",
    "playlist-read-private",
    "user-read-currently-playing",
    "user-library-read",
]

TOKEN_REQUEST_TIMEOUT = 30  # seconds


@dataclass
class TokenInfo:
    """
    Access/refresh token pair returned by Spotify's token endpoint.

    ``expires_at`` is kept for information only. Whether a token still
    works is found out by calling the API with it.
    """

    access_token: str
    token_type: str = "Bearer"
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    expires_in: Optional[int] = None
    expires_at: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"TokenInfo(token_type={self.token_type!r}, "
            f"has_refresh_token={self.refresh_token is not None}, "
            f"expires_at={self.expires_at!r})"
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenInfo":
        """
        Create TokenInfo from a token endpoint response.

        Raises:
            SpotifyTokenError: If the data is not a dict or lacks
                an access token.
        """
        if not isinstance(data, dict):
            raise SpotifyTokenError(
                f"Token data must be a dictionary, got {type(data)}"
            )
        if not data.get("access_token"):
            raise SpotifyTokenError("Token missing required field: access_token")

        expires_in = data.get("expires_in")
        expires_at = data.get("expires_at")
        if expires_in is not None:
            try:
                expires_in = int(expires_in)
            except (TypeError, ValueError):
                raise SpotifyTokenError(
                    f"Token field expires_in is not a number: {expires_in!r}"
                )
        if expires_at is None and expires_in is not None:
            expires_at = time.time() + expires_in

        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "Bearer"),
            refresh_token=data.get("refresh_token"),
            scope=data.get("scope"),
            expires_in=expires_in,
            expires_at=expires_at,
        )


class SpotifyAuthManager:
    """
    Stateless helper for Spotify's OAuth endpoints.

    Example:
        auth_manager = SpotifyAuthManager(credentials)
        redirect(auth_manager.get_auth_url())
        token_info = auth_manager.exchange_code(request.args['code'])
        token_info = auth_manager.refresh_token(token_info)
    """

    _AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
    _TOKEN_URL = "https://accounts.spotify.com/api/token"

    def __init__(
        self,
        credentials: SpotifyCredentials,
        scopes: Optional[List[str]] = None,
    ):
        self._credentials = credentials
        self._scopes = scopes or DEFAULT_SCOPES

    def get_auth_url(self, state: Optional[str] = None) -> str:
        """
        Build the Spotify authorization URL for the configured scopes.

        Args:
            state: Optional opaque value echoed back on the callback.

        Returns:
            The URL to redirect the user's browser to.
        """
        params = {
            "client_id": self._credentials.client_id,
            "response_type": "code",
            "redirect_uri": self._credentials.redirect_uri,
            "scope": " ".join(self._scopes),
        }
        if state:
            params["state"] = state

        url = f"{self._AUTHORIZE_URL}?{urlencode(params)}"
        logger.debug("Generated auth URL for client %s", self._credentials.client_id)
        return url

    def exchange_code(self, code: str) -> TokenInfo:
        """
        Exchange an authorization code for an access/refresh token pair.

        Raises:
            SpotifyAuthError: If no code was given.
            SpotifyTokenError: If Spotify rejects the exchange.
        """
        if not code:
            raise SpotifyAuthError("Authorization code is required")

        token_info = self._request_token({
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self._credentials.redirect_uri,
        })
        logger.info("Successfully exchanged code for token")
        return token_info

    def refresh_token(self, token_info: TokenInfo) -> TokenInfo:
        """
        Exchange the refresh token for a new access token.

        Spotify may omit ``refresh_token`` from the answer; the old one is
        carried over in that case.

        Raises:
            SpotifyTokenError: If there is no refresh token or the refresh
                is rejected.
        """
        if not token_info.refresh_token:
            raise SpotifyTokenError("Cannot refresh: no refresh_token available")

        new_token_info = self._request_token({
            "grant_type": "refresh_token",
            "refresh_token": token_info.refresh_token,
        })
        if not new_token_info.refresh_token:
            new_token_info.refresh_token = token_info.refresh_token

        logger.info("Successfully refreshed token")
        return new_token_info

    def _request_token(self, data: Dict[str, str]) -> TokenInfo:
        grant_type = data["grant_type"]
        try:
            response = requests.post(
                self._TOKEN_URL,
                data=data,
                auth=(
                    self._credentials.client_id,
                    self._credentials.client_secret,
                ),
                timeout=TOKEN_REQUEST_TIMEOUT,
            )
        except requests.RequestException as e:
            logger.error("Token request (%s) failed: %s", grant_type, e)
            raise SpotifyTokenError(f"Token request failed: {e}")

        if response.status_code != 200:
            try:
                body = response.json()
            except ValueError:
                body = None
            error_msg = response.text
            if isinstance(body, dict):
                error_msg = body.get("error_description", error_msg)
            raise SpotifyTokenError(
                f"Token request ({grant_type}) failed: {error_msg}"
            )

        try:
            token_data = response.json()
        except ValueError as e:
            raise SpotifyTokenError(f"Token response is not JSON: {e}")

        return TokenInfo.from_dict(token_data)
