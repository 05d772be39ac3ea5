"""
Spotify client facade.

Combines the OAuth manager and the data API behind one object that owns
the current token pair, the way the vendor client owns its access and
refresh tokens. The add-on keeps exactly one of these (see
``spotaddon.services.session.PlayerSession``).
"""

import logging
from typing import Any, Dict, List, Optional

from .api import SpotifyAPI
from .auth import SpotifyAuthManager, TokenInfo
from .credentials import SpotifyCredentials
from .exceptions import SpotifyAuthError

logger = logging.getLogger(__name__)


class SpotifyClient:
    """
    Unified Spotify client: credentials, token slot and data calls.

    Example:
        client = SpotifyClient(SpotifyCredentials.from_flask_config(app.config))
        redirect(client.get_auth_url())
        ...
        client.exchange_code(code)
        client.get_devices()
    """

    def __init__(
        self,
        credentials: SpotifyCredentials,
        token: Optional[Dict[str, Any]] = None,
        scopes: Optional[List[str]] = None,
    ):
        """
        Initialize the Spotify client.

        Args:
            credentials: OAuth application credentials.
            token: Optional token dictionary to start authenticated with.
            scopes: Optional scope override for the authorize URL.
        """
        self._credentials = credentials
        self._auth_manager = SpotifyAuthManager(credentials, scopes=scopes)
        self._token_info: Optional[TokenInfo] = None
        self._api: Optional[SpotifyAPI] = None

        if token:
            self.set_token(TokenInfo.from_dict(token))

    @property
    def credentials(self) -> SpotifyCredentials:
        return self._credentials

    @property
    def token_info(self) -> Optional[TokenInfo]:
        return self._token_info

    @property
    def has_access_token(self) -> bool:
        """True once a login (or injected token) has populated the slot."""
        return bool(self._token_info and self._token_info.access_token)

    def set_token(self, token_info: TokenInfo) -> None:
        """Overwrite the token pair and rebind the data API to it."""
        self._token_info = token_info
        self._api = SpotifyAPI(token_info.access_token)

    # =========================================================================
    # Authentication Methods
    # =========================================================================

    def get_auth_url(self) -> str:
        """Return the Spotify authorization URL for the fixed scope set."""
        return self._auth_manager.get_auth_url()

    def exchange_code(self, code: str) -> TokenInfo:
        """
        Complete the authorization-code flow and store the new tokens.

        Raises:
            SpotifyAuthError: If the code is missing.
            SpotifyTokenError: If the exchange fails.
        """
        token_info = self._auth_manager.exchange_code(code)
        self.set_token(token_info)
        return token_info

    def refresh(self) -> TokenInfo:
        """
        Refresh the access token and store the result.

        Raises:
            SpotifyAuthError: If there is no token to refresh.
            SpotifyTokenError: If the refresh fails.
        """
        if self._token_info is None:
            raise SpotifyAuthError("Cannot refresh: not authenticated")
        token_info = self._auth_manager.refresh_token(self._token_info)
        self.set_token(token_info)
        return token_info

    # =========================================================================
    # Data Methods
    # =========================================================================

    def get_current_user(self) -> Dict[str, Any]:
        self._ensure_authenticated()
        return self._api.get_current_user()

    def get_user_playlists(self) -> Dict[str, Any]:
        self._ensure_authenticated()
        return self._api.get_user_playlists()

    def get_devices(self) -> Dict[str, Any]:
        self._ensure_authenticated()
        return self._api.get_devices()

    def search_tracks(self, query: str) -> List[Dict[str, Any]]:
        self._ensure_authenticated()
        return self._api.search_tracks(query)

    def start_playback(self, device_id: str, context_uri: str) -> None:
        self._ensure_authenticated()
        self._api.start_playback(device_id=device_id, context_uri=context_uri)

    def pause_playback(self, device_id: str) -> None:
        self._ensure_authenticated()
        self._api.pause_playback(device_id=device_id)

    # =========================================================================
    # Private Methods
    # =========================================================================

    def _ensure_authenticated(self) -> None:
        if self._api is None:
            raise SpotifyAuthError(
                "Spotify client not authenticated. Please log in first."
            )
