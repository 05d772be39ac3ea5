"""
Spotify Web API data operations.

Thin wrapper around ``spotipy.Spotify`` for the handful of endpoints the
add-on exposes. Responses are relayed as Spotify returns them.
"""

import logging
from typing import Any, Dict, List

import spotipy

from .error_handling import api_error_handler

logger = logging.getLogger(__name__)

# Silence spotipy's verbose logging
logging.getLogger("spotipy").setLevel(logging.WARNING)


class SpotifyAPI:
    """
    Spotify Web API client bound to one access token.

    Example:
        api = SpotifyAPI(token_info.access_token)
        devices = api.get_devices()
        api.start_playback(device_id=devices['devices'][0]['id'],
                           context_uri='spotify:playlist:37i9dQZF1DXcBWIGoYBM5M')
    """

    SEARCH_LIMIT = 20

    def __init__(self, access_token: str):
        self._sp = spotipy.Spotify(auth=access_token)
        logger.debug("SpotifyAPI initialized")

    # =========================================================================
    # User Operations
    # =========================================================================

    @api_error_handler
    def get_current_user(self) -> Dict[str, Any]:
        """Get the current user's profile. Also used to probe the token."""
        user = self._sp.current_user()
        logger.debug(f"Retrieved user: {user.get('display_name', 'Unknown')}")
        return user

    # =========================================================================
    # Library Operations
    # =========================================================================

    @api_error_handler
    def get_user_playlists(self) -> Dict[str, Any]:
        """
        Get the first page of the current user's playlists.

        Returns:
            Spotify's paging object (``items``, ``total``, ``next``, ...).
        """
        playlists = self._sp.current_user_playlists()
        logger.debug(
            f"Retrieved {len(playlists.get('items', []))} playlists"
        )
        return playlists

    @api_error_handler
    def search_tracks(self, query: str) -> List[Dict[str, Any]]:
        """
        Search the catalog for tracks.

        Returns:
            The ``tracks.items`` list of the search response.
        """
        results = self._sp.search(q=query, type="track", limit=self.SEARCH_LIMIT)
        items = results.get("tracks", {}).get("items", [])
        logger.debug(f"Search '{query}' returned {len(items)} tracks")
        return items

    # =========================================================================
    # Player Operations
    # =========================================================================

    @api_error_handler
    def get_devices(self) -> Dict[str, Any]:
        """Get the user's available Connect devices (``{'devices': [...]}``)."""
        return self._sp.devices()

    @api_error_handler
    def start_playback(self, device_id: str, context_uri: str) -> None:
        """Start playing an album, artist or playlist URI on a device."""
        self._sp.start_playback(device_id=device_id, context_uri=context_uri)
        logger.info(f"Started playback of {context_uri} on device {device_id}")

    @api_error_handler
    def pause_playback(self, device_id: str) -> None:
        """Pause playback on a device."""
        self._sp.pause_playback(device_id=device_id)
        logger.info(f"Paused playback on device {device_id}")
