"""
Player service: library lookups and playback control.

Each method forwards to exactly one Spotify call and converts any failure
into a ``PlayerError`` carrying the message shown to the caller.
"""

import logging
from typing import Any, Dict, List

from spotaddon.spotify import SpotifyClient

logger = logging.getLogger(__name__)


class PlayerError(Exception):
    """Base exception for player operations."""

    public_message = "Spotify request failed"


class PlaylistFetchError(PlayerError):
    public_message = "Failed to fetch playlists"


class DeviceFetchError(PlayerError):
    public_message = "Failed to fetch devices"


class SearchError(PlayerError):
    public_message = "Failed to search tracks"


class PlaybackError(PlayerError):
    public_message = "Failed to start playback"


class StopPlaybackError(PlaybackError):
    public_message = "Failed to stop playback"


class PlayerService:
    """Service wrapping the player endpoints of an authenticated client."""

    def __init__(self, spotify_client: SpotifyClient):
        """
        Args:
            spotify_client: A SpotifyClient holding an access token.
        """
        self._client = spotify_client

    def get_playlists(self) -> Dict[str, Any]:
        try:
            return self._client.get_user_playlists()
        except Exception as e:
            logger.error(f"Error fetching playlists: {e}")
            raise PlaylistFetchError(str(e))

    def get_devices(self) -> Dict[str, Any]:
        try:
            return self._client.get_devices()
        except Exception as e:
            logger.error(f"Error fetching devices: {e}")
            raise DeviceFetchError(str(e))

    def search_tracks(self, query: str) -> List[Dict[str, Any]]:
        try:
            tracks = self._client.search_tracks(query)
            logger.debug(f"Search for '{query}' returned {len(tracks)} tracks")
            return tracks
        except Exception as e:
            logger.error(f"Error searching tracks: {e}")
            raise SearchError(str(e))

    def play(self, uri: str, device_id: str) -> None:
        """Start playback of a context URI (album, artist, playlist)."""
        try:
            self._client.start_playback(device_id=device_id, context_uri=uri)
        except Exception as e:
            logger.error(f"Error starting playback: {e}")
            raise PlaybackError(str(e))

    def stop(self, device_id: str) -> None:
        try:
            self._client.pause_playback(device_id=device_id)
        except Exception as e:
            logger.error(f"Error stopping playback: {e}")
            raise StopPlaybackError(str(e))
