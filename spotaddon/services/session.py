"""
The add-on's single session slot.

One ``PlayerSession`` is created per app and shared by every request.
It holds at most one ``SpotifyClient``, and through it at most one token
pair. Reads and writes are not synchronized: two logins or two refreshes
running at the same time race, and the last writer wins.
"""

import logging
from typing import Optional

from spotaddon.spotify import SpotifyClient, SpotifyCredentials

logger = logging.getLogger(__name__)


class PlayerSession:
    """Owner of the process-wide Spotify client."""

    def __init__(self, client: Optional[SpotifyClient] = None):
        self._client = client

    @property
    def client(self) -> Optional[SpotifyClient]:
        return self._client

    @property
    def is_initialized(self) -> bool:
        """True once credentials have been installed."""
        return self._client is not None

    @property
    def is_authenticated(self) -> bool:
        """True once the client holds an access token."""
        return self._client is not None and self._client.has_access_token

    def install_credentials(self, credentials: SpotifyCredentials) -> SpotifyClient:
        """
        Build a client from credentials and put it in the slot.

        Any previous client, and the tokens it held, is replaced.
        """
        self._client = SpotifyClient(credentials)
        logger.info(
            "Spotify client initialized for client_id %s", credentials.client_id
        )
        return self._client
