"""
Spotify application credentials.

The add-on learns its OAuth application credentials either from static
configuration (environment / ``.env``) or from a remote credentials
endpoint that answers with ``CLIENT_ID``, ``CLIENT_SECRET`` and
``REDIRECT_URI``. Both paths end in the same immutable dataclass.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping

# Field names used by the remote credentials endpoint
REMOTE_FIELDS = ("CLIENT_ID", "CLIENT_SECRET", "REDIRECT_URI")


@dataclass(frozen=True)
class SpotifyCredentials:
    """
    Immutable container for Spotify OAuth credentials.

    Attributes:
        client_id: The Spotify application client ID.
        client_secret: The Spotify application client secret.
        redirect_uri: The OAuth callback URL registered with Spotify.

    Example:
        credentials = SpotifyCredentials.from_flask_config(current_app.config)

        credentials = SpotifyCredentials.from_remote_payload(
            {'CLIENT_ID': '...', 'CLIENT_SECRET': '...', 'REDIRECT_URI': '...'}
        )
    """

    client_id: str
    client_secret: str
    redirect_uri: str

    def __post_init__(self):
        if not self.client_id:
            raise ValueError("client_id is required")
        if not self.client_secret:
            raise ValueError("client_secret is required")
        if not self.redirect_uri:
            raise ValueError("redirect_uri is required")

    def __repr__(self) -> str:
        return (
            f"SpotifyCredentials(client_id={self.client_id!r}, "
            f"redirect_uri={self.redirect_uri!r})"
        )

    @classmethod
    def from_flask_config(cls, config: Mapping[str, Any]) -> "SpotifyCredentials":
        """
        Create credentials from Flask app config.

        Raises:
            ValueError: If any of the three config keys is missing or empty.
        """
        return cls(
            client_id=config.get("SPOTIFY_CLIENT_ID") or "",
            client_secret=config.get("SPOTIFY_CLIENT_SECRET") or "",
            redirect_uri=config.get("SPOTIFY_REDIRECT_URI") or "",
        )

    @classmethod
    def from_env(cls) -> "SpotifyCredentials":
        """
        Create credentials from environment variables.

        Raises:
            ValueError: If required environment variables are missing.
        """
        return cls(
            client_id=os.getenv("SPOTIFY_CLIENT_ID", ""),
            client_secret=os.getenv("SPOTIFY_CLIENT_SECRET", ""),
            redirect_uri=os.getenv("SPOTIFY_REDIRECT_URI", ""),
        )

    @classmethod
    def from_remote_payload(cls, payload: Any) -> "SpotifyCredentials":
        """
        Create credentials from the remote credentials endpoint's JSON body.

        Args:
            payload: Decoded JSON object with ``CLIENT_ID``,
                ``CLIENT_SECRET`` and ``REDIRECT_URI``.

        Raises:
            ValueError: If the payload is not an object or a field is
                missing, empty or not a string.
        """
        if not isinstance(payload, dict):
            raise ValueError(
                f"Credentials payload must be an object, got {type(payload).__name__}"
            )

        missing = [key for key in REMOTE_FIELDS if not payload.get(key)]
        if missing:
            raise ValueError(f"Credentials payload missing fields: {missing}")

        not_strings = [
            key for key in REMOTE_FIELDS if not isinstance(payload[key], str)
        ]
        if not_strings:
            raise ValueError(
                f"Credentials payload fields must be strings: {not_strings}"
            )

        return cls(
            client_id=payload["CLIENT_ID"],
            client_secret=payload["CLIENT_SECRET"],
            redirect_uri=payload["REDIRECT_URI"],
        )
