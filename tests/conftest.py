"""
Pytest configuration and shared fixtures for spotaddon tests.

This module provides common fixtures used across all test modules,
including mock Spotify clients, sample data, and Flask app contexts.
"""

import pytest
from unittest.mock import Mock
import time

from spotaddon.spotify import SpotifyClient, SpotifyCredentials


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def credentials():
    """Valid SpotifyCredentials."""
    return SpotifyCredentials(
        client_id='test_client_id',
        client_secret='test_client_secret',
        redirect_uri='http://localhost:3001/callback'
    )


@pytest.fixture
def remote_payload():
    """A complete answer from the remote credentials endpoint."""
    return {
        'CLIENT_ID': 'remote_client_id',
        'CLIENT_SECRET': 'remote_client_secret',
        'REDIRECT_URI': 'http://homeassistant.local:3001/callback',
    }


@pytest.fixture
def sample_token():
    """A Spotify token endpoint response."""
    return {
        'access_token': 'test_access_token_12345',
        'token_type': 'Bearer',
        'expires_in': 3600,
        'refresh_token': 'test_refresh_token_67890',
        'scope': 'user-read-playback-state user-modify-playback-state'
    }


@pytest.fixture
def sample_user():
    """Sample Spotify user data."""
    return {
        'id': 'user123',
        'display_name': 'Test User',
        'product': 'premium',
        'uri': 'spotify:user:user123',
    }


@pytest.fixture
def sample_playlists():
    """First page of /me/playlists."""
    return {
        'href': 'https://api.spotify.com/v1/me/playlists?offset=0&limit=20',
        'items': [
            {'id': 'playlist1', 'name': 'Morning', 'uri': 'spotify:playlist:playlist1'},
            {'id': 'playlist2', 'name': 'Evening', 'uri': 'spotify:playlist:playlist2'},
        ],
        'limit': 20,
        'next': None,
        'offset': 0,
        'total': 2,
    }


@pytest.fixture
def sample_devices():
    """Answer of /me/player/devices."""
    return {
        'devices': [
            {
                'id': 'device-kitchen',
                'is_active': True,
                'name': 'Kitchen speaker',
                'type': 'Speaker',
                'volume_percent': 40,
            },
        ]
    }


@pytest.fixture
def sample_tracks():
    """tracks.items of a search response."""
    return [
        {
            'id': f'track{i}',
            'name': f'Track {i}',
            'uri': f'spotify:track:track{i}',
            'artists': [{'name': f'Artist {i}'}],
        }
        for i in range(1, 4)
    ]


# =============================================================================
# Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_spotify_client(sample_user, sample_playlists, sample_devices, sample_tracks):
    """A logged-in mock SpotifyClient with pre-configured responses."""
    mock = Mock(spec=SpotifyClient)
    mock.has_access_token = True

    mock.get_current_user.return_value = sample_user
    mock.get_user_playlists.return_value = sample_playlists
    mock.get_devices.return_value = sample_devices
    mock.search_tracks.return_value = sample_tracks
    mock.start_playback.return_value = None
    mock.pause_playback.return_value = None
    mock.get_auth_url.return_value = 'https://accounts.spotify.com/authorize?client_id=test_client_id'

    return mock


# =============================================================================
# Flask App Fixtures
# =============================================================================

@pytest.fixture
def player_session(mock_spotify_client):
    """A PlayerSession holding the logged-in mock client."""
    from spotaddon.services import PlayerSession
    return PlayerSession(client=mock_spotify_client)


@pytest.fixture
def app(player_session):
    """Create a Flask application for testing."""
    from spotaddon import create_app
    return create_app('testing', session=player_session)


@pytest.fixture
def client(app):
    """Provide Flask test client."""
    return app.test_client()


@pytest.fixture
def uninitialized_client():
    """Test client whose session never received credentials."""
    from spotaddon import create_app
    from spotaddon.services import PlayerSession

    app = create_app('testing', session=PlayerSession())
    return app.test_client()


@pytest.fixture
def logged_out_client(credentials):
    """Test client with a real client but no login yet."""
    from spotaddon import create_app
    from spotaddon.services import PlayerSession

    session = PlayerSession(client=SpotifyClient(credentials))
    app = create_app('testing', session=session)
    return app.test_client()


def make_token_response(token_data, status_code=200):
    """Build a mock requests.Response for the token endpoint."""
    resp = Mock()
    resp.status_code = status_code
    resp.json.return_value = token_data
    resp.text = str(token_data)
    return resp


@pytest.fixture
def token_response():
    """Factory fixture for token endpoint responses."""
    return make_token_response


@pytest.fixture
def frozen_time(monkeypatch):
    """Pin time.time() for expiry arithmetic."""
    now = 1_700_000_000.0
    monkeypatch.setattr(time, 'time', lambda: now)
    return now
