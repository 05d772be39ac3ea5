"""
Tests for SpotifyAuthManager and TokenInfo.

Tests cover token parsing, the authorize URL, code exchange and refresh.
"""

import pytest
from unittest.mock import patch
from urllib.parse import parse_qs, urlparse

import requests

from spotaddon.spotify.auth import (
    SpotifyAuthManager,
    TokenInfo,
    DEFAULT_SCOPES,
)
from spotaddon.spotify.exceptions import SpotifyAuthError, SpotifyTokenError


@pytest.fixture
def auth_manager(credentials):
    """SpotifyAuthManager instance for testing."""
    return SpotifyAuthManager(credentials)


# =============================================================================
# TokenInfo Tests
# =============================================================================

class TestTokenInfoFromDict:
    """Tests for TokenInfo.from_dict factory method."""

    def test_from_dict_with_valid_data(self, sample_token):
        token = TokenInfo.from_dict(sample_token)

        assert token.access_token == 'test_access_token_12345'
        assert token.refresh_token == 'test_refresh_token_67890'
        assert token.token_type == 'Bearer'

    def test_from_dict_computes_expires_at(self, frozen_time):
        token = TokenInfo.from_dict({'access_token': 'a', 'expires_in': 3600})
        assert token.expires_at == frozen_time + 3600

    def test_from_dict_without_expiry(self):
        token = TokenInfo.from_dict({'access_token': 'a'})
        assert token.expires_at is None
        assert token.token_type == 'Bearer'

    def test_from_dict_with_missing_access_token(self):
        with pytest.raises(SpotifyTokenError) as exc_info:
            TokenInfo.from_dict({'token_type': 'Bearer'})
        assert 'access_token' in str(exc_info.value)

    def test_from_dict_accepts_numeric_string_expiry(self, frozen_time):
        token = TokenInfo.from_dict({'access_token': 'a', 'expires_in': '3600'})
        assert token.expires_in == 3600
        assert token.expires_at == frozen_time + 3600

    @pytest.mark.parametrize('expires_in', ['soon', [3600], {'s': 1}])
    def test_from_dict_with_non_numeric_expiry(self, expires_in):
        with pytest.raises(SpotifyTokenError) as exc_info:
            TokenInfo.from_dict({'access_token': 'a', 'expires_in': expires_in})
        assert 'expires_in' in str(exc_info.value)

    def test_from_dict_with_non_dict_input(self):
        with pytest.raises(SpotifyTokenError) as exc_info:
            TokenInfo.from_dict("not a dict")
        assert 'must be a dictionary' in str(exc_info.value)

    def test_repr_hides_tokens(self, sample_token):
        text = repr(TokenInfo.from_dict(sample_token))
        assert 'test_access_token_12345' not in text
        assert 'test_refresh_token_67890' not in text


# =============================================================================
# SpotifyAuthManager Tests
# =============================================================================

class TestGetAuthUrl:
    """Tests for get_auth_url."""

    def test_url_contains_client_and_redirect(self, auth_manager):
        url = auth_manager.get_auth_url()
        parsed = urlparse(url)
        query = parse_qs(parsed.query)

        assert parsed.netloc == 'accounts.spotify.com'
        assert parsed.path == '/authorize'
        assert query['client_id'] == ['test_client_id']
        assert query['response_type'] == ['code']
        assert query['redirect_uri'] == ['http://localhost:3001/callback']

    def test_url_requests_default_scopes(self, auth_manager):
        query = parse_qs(urlparse(auth_manager.get_auth_url()).query)
        assert query['scope'] == [' '.join(DEFAULT_SCOPES)]

    def test_default_scopes_cover_playback(self):
        assert 'user-modify-playback-state' in DEFAULT_SCOPES
        assert 'user-read-playback-state' in DEFAULT_SCOPES
        assert 'playlist-read-private' in DEFAULT_SCOPES

    def test_custom_scopes(self, credentials):
        manager = SpotifyAuthManager(credentials, scopes=['streaming'])
        query = parse_qs(urlparse(manager.get_auth_url()).query)
        assert query['scope'] == ['streaming']

    def test_state_is_passed_through(self, auth_manager):
        query = parse_qs(urlparse(auth_manager.get_auth_url(state='xyz')).query)
        assert query['state'] == ['xyz']


class TestExchangeCode:
    """Tests for exchange_code."""

    @patch('spotaddon.spotify.auth.requests.post')
    def test_successful_exchange(self, mock_post, auth_manager, sample_token, token_response):
        mock_post.return_value = token_response(sample_token)

        token = auth_manager.exchange_code('auth_code')

        assert token.access_token == 'test_access_token_12345'
        assert token.refresh_token == 'test_refresh_token_67890'
        _, kwargs = mock_post.call_args
        assert kwargs['data']['grant_type'] == 'authorization_code'
        assert kwargs['data']['code'] == 'auth_code'
        assert kwargs['auth'] == ('test_client_id', 'test_client_secret')

    def test_empty_code_raises(self, auth_manager):
        with pytest.raises(SpotifyAuthError):
            auth_manager.exchange_code('')

    @patch('spotaddon.spotify.auth.requests.post')
    def test_rejected_exchange(self, mock_post, auth_manager, token_response):
        mock_post.return_value = token_response(
            {'error': 'invalid_grant', 'error_description': 'Invalid authorization code'},
            status_code=400,
        )

        with pytest.raises(SpotifyTokenError) as exc_info:
            auth_manager.exchange_code('bad_code')
        assert 'Invalid authorization code' in str(exc_info.value)

    @patch('spotaddon.spotify.auth.requests.post')
    def test_network_error(self, mock_post, auth_manager):
        mock_post.side_effect = requests.ConnectionError('unreachable')

        with pytest.raises(SpotifyTokenError):
            auth_manager.exchange_code('auth_code')


class TestRefreshToken:
    """Tests for refresh_token."""

    @patch('spotaddon.spotify.auth.requests.post')
    def test_refresh_keeps_old_refresh_token(self, mock_post, auth_manager, sample_token, token_response):
        mock_post.return_value = token_response(
            {'access_token': 'fresh_access', 'token_type': 'Bearer', 'expires_in': 3600}
        )
        old = TokenInfo.from_dict(sample_token)

        new = auth_manager.refresh_token(old)

        assert new.access_token == 'fresh_access'
        assert new.refresh_token == 'test_refresh_token_67890'
        _, kwargs = mock_post.call_args
        assert kwargs['data'] == {
            'grant_type': 'refresh_token',
            'refresh_token': 'test_refresh_token_67890',
        }

    @patch('spotaddon.spotify.auth.requests.post')
    def test_refresh_uses_rotated_refresh_token(self, mock_post, auth_manager, sample_token, token_response):
        mock_post.return_value = token_response(
            {'access_token': 'fresh_access', 'refresh_token': 'rotated'}
        )

        new = auth_manager.refresh_token(TokenInfo.from_dict(sample_token))

        assert new.refresh_token == 'rotated'

    def test_refresh_without_refresh_token(self, auth_manager):
        with pytest.raises(SpotifyTokenError) as exc_info:
            auth_manager.refresh_token(TokenInfo(access_token='a'))
        assert 'no refresh_token' in str(exc_info.value)

    @patch('spotaddon.spotify.auth.requests.post')
    def test_refresh_rejected(self, mock_post, auth_manager, sample_token, token_response):
        mock_post.return_value = token_response(
            {'error': 'invalid_grant', 'error_description': 'Refresh token revoked'},
            status_code=400,
        )

        with pytest.raises(SpotifyTokenError):
            auth_manager.refresh_token(TokenInfo.from_dict(sample_token))

    @pytest.mark.parametrize('error_body', ['Bad gateway', ['upstream', 'down'], None])
    @patch('spotaddon.spotify.auth.requests.post')
    def test_refresh_rejected_with_non_object_body(
        self, mock_post, auth_manager, sample_token, token_response, error_body
    ):
        mock_post.return_value = token_response(error_body, status_code=502)

        with pytest.raises(SpotifyTokenError) as exc_info:
            auth_manager.refresh_token(TokenInfo.from_dict(sample_token))
        assert 'refresh_token' in str(exc_info.value)

    @patch('spotaddon.spotify.auth.requests.post')
    def test_refresh_rejected_with_non_json_body(self, mock_post, auth_manager, sample_token, token_response):
        resp = token_response(None, status_code=503)
        resp.json.side_effect = ValueError('Expecting value')
        resp.text = 'Service Unavailable'
        mock_post.return_value = resp

        with pytest.raises(SpotifyTokenError) as exc_info:
            auth_manager.refresh_token(TokenInfo.from_dict(sample_token))
        assert 'Service Unavailable' in str(exc_info.value)
