"""
Core routes: placeholder home page, health check, authentication.
"""

import logging
from datetime import datetime, timezone

from flask import jsonify, redirect

from spotaddon.routes import (
    main,
    get_player_session,
    text_response,
    validate_params,
)
from spotaddon.schemas import CallbackRequest
from spotaddon.services import AuthService

logger = logging.getLogger(__name__)


# =============================================================================
# Public Routes
# =============================================================================


@main.route("/")
def index():
    """Placeholder home page."""
    return text_response("Hello, Home Assistant!")


@main.route("/health")
def health():
    """Health check endpoint for the add-on supervisor."""
    ready = get_player_session().is_initialized
    return (
        jsonify({
            "status": "ready" if ready else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }),
        200,
    )


# =============================================================================
# Authentication Routes
# =============================================================================


@main.route("/login")
def login():
    """Redirect to Spotify's authorization page."""
    auth_url = AuthService.get_auth_url(get_player_session())
    logger.debug("Redirecting to Spotify authorization page")
    return redirect(auth_url)


@main.route("/callback")
def callback():
    """Complete the OAuth flow with the code Spotify sent back."""
    parsed, err = validate_params(
        CallbackRequest, "Authorization code is required"
    )
    if err:
        return err

    AuthService.complete_login(get_player_session(), parsed.code)
    return text_response("Authentication successful! You can now use the app.")
