"""
Global Flask error handlers.

Turns service-layer exceptions into short plain-text responses. The body
is always a generic message; details go to the log only.
"""

import logging

from spotaddon.services import (
    AuthenticationError,
    NotAuthenticatedError,
    NotInitializedError,
    PlayerError,
)

logger = logging.getLogger(__name__)

NOT_INITIALIZED_MESSAGE = "Spotify client not initialized"
NOT_AUTHENTICATED_MESSAGE = "Not authenticated. Please log in at /login"
AUTHENTICATION_FAILED_MESSAGE = "Authentication failed"


def text_error_response(message: str, status_code: int):
    """Create a plain-text error response."""
    return message, status_code, {"Content-Type": "text/plain; charset=utf-8"}


def register_error_handlers(app):
    """
    Register global error handlers with the Flask app.

    Args:
        app: The Flask application instance.
    """

    # =========================================================================
    # Configuration / Authentication Errors
    # =========================================================================

    @app.errorhandler(NotInitializedError)
    def handle_not_initialized(error: NotInitializedError):
        """No Spotify client has been constructed yet."""
        logger.error(f"Request rejected: {error}")
        return text_error_response(NOT_INITIALIZED_MESSAGE, 500)

    @app.errorhandler(NotAuthenticatedError)
    def handle_not_authenticated(error: NotAuthenticatedError):
        """The client has no access token."""
        logger.warning(f"Request rejected: {error}")
        return text_error_response(NOT_AUTHENTICATED_MESSAGE, 401)

    @app.errorhandler(AuthenticationError)
    def handle_authentication_error(error: AuthenticationError):
        """The OAuth flow itself failed."""
        logger.error(f"Authentication error: {error}")
        return text_error_response(AUTHENTICATION_FAILED_MESSAGE, 500)

    # =========================================================================
    # Upstream Errors (500)
    # =========================================================================

    @app.errorhandler(PlayerError)
    def handle_player_error(error: PlayerError):
        """A Spotify call made on behalf of a route failed."""
        logger.error(f"{type(error).__name__}: {error}")
        return text_error_response(error.public_message, 500)

    # =========================================================================
    # HTTP Error Codes
    # =========================================================================

    @app.errorhandler(400)
    def handle_bad_request(error):
        return text_error_response("Bad request", 400)

    @app.errorhandler(404)
    def handle_not_found(error):
        return text_error_response("Not found", 404)

    @app.errorhandler(405)
    def handle_method_not_allowed(error):
        return text_error_response("Method not allowed", 405)

    @app.errorhandler(500)
    def handle_internal_error(error):
        logger.error(f"Internal server error: {error}", exc_info=True)
        return text_error_response("An unexpected error occurred", 500)

    logger.info("Global error handlers registered")
