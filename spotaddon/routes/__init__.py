"""
Flask routes package for spotaddon.

This module handles HTTP requests and responses only. Spotify calls go
through the services layer; service exceptions are turned into responses
by ``spotaddon.error_handlers``.

The single `main` Blueprint is split across feature modules. All modules
import `main` from this package and register routes on it.
"""

import functools
import logging
from typing import Any, Dict

from flask import Blueprint, current_app, request
from pydantic import ValidationError

from spotaddon.services import AuthService, PlayerSession

logger = logging.getLogger(__name__)
main = Blueprint("main", __name__)

SESSION_EXTENSION_KEY = "player_session"


# =============================================================================
# Helper Functions (shared across all route modules)
# =============================================================================


def get_player_session() -> PlayerSession:
    """Return the PlayerSession owned by the running app."""
    return current_app.extensions[SESSION_EXTENSION_KEY]


def text_response(message: str, status_code: int = 200) -> tuple:
    """Return a plain-text response."""
    return message, status_code, {"Content-Type": "text/plain; charset=utf-8"}


def request_params() -> Dict[str, Any]:
    """Merge query-string parameters with a JSON body (body wins)."""
    params: Dict[str, Any] = request.args.to_dict()
    body = request.get_json(silent=True)
    if isinstance(body, dict):
        params.update(body)
    return params


def validate_params(schema_class, message: str):
    """
    Validate the request's parameters against a Pydantic schema.

    Returns:
        (parsed_model, None) on success.
        (None, error_response_tuple) on failure, with ``message`` as a
        400 plain-text body.

    Usage::

        parsed, err = validate_params(SearchRequest, "Query parameter is required")
        if err:
            return err
    """
    try:
        return schema_class(**request_params()), None
    except ValidationError as e:
        fields = [".".join(str(loc) for loc in err["loc"]) for err in e.errors()]
        logger.info(f"Rejected {request.path}: invalid {fields}")
        return None, text_response(message, 400)


def require_player(schema_class=None, missing_message: str = "Bad request"):
    """
    Decorator guarding routes that need a logged-in Spotify client.

    Checks performed in order:
    1. a client exists -- NotInitializedError (500) otherwise
    2. the client holds an access token -- NotAuthenticatedError (401)
    3. if ``schema_class`` is given, the request parameters validate --
       400 with ``missing_message`` otherwise, before any Spotify call
    4. the token answers a profile call -- otherwise one refresh is
       attempted and the route runs anyway

    Injects ``client`` (SpotifyClient) and ``params`` (the parsed schema,
    or None) as keyword arguments.

    Usage::

        @main.route("/search")
        @require_player(SearchRequest, "Query parameter is required")
        def search(client=None, params=None):
            ...
    """
    def decorator(f):
        @functools.wraps(f)
        def decorated_function(*args, **kwargs):
            client = AuthService.require_authenticated(get_player_session())

            params = None
            if schema_class is not None:
                params, err = validate_params(schema_class, missing_message)
                if err:
                    return err

            AuthService.ensure_token(client)
            kwargs["client"] = client
            kwargs["params"] = params
            return f(*args, **kwargs)

        return decorated_function

    return decorator


# =============================================================================
# Import route modules to register their routes on the Blueprint.
# These must be at the bottom to avoid circular imports.
# =============================================================================

from spotaddon.routes import (  # noqa: E402, F401
    core,
    player,
)
