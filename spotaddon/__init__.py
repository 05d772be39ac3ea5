import os
import atexit
import logging
from typing import Optional

from flask import Flask

from config import config

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)


def create_app(config_name=None, session=None):
    """
    Create and configure the Flask application.

    Args:
        config_name: Key into ``config.config``; defaults to FLASK_ENV.
        session: Optional PlayerSession to use instead of a fresh one.
            When given, credential bootstrap is skipped.
    """
    if config_name is None:
        config_name = os.getenv("FLASK_ENV", "production")

    # Ensure config_name is a known key
    if not isinstance(config_name, str) or config_name not in config:
        config_name = "default"

    logger.info("Creating app with config: %s", config_name)

    app = Flask(__name__)
    app.config.from_object(config[config_name])

    logging.getLogger().setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logger.info("SPOTIFY_REDIRECT_URI: %s", app.config.get("SPOTIFY_REDIRECT_URI"))
    logger.info("CREDENTIALS_URL: %s", app.config.get("CREDENTIALS_URL") or "not set")

    # Single session slot shared by every request
    from spotaddon.routes import SESSION_EXTENSION_KEY
    from spotaddon.services import PlayerSession, bootstrap_credentials

    injected = session is not None
    player_session: Optional[PlayerSession] = session if injected else PlayerSession()
    app.extensions[SESSION_EXTENSION_KEY] = player_session

    # Register blueprints
    from spotaddon.routes import main as main_blueprint

    app.register_blueprint(main_blueprint)

    # Register global error handlers
    from spotaddon.error_handlers import register_error_handlers

    register_error_handlers(app)

    if not injected:
        bootstrap_credentials(app, player_session)

    @atexit.register
    def shutdown():
        from spotaddon.scheduler import shutdown_scheduler

        shutdown_scheduler()

    return app
