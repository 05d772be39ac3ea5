import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration."""
    # Static Spotify application credentials (environment or .env)
    SPOTIFY_CLIENT_ID = os.getenv('SPOTIFY_CLIENT_ID')
    SPOTIFY_CLIENT_SECRET = os.getenv('SPOTIFY_CLIENT_SECRET')
    SPOTIFY_REDIRECT_URI = os.getenv(
        'SPOTIFY_REDIRECT_URI', 'http://localhost:3001/callback'
    )

    # Remote credentials endpoint, used when the static set is incomplete
    CREDENTIALS_URL = os.getenv('CREDENTIALS_URL')
    CREDENTIALS_MAX_ATTEMPTS = int(os.getenv('CREDENTIALS_MAX_ATTEMPTS', 3))
    CREDENTIALS_RETRY_DELAY = float(os.getenv('CREDENTIALS_RETRY_DELAY', 30))
    CREDENTIALS_TIMEOUT = float(os.getenv('CREDENTIALS_TIMEOUT', 30))
    CREDENTIALS_BOOTSTRAP_ASYNC = _env_bool('CREDENTIALS_BOOTSTRAP_ASYNC', True)
    SCHEDULER_ENABLED = True

    # Application settings
    DEBUG = False
    TESTING = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    PORT = int(os.getenv('PORT', 3001))
    HOST = os.getenv('HOST', '0.0.0.0')


class ProdConfig(Config):
    """Production configuration."""
    FLASK_ENV = 'production'


class DevConfig(Config):
    """Development configuration."""
    FLASK_ENV = 'development'
    DEBUG = True
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG').upper()
    HOST = os.getenv('HOST', 'localhost')


class TestConfig(Config):
    """Testing configuration."""
    FLASK_ENV = 'testing'
    TESTING = True
    DEBUG = True
    CREDENTIALS_BOOTSTRAP_ASYNC = False
    CREDENTIALS_RETRY_DELAY = 0
    SCHEDULER_ENABLED = False


# Dictionary for easy config selection
config = {
    'development': DevConfig,
    'production': ProdConfig,
    'testing': TestConfig,
    'default': DevConfig
}
