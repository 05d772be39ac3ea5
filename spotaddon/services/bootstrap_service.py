"""
Credential bootstrap.

At startup the add-on needs OAuth application credentials before it can
build a Spotify client. Static configuration is used when complete;
otherwise the credentials are fetched from a remote endpoint with a
bounded, fixed-delay retry policy. Exhausting the retries is not fatal:
the server keeps running and protected routes answer "not initialized".
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from spotaddon.services.session import PlayerSession
from spotaddon.spotify import SpotifyCredentials

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 30  # seconds
DEFAULT_FETCH_TIMEOUT = 30  # seconds


class CredentialFetchError(Exception):
    """Raised when one fetch attempt does not yield a full credential set."""

    pass


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded retry with a fixed delay between failed attempts.

    Attributes:
        max_attempts: Total number of attempts, including the first.
        delay_seconds: Pause after each failed attempt except the last.
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_seconds: float = DEFAULT_RETRY_DELAY

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds cannot be negative")

    @classmethod
    def from_flask_config(cls, config) -> "RetryPolicy":
        return cls(
            max_attempts=int(
                config.get("CREDENTIALS_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)
            ),
            delay_seconds=float(
                config.get("CREDENTIALS_RETRY_DELAY", DEFAULT_RETRY_DELAY)
            ),
        )


class CredentialBootstrapper:
    """
    Fetches credentials from a remote endpoint and installs a client.

    Example:
        bootstrapper = CredentialBootstrapper(session, url, RetryPolicy())
        if not bootstrapper.run():
            # session stays uninitialized
            ...
    """

    def __init__(
        self,
        session: PlayerSession,
        url: str,
        policy: Optional[RetryPolicy] = None,
        timeout: float = DEFAULT_FETCH_TIMEOUT,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        self._session = session
        self._url = url
        self._policy = policy or RetryPolicy()
        self._timeout = timeout
        self._sleep = sleep or time.sleep

    def fetch_credentials(self) -> SpotifyCredentials:
        """
        Make one request to the credentials endpoint.

        Raises:
            CredentialFetchError: On network errors, non-2xx answers,
                non-JSON bodies, or incomplete credential sets.
        """
        try:
            response = requests.get(self._url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            raise CredentialFetchError(f"Request to credentials endpoint failed: {e}")
        except ValueError as e:
            raise CredentialFetchError(f"Credentials endpoint returned invalid JSON: {e}")

        try:
            return SpotifyCredentials.from_remote_payload(payload)
        except ValueError as e:
            raise CredentialFetchError(str(e))

    def run(self) -> bool:
        """
        Try to fetch credentials until one attempt succeeds or the policy
        is exhausted.

        Returns:
            True if a client was installed, False otherwise. Never raises.
        """
        max_attempts = self._policy.max_attempts

        for attempt in range(1, max_attempts + 1):
            try:
                credentials = self.fetch_credentials()
            except CredentialFetchError as e:
                logger.warning(
                    "Credential fetch attempt %d/%d failed: %s",
                    attempt, max_attempts, e,
                )
                if attempt < max_attempts:
                    logger.info(
                        "Retrying credential fetch in %ss",
                        self._policy.delay_seconds,
                    )
                    self._sleep(self._policy.delay_seconds)
                continue

            self._session.install_credentials(credentials)
            logger.info(
                "Credentials fetched on attempt %d/%d", attempt, max_attempts
            )
            return True

        logger.warning(
            "Could not fetch Spotify credentials after %d attempts. "
            "The Spotify client stays uninitialized.",
            max_attempts,
        )
        return False


def bootstrap_credentials(app, session: PlayerSession) -> None:
    """
    Install a Spotify client into ``session`` from the app's configuration.

    Static credentials are used directly when all three are configured.
    Otherwise, when ``CREDENTIALS_URL`` is set, a CredentialBootstrapper
    runs either inline or as a one-off background job depending on
    ``CREDENTIALS_BOOTSTRAP_ASYNC``.
    """
    try:
        credentials = SpotifyCredentials.from_flask_config(app.config)
    except ValueError:
        credentials = None

    if credentials is not None:
        logger.info("Using statically configured Spotify credentials")
        session.install_credentials(credentials)
        return

    url = app.config.get("CREDENTIALS_URL")
    if not url:
        logger.warning(
            "No Spotify credentials configured and CREDENTIALS_URL is unset. "
            "The Spotify client stays uninitialized."
        )
        return

    bootstrapper = CredentialBootstrapper(
        session,
        url,
        RetryPolicy.from_flask_config(app.config),
        timeout=float(app.config.get("CREDENTIALS_TIMEOUT", DEFAULT_FETCH_TIMEOUT)),
    )

    if app.config.get("CREDENTIALS_BOOTSTRAP_ASYNC", True):
        from spotaddon.scheduler import run_once

        if run_once(app, bootstrapper.run, job_id="credential-bootstrap"):
            logger.info("Credential bootstrap scheduled in background")
            return
        logger.warning("Background scheduler unavailable; bootstrapping inline")

    bootstrapper.run()
