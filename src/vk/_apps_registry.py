import threading
from logging import getLogger
from typing import Dict, Mapping, Optional

from ._utils._logs import LOGGER_NAME
from .models.auth import AccessToken


class AppsRegistry:
    """Per-application registry of VK OAuth tokens.

    Holds the callback URL and secrets of the registered applications together
    with the last token stored for each application id. Tokens are replaced on
    every ``add_token``; there is at most one token per application.
    """

    def __init__(self) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._lock = threading.Lock()
        self._callback_url: Optional[str] = None
        self._secrets: Dict[str, str] = {}
        self._tokens: Dict[str, AccessToken] = {}

    def register_apps(self, callback_url: str, app_secrets: Mapping[str, str]) -> None:
        """Record the OAuth callback URL and the secret of each application.

        No authentication happens here; tokens must be stored with ``add_token``.
        """
        with self._lock:
            self._callback_url = callback_url
            self._secrets = dict(app_secrets)
        self._logger.debug(f"Registered VK apps: {sorted(app_secrets)}")

    def add_token(self, app_id: str, token: AccessToken) -> None:
        with self._lock:
            self._tokens[app_id] = token

    def get_token(self, app_id: str) -> Optional[AccessToken]:
        """Return the cached token of ``app_id`` or None when there is none."""
        with self._lock:
            return self._tokens.get(app_id)

    def secret(self, app_id: str) -> Optional[str]:
        with self._lock:
            return self._secrets.get(app_id)

    @property
    def callback_url(self) -> Optional[str]:
        return self._callback_url
