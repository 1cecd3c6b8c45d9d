from functools import cached_property
from os import environ as env
from types import TracebackType
from typing import Optional, Type

from dotenv import load_dotenv
from httpx import AsyncClient, Client

from ._apps_registry import AppsRegistry
from ._config import Config
from ._services import UsersService
from ._utils import setup_logging
from ._utils.constants import (
    DEFAULT_API_URL,
    DEFAULT_API_VERSION,
    ENV_VK_ACCESS_TOKEN,
    ENV_VK_API_LANG,
    ENV_VK_API_URL,
    ENV_VK_API_VERSION,
)

load_dotenv()


class VK:
    """Entry point to the VK API services."""

    def __init__(
        self,
        *,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        version: Optional[str] = None,
        lang: Optional[str] = None,
        debug: bool = False,
        http_client: Optional[Client] = None,
        async_http_client: Optional[AsyncClient] = None,
    ) -> None:
        """
        Initialize the VK client.

        Args:
            access_token (Optional[str]): Token sent with every call. Falls back
                to the `VK_ACCESS_TOKEN` environment variable.
            base_url (Optional[str]): API root, `VK_API_URL` or
                https://api.vk.com/method by default.
            version (Optional[str]): API version sent as `v`, `VK_API_VERSION`
                or 5.131 by default.
            lang (Optional[str]): Response language, `VK_API_LANG` by default.
            debug (bool): Enable debug logging if set to True. Defaults to False.
            http_client (Optional[Client]): httpx client to use instead of the
                default one.
            async_http_client (Optional[AsyncClient]): httpx async client to use
                instead of the default one.
        """
        self._config = Config(
            base_url=base_url or env.get(ENV_VK_API_URL) or DEFAULT_API_URL,
            access_token=access_token or env.get(ENV_VK_ACCESS_TOKEN),
            version=version or env.get(ENV_VK_API_VERSION) or DEFAULT_API_VERSION,
            lang=lang or env.get(ENV_VK_API_LANG),
        )

        logger = setup_logging(debug)
        logger.debug(f"CONFIG: {self._config!r}")

        self._http_client = http_client
        self._async_http_client = async_http_client
        self._apps = AppsRegistry()

    @cached_property
    def users(self) -> UsersService:
        """
        Profile lookups through the `users.get` method.

        Built once per client so its httpx connections are reused; release
        them with `close`, `aclose` or by using the client as a context manager.
        """
        return UsersService(
            self._config, self._http_client, self._async_http_client
        )

    @property
    def apps(self) -> AppsRegistry:
        """
        Registry of the OAuth tokens of the registered VK applications.
        """
        return self._apps

    def close(self) -> None:
        """Close the httpx clients created by this client."""
        if "users" in self.__dict__:
            self.users.close()

    async def aclose(self) -> None:
        if "users" in self.__dict__:
            await self.users.aclose()

    def __enter__(self) -> "VK":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    async def __aenter__(self) -> "VK":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        await self.aclose()
