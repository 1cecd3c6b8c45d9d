from logging import getLogger
from typing import Any, Dict, Optional

from httpx import URL, AsyncClient, Client, Response

from .._config import Config
from .._utils import LOGGER_NAME, get_httpx_client_kwargs
from .._utils.constants import PARAM_ACCESS_TOKEN, PARAM_LANG, PARAM_VERSION


class BaseService:
    """Base class for VK API method groups.

    Holds the configuration and the httpx clients, and knows how to turn a VK
    method name such as ``users.get`` into a request. Requests are sent once;
    transport errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        config: Config,
        http_client: Optional[Client] = None,
        async_http_client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config

        client_kwargs: Dict[str, Any] = {}
        if http_client is None or async_http_client is None:
            client_kwargs = get_httpx_client_kwargs()
        self._client = http_client or Client(**client_kwargs)
        self._client_async = async_http_client or AsyncClient(**client_kwargs)
        # clients passed in by the caller are closed by the caller
        self._owns_client = http_client is None
        self._owns_client_async = async_http_client is None

    def method_url(self, method: str) -> str:
        return f"{self._config.base_url}/{method}"

    @property
    def default_params(self) -> Dict[str, str]:
        params = {PARAM_VERSION: self._config.version}
        if self._config.access_token:
            params[PARAM_ACCESS_TOKEN] = self._config.access_token
        if self._config.lang:
            params[PARAM_LANG] = self._config.lang
        return params

    def _prepare(self, method: str, params: Dict[str, Any]) -> tuple[str, Dict[str, Any]]:
        url = self.method_url(method)
        query = {**params, **self.default_params}

        redacted = dict(query)
        if PARAM_ACCESS_TOKEN in redacted:
            redacted[PARAM_ACCESS_TOKEN] = "***"
        self._logger.debug(f"url: {URL(url, params=redacted)}")

        return url, query

    def _log_response(self, response: Response) -> None:
        self._logger.debug(
            f"VK response(status={response.status_code}) body: {response.text}"
        )

    def request(self, method: str, params: Dict[str, Any]) -> Response:
        url, query = self._prepare(method, params)
        response = self._client.get(url, params=query)
        self._log_response(response)
        return response

    async def request_async(self, method: str, params: Dict[str, Any]) -> Response:
        url, query = self._prepare(method, params)
        response = await self._client_async.get(url, params=query)
        self._log_response(response)
        return response

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    async def aclose(self) -> None:
        self.close()
        if self._owns_client_async:
            await self._client_async.aclose()
