from ._logs import LOGGER_NAME, setup_logging
from ._ssl_context import get_httpx_client_kwargs

__all__ = [
    "LOGGER_NAME",
    "setup_logging",
    "get_httpx_client_kwargs",
]
