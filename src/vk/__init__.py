"""Client for the VK social network HTTP API."""

from ._apps_registry import AppsRegistry
from ._config import Config
from ._services import UsersService
from ._utils.constants import (
    FIELD_FIRST_NAME,
    FIELD_LAST_NAME,
    FIELD_NICKNAME,
    FIELD_SCREEN_NAME,
    NAME_CASES,
)
from ._vk import VK
from .models import (
    AccessToken,
    NameCase,
    ResponseDecodeError,
    UnexpectedUsersCountError,
    UserInfo,
    VkApiError,
    VkError,
)

__all__ = [
    "VK",
    "AccessToken",
    "AppsRegistry",
    "Config",
    "FIELD_FIRST_NAME",
    "FIELD_LAST_NAME",
    "FIELD_NICKNAME",
    "FIELD_SCREEN_NAME",
    "NAME_CASES",
    "NameCase",
    "ResponseDecodeError",
    "UnexpectedUsersCountError",
    "UserInfo",
    "UsersService",
    "VkApiError",
    "VkError",
]
