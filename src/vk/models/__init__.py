"""VK API models.

This module contains the records decoded from VK responses and the errors
raised by the client.
"""

from .auth import AccessToken
from .errors import (
    ResponseDecodeError,
    UnexpectedUsersCountError,
    VkApiError,
    VkError,
)
from .responses import ApiErrorBody, RequestParam, UsersGetResponse
from .users import (
    GeoPlace,
    NameCase,
    PlatformInfo,
    Relative,
    School,
    University,
    UserInfo,
)

__all__ = [
    "AccessToken",
    "ApiErrorBody",
    "GeoPlace",
    "NameCase",
    "PlatformInfo",
    "Relative",
    "RequestParam",
    "ResponseDecodeError",
    "School",
    "UnexpectedUsersCountError",
    "University",
    "UserInfo",
    "UsersGetResponse",
    "VkApiError",
    "VkError",
]
