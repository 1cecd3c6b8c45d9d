from typing import List, Optional

from .responses import RequestParam
from .users import UserInfo


class VkError(Exception):
    """Base class for errors raised by the VK client."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class VkApiError(VkError):
    """Raised when VK answers with an ``error`` object in the response envelope.

    ``users`` carries whatever ``response`` list arrived alongside the error,
    which is usually empty.
    """

    def __init__(
        self,
        error_code: int,
        message: str,
        request_params: Optional[List[RequestParam]] = None,
        users: Optional[List[UserInfo]] = None,
    ):
        self.error_code = error_code
        self.request_params = request_params or []
        self.users = users or []
        super().__init__(message)

    def __str__(self) -> str:
        return f"Code={self.error_code}, len(request_params)={len(self.request_params)}, {self.message}"


class ResponseDecodeError(VkError):
    """Raised when a response body is not a valid VK envelope."""

    def __init__(self, message: str = "Failed to decode VK response"):
        super().__init__(message)


class UnexpectedUsersCountError(VkError):
    """Raised when a single-user lookup does not return exactly one user."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"len(users):{actual} != {expected}")
