from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .users import UserInfo


class RequestParam(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: str
    value: Optional[str] = None


class ApiErrorBody(BaseModel):
    """The ``error`` object of a VK response envelope."""

    model_config = ConfigDict(extra="allow")

    error_code: int
    error_msg: str = ""
    request_params: List[RequestParam] = Field(default_factory=list)


class UsersGetResponse(BaseModel):
    """Envelope of ``users.get``.

    VK documents ``error`` and ``response`` as mutually exclusive, but both are
    modelled as optional and decoded independently.
    """

    model_config = ConfigDict(extra="allow")

    error: Optional[ApiErrorBody] = None
    response: Optional[List[UserInfo]] = None
