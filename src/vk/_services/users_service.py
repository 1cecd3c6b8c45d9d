from typing import Any, Dict, List, Optional, Sequence, Union

from httpx import AsyncClient, Client, Response
from pydantic import ValidationError

from .._config import Config
from .._utils.constants import NAME_CASES
from ..models.errors import ResponseDecodeError, UnexpectedUsersCountError, VkApiError
from ..models.responses import UsersGetResponse
from ..models.users import NameCase, UserInfo
from ._base_service import BaseService


class UsersService(BaseService):
    """Service for the ``users.*`` VK API methods."""

    def __init__(
        self,
        config: Config,
        http_client: Optional[Client] = None,
        async_http_client: Optional[AsyncClient] = None,
    ) -> None:
        super().__init__(
            config=config,
            http_client=http_client,
            async_http_client=async_http_client,
        )

    def get(
        self,
        user_ids: Sequence[str],
        fields: Optional[Sequence[str]] = None,
        name_case: Union[NameCase, str, None] = "",
    ) -> List[UserInfo]:
        """Implements https://vk.com/dev/users.get.

        Args:
            user_ids: User ids or screen names, no more than 1000. A single
                string is taken as one id.
            fields: Extra profile fields to return, e.g. ``sex``, ``bdate``,
                ``city``, ``country``, ``photo_50``, ``photo_100``,
                ``photo_200_orig``, ``photo_200``, ``photo_max``,
                ``photo_max_orig``, ``online``, ``domain``, ``has_mobile``,
                ``site``, ``universities``, ``schools``, ``can_post``,
                ``can_see_all_posts``, ``can_see_audio``,
                ``can_write_private_message``, ``status``, ``last_seen``,
                ``common_count``, ``relation``, ``relatives``.
            name_case: One of ``nom``, ``gen``, ``dat``, ``acc``, ``ins``,
                ``abl``. Empty means the server default (``nom``).

        Returns:
            List[UserInfo]: The users found.

        Raises:
            ValueError: If no ids were given or the name case is unknown.
            VkApiError: If VK returned an error object.
            ResponseDecodeError: If the body is not a valid VK envelope.
            httpx.HTTPError: If the request itself failed.

        Examples:
            ```python
            from vk import VK

            client = VK(access_token="...")
            users = client.users.get(["1", "durov"], fields=["screen_name"])
            ```
        """
        params = self._get_params(user_ids, fields, name_case)
        response = self.request("users.get", params)
        return self._parse_users(response)

    async def get_async(
        self,
        user_ids: Sequence[str],
        fields: Optional[Sequence[str]] = None,
        name_case: Union[NameCase, str, None] = "",
    ) -> List[UserInfo]:
        """Asynchronously fetch users. See ``get``."""
        params = self._get_params(user_ids, fields, name_case)
        response = await self.request_async("users.get", params)
        return self._parse_users(response)

    def get_by_id(
        self,
        user_id: int,
        name_case: Union[NameCase, str, None] = "",
        *fields: str,
    ) -> UserInfo:
        """Fetch a single user by numeric id.

        Raises:
            UnexpectedUsersCountError: If VK did not return exactly one user.
        """
        users = self.get([str(user_id)], list(fields), name_case)
        return self._single(users)

    async def get_by_id_async(
        self,
        user_id: int,
        name_case: Union[NameCase, str, None] = "",
        *fields: str,
    ) -> UserInfo:
        users = await self.get_async([str(user_id)], list(fields), name_case)
        return self._single(users)

    def _get_params(
        self,
        user_ids: Sequence[str],
        fields: Optional[Sequence[str]],
        name_case: Union[NameCase, str, None],
    ) -> Dict[str, Any]:
        if isinstance(user_ids, str):
            user_ids = [user_ids] if user_ids else []
        if isinstance(fields, str):
            fields = [fields]
        if not user_ids:
            raise ValueError("you must pass at least one id or screen_name")

        if isinstance(name_case, NameCase):
            name_case = name_case.value
        if name_case and name_case not in NAME_CASES:
            raise ValueError(
                "the only available name cases are: " + ", ".join(NAME_CASES)
            )

        params: Dict[str, Any] = {"user_ids": ",".join(user_ids)}
        if fields:
            fields_str = ",".join(fields)
            self._logger.debug(f"VK fields: {fields_str}")
            params["fields"] = fields_str
        if name_case:
            params["name_case"] = name_case
        return params

    def _parse_users(self, response: Response) -> List[UserInfo]:
        try:
            envelope = UsersGetResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise ResponseDecodeError() from e

        self._logger.debug(f"Decoded VK response: {envelope!r}")
        users = envelope.response or []
        if envelope.error is not None:
            error = VkApiError(
                envelope.error.error_code,
                envelope.error.error_msg,
                envelope.error.request_params,
                users,
            )
            self._logger.debug(f"VK API returned error - pass it upstream: {error}")
            raise error
        return users

    @staticmethod
    def _single(users: List[UserInfo]) -> UserInfo:
        if len(users) != 1:
            raise UnexpectedUsersCountError(expected=1, actual=len(users))
        return users[0]
