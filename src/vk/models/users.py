from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class NameCase(str, Enum):
    """Grammatical case VK uses to render first and last names."""

    NOMINATIVE = "nom"
    GENITIVE = "gen"
    DATIVE = "dat"
    ACCUSATIVE = "acc"
    INSTRUMENTAL = "ins"
    PREPOSITIONAL = "abl"


class _VkRecord(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        frozen=True,
        extra="allow",
    )


class GeoPlace(_VkRecord):
    """City or country reference."""

    id: int
    title: Optional[str] = None


class PlatformInfo(_VkRecord):
    """When and from which platform the user was last seen."""

    time: Optional[datetime] = None
    platform: Optional[int] = None


class University(_VkRecord):
    id: int
    country: Optional[int] = None
    city: Optional[int] = None
    name: Optional[str] = None
    faculty: Optional[int] = None
    faculty_name: Optional[str] = None
    chair: Optional[int] = None
    chair_name: Optional[str] = None
    graduation: Optional[int] = None
    education_form: Optional[str] = None
    education_status: Optional[str] = None


class School(_VkRecord):
    id: int
    country: Optional[int] = None
    city: Optional[int] = None
    name: Optional[str] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None
    class_: Optional[str] = Field(default=None, alias="class")
    type_str: Optional[str] = None
    speciality: Optional[str] = None


class Relative(_VkRecord):
    # negative ids describe people without a VK account
    id: int
    type: str
    name: Optional[str] = None


class UserInfo(_VkRecord):
    """A user profile as returned by ``users.get``.

    Only ``id`` is always present; every other attribute depends on the
    ``fields`` requested and on the user's privacy settings. See
    https://vk.com/dev/fields for the full list.
    """

    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    screen_name: Optional[str] = None
    nickname: Optional[str] = None
    sex: Optional[int] = None
    domain: Optional[str] = None
    birthdate: Optional[str] = Field(default=None, alias="bdate")
    city: Optional[GeoPlace] = None
    country: Optional[GeoPlace] = None
    photo_50: Optional[str] = None
    photo_100: Optional[str] = None
    photo_200: Optional[str] = None
    photo_max: Optional[str] = None
    photo_200_orig: Optional[str] = None
    photo_max_orig: Optional[str] = None
    has_mobile: Optional[bool] = None
    online: Optional[bool] = None
    can_post: Optional[bool] = None
    can_see_all_posts: Optional[bool] = None
    can_see_audio: Optional[bool] = None
    can_write_private_message: Optional[bool] = None
    site: Optional[str] = None
    status: Optional[str] = None
    last_seen: Optional[PlatformInfo] = None
    common_count: Optional[int] = None
    university: Optional[int] = None
    university_name: Optional[str] = None
    faculty: Optional[int] = None
    faculty_name: Optional[str] = None
    graduation: Optional[int] = None
    relation: Optional[int] = None
    universities: List[University] = Field(default_factory=list)
    schools: List[School] = Field(default_factory=list)
    relatives: List[Relative] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return " ".join(n for n in (self.first_name, self.last_name) if n)
