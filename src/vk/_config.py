from typing import Optional

from pydantic import BaseModel, HttpUrl, field_validator

from ._utils.constants import DEFAULT_API_URL, DEFAULT_API_VERSION


class Config(BaseModel):
    base_url: str = DEFAULT_API_URL
    access_token: Optional[str] = None
    version: str = DEFAULT_API_VERSION
    lang: Optional[str] = None

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_url(cls, value: str) -> str:
        # e.g. https://api.vk.com/method
        url_value = HttpUrl(url=value)
        assert url_value.host, "Invalid URL"
        return str(value).rstrip("/")

    def __repr__(self) -> str:
        token = "***" if self.access_token else None
        return f"Config(base_url={self.base_url!r}, access_token={token!r}, version={self.version!r}, lang={self.lang!r})"
