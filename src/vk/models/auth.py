"""Module defining the AccessToken model for VK application tokens."""

from pydantic import BaseModel


class AccessToken(BaseModel):
    """Token issued by the VK OAuth endpoint for an application."""

    access_token: str
    expires_in: int | None = None
    user_id: int | None = None
    email: str | None = None

    def __repr__(self) -> str:
        """Override repr to keep the token out of logs."""
        return f"AccessToken(user_id={self.user_id!r}, expires_in={self.expires_in!r}, access_token='***')"

    def __str__(self) -> str:
        return self.__repr__()
