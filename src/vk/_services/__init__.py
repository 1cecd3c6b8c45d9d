from ._base_service import BaseService
from .users_service import UsersService

__all__ = [
    "BaseService",
    "UsersService",
]
