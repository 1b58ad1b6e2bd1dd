"""Use cases for managing users."""

from .authenticate_user import authenticate_user
from .get_user import get_user
from .register_user import register_user
from .update_settings import update_settings

__all__ = [
    "authenticate_user",
    "get_user",
    "register_user",
    "update_settings",
]
