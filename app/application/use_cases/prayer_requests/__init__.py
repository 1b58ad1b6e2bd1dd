"""Use cases driving the prayer request lifecycle and its projections."""

from .close_prayer_request import close_prayer_request
from .create_prayer_request import create_prayer_request
from .get_prayer_request_detail import get_prayer_request_detail
from .list_prayer_requests import list_prayer_requests
from .post_prayer_update import post_prayer_update
from .respond_to_prayer_request import respond_to_prayer_request

__all__ = [
    "create_prayer_request",
    "close_prayer_request",
    "post_prayer_update",
    "respond_to_prayer_request",
    "list_prayer_requests",
    "get_prayer_request_detail",
]
