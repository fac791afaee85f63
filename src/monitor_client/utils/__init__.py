from .http import create_http_client
from .json import enum_as_string, normalize_for_json
from .user_agent import get_user_agent

__all__ = [
    "create_http_client",
    "enum_as_string",
    "get_user_agent",
    "normalize_for_json",
]
