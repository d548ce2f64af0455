"""Python client for the iTwin Access Control REST API."""
from .access_client import AccessControlClient
from .config import AccessControlSettings, load_settings
from .core import (
    APIResponse,
    ApiError,
    AccessControlError,
    InvalidRequestError,
    MissingAccessTokenError,
)

__all__ = [
    "AccessControlClient",
    "AccessControlSettings",
    "load_settings",
    "APIResponse",
    "ApiError",
    "AccessControlError",
    "InvalidRequestError",
    "MissingAccessTokenError",
]
