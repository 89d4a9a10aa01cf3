from .client import SeatsIoClient
from .config_types import ClientConfig, Environment
from .errors import AuthError, ConfigurationError, NetworkError, SeatsIoClientError, UnsuccessfulResponseError
from .results import ApiResult, EmptyResult, JsonResult, TextResult
from .transport import HttpxTransport, Response

__all__ = [
    "SeatsIoClient",
    "ClientConfig",
    "Environment",
    "SeatsIoClientError",
    "ConfigurationError",
    "NetworkError",
    "UnsuccessfulResponseError",
    "AuthError",
    "ApiResult",
    "JsonResult",
    "TextResult",
    "EmptyResult",
    "HttpxTransport",
    "Response",
]
