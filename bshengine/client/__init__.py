from bshengine.client.auth import APIKEY_HEADER, AUTHORIZATION_HEADER
from bshengine.client.bsh_client import BshClient
from bshengine.client.errors import (
    BshAuthError,
    BshBadRequestError,
    BshError,
    BshNotFoundError,
    BshRateLimitError,
    BshResponseFormatError,
    BshServerError,
    BshValidationError,
    error_for_status,
)
from bshengine.client.transport import build_httpx_transport, httpx_transport
from bshengine.client.types import (
    AuthFn,
    AuthToken,
    AuthType,
    CallbackOptions,
    ClientRequest,
    ErrorInterceptor,
    FormData,
    Interceptors,
    PostInterceptor,
    PreInterceptor,
    RefreshTokenFn,
    RequestOptions,
    TransportFn,
)

__all__ = [
    "APIKEY_HEADER",
    "AUTHORIZATION_HEADER",
    "AuthFn",
    "AuthToken",
    "AuthType",
    "BshAuthError",
    "BshBadRequestError",
    "BshClient",
    "BshError",
    "BshNotFoundError",
    "BshRateLimitError",
    "BshResponseFormatError",
    "BshServerError",
    "BshValidationError",
    "CallbackOptions",
    "ClientRequest",
    "ErrorInterceptor",
    "FormData",
    "Interceptors",
    "PostInterceptor",
    "PreInterceptor",
    "RefreshTokenFn",
    "RequestOptions",
    "TransportFn",
    "build_httpx_transport",
    "error_for_status",
    "httpx_transport",
]
