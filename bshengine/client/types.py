from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Awaitable, Callable, Literal

import httpx

from bshengine.client.errors import BshError
from bshengine.schemas.response import BshResponse

HttpMethod = Literal["GET", "POST", "PUT", "DELETE", "PATCH"]
ResponseType = Literal["json", "blob", "text", "arrayBuffer"]
RequestFormat = Literal["json", "text", "form"]


class AuthType(StrEnum):
    JWT = "JWT"
    APIKEY = "APIKEY"

    @classmethod
    def _missing_(cls, value: object) -> AuthType | None:
        if isinstance(value, str):
            normalized = value.upper().replace("_", "").replace("-", "")
            for member in cls:
                if member.value == normalized:
                    return member
        return None


@dataclass(frozen=True)
class AuthToken:
    type: AuthType
    token: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", AuthType(self.type))


class FormData:
    """Ordered multipart body.

    Values that are bytes, file objects or ``(filename, content[, content_type])``
    tuples are sent as file parts, everything else as text fields.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[str, Any]] = []

    def set(self, name: str, value: Any) -> None:
        self.delete(name)
        self._entries.append((name, value))

    def append(self, name: str, value: Any) -> None:
        self._entries.append((name, value))

    def delete(self, name: str) -> None:
        self._entries = [(key, value) for key, value in self._entries if key != name]

    def get(self, name: str) -> Any:
        for key, value in self._entries:
            if key == name:
                return value
        return None

    def keys(self) -> list[str]:
        return [key for key, _ in self._entries]

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_httpx(self) -> tuple[dict[str, str | list[str]], list[tuple[str, Any]]]:
        data: dict[str, str | list[str]] = {}
        files: list[tuple[str, Any]] = []
        for key, value in self._entries:
            if _is_file_part(value):
                files.append((key, value))
                continue
            text = value if isinstance(value, str) else str(value)
            existing = data.get(key)
            if existing is None:
                data[key] = text
            elif isinstance(existing, list):
                existing.append(text)
            else:
                data[key] = [existing, text]
        return data, files


def _is_file_part(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, tuple)) or hasattr(value, "read")


@dataclass
class RequestOptions:
    method: HttpMethod | None = None
    response_type: ResponseType | None = None
    request_format: RequestFormat | None = None
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    query_params: dict[str, str] | None = None
    form_data: FormData | None = None


@dataclass
class CallbackOptions:
    on_success: Callable[[BshResponse], Any] | None = None
    on_error: Callable[[BshError], Any] | None = None
    on_download: Callable[[bytes], Any] | None = None


@dataclass
class ClientRequest:
    path: str
    options: RequestOptions = field(default_factory=RequestOptions)
    callbacks: CallbackOptions = field(default_factory=CallbackOptions)
    api: str | None = None
    entity: str | None = None


TransportFn = Callable[[ClientRequest], Awaitable[httpx.Response]]
AuthFn = Callable[[], Awaitable[AuthToken | None]]
RefreshTokenFn = Callable[[], Awaitable[str | None]]
TokenRefresher = Callable[[AuthToken], Awaitable[AuthToken | None]]

PreInterceptor = Callable[[ClientRequest], Awaitable[ClientRequest | None]]
PostInterceptor = Callable[[BshResponse, ClientRequest], Awaitable[BshResponse | None]]
ErrorInterceptor = Callable[[BshError, BshResponse | None, ClientRequest], Awaitable[BshError | None]]


@dataclass
class Interceptors:
    pre: list[PreInterceptor] = field(default_factory=list)
    post: list[PostInterceptor] = field(default_factory=list)
    error: list[ErrorInterceptor] = field(default_factory=list)
