from __future__ import annotations

from typing import Any, Callable
from urllib.parse import urlencode

from bshengine.client.bsh_client import BshClient
from bshengine.client.errors import BshError
from bshengine.client.types import CallbackOptions, ClientRequest, FormData, HttpMethod, RequestOptions
from bshengine.schemas.response import BshResponse

JSON_HEADERS = {"Content-Type": "application/json"}

OnSuccess = Callable[[BshResponse], Any]
OnError = Callable[[BshError], Any]
OnDownload = Callable[[bytes], Any]


class BaseService:
    base_endpoint = ""
    api_prefix = ""

    def __init__(self, client: BshClient) -> None:
        self.client = client

    def _request(
        self,
        suffix: str = "",
        *,
        operation: str,
        payload: Any = None,
        on_success: OnSuccess | None = None,
        on_error: OnError | None = None,
        on_download: OnDownload | None = None,
        entity: str | None = None,
        method: HttpMethod | None = None,
        response_type: str = "json",
    ) -> ClientRequest:
        is_form = isinstance(payload, FormData)
        headers = dict(JSON_HEADERS) if payload is not None and not is_form else {}
        return ClientRequest(
            path=f"{self.base_endpoint}{suffix}",
            options=RequestOptions(
                method=method,
                response_type=response_type,
                request_format="form" if is_form else "json",
                body=payload,
                headers=headers,
            ),
            callbacks=CallbackOptions(on_success=on_success, on_error=on_error, on_download=on_download),
            api=f"{self.api_prefix}.{operation}",
            entity=entity,
        )


def list_query(
    *,
    page: int | str | None = None,
    size: int | str | None = None,
    sort: str | None = None,
    filter: str | None = None,  # noqa: A002
) -> str:
    params = [
        (key, str(value))
        for key, value in (("page", page), ("size", size), ("sort", sort), ("filter", filter))
        if value not in (None, "")
    ]
    if not params:
        return ""
    return f"?{urlencode(params)}"
