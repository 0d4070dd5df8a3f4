from __future__ import annotations

import json
import time
from typing import Any, Callable

import httpx
from pydantic_core import to_jsonable_python

from bshengine.client.types import ClientRequest, FormData, TransportFn
from bshengine.observability.events import emit_request_finished, emit_request_started

_BODYLESS_METHODS = {"GET", "DELETE"}


def encode_body(request: ClientRequest, method: str) -> dict[str, Any]:
    """httpx keyword arguments carrying the request body."""
    if method in _BODYLESS_METHODS:
        return {}
    options = request.options
    body = options.body
    if isinstance(body, FormData) or options.request_format == "form":
        form = body if isinstance(body, FormData) else options.form_data
        if form is None:
            return {"data": body} if body is not None else {}
        data, files = form.to_httpx()
        # httpx picks the multipart boundary and Content-Type header.
        return {"data": data, "files": files or None}
    if body is None:
        return {}
    if isinstance(body, (bytes, str)):
        return {"content": body}
    payload = to_jsonable_python(body, by_alias=True, exclude_none=True)
    return {"content": json.dumps(payload)}


def build_httpx_transport(
    *,
    timeout_seconds: float = 30.0,
    client_factory: Callable[..., httpx.AsyncClient] = httpx.AsyncClient,
) -> TransportFn:
    async def transport(request: ClientRequest) -> httpx.Response:
        method = (request.options.method or "GET").upper()
        emit_request_started(method=method, url=request.path, api=request.api)
        start = time.perf_counter()
        async with client_factory(timeout=timeout_seconds) as client:
            response = await client.request(
                method,
                request.path,
                headers=request.options.headers or None,
                **encode_body(request, method),
            )
        emit_request_finished(
            method=method,
            url=request.path,
            api=request.api,
            status_code=response.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        return response

    return transport


httpx_transport = build_httpx_transport()
