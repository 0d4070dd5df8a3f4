from __future__ import annotations

import inspect
from dataclasses import replace
from typing import Any, Callable

import httpx

from bshengine.client.auth import auth_headers_for, resolve_credential
from bshengine.client.errors import BshError, BshResponseFormatError, error_for_status
from bshengine.client.transport import httpx_transport
from bshengine.client.types import (
    AuthFn,
    ClientRequest,
    HttpMethod,
    Interceptors,
    RefreshTokenFn,
    TokenRefresher,
    TransportFn,
)
from bshengine.schemas.response import BshResponse

CONNECTION_ISSUE = "Connection Issue"


class BshClient:
    """Performs one HTTP verb call against the engine host and normalizes the outcome.

    Every call ends in exactly one of: a callback invoked (the coroutine then
    resolves to ``None``), a value returned, or a :class:`BshError` raised.
    Transport exceptions are never wrapped.
    """

    def __init__(
        self,
        host: str | None = "",
        transport: TransportFn | None = None,
        auth_fn: AuthFn | None = None,
        refresh_token_fn: RefreshTokenFn | None = None,
        *,
        interceptors: Interceptors | None = None,
        token_refresher: TokenRefresher | None = None,
    ) -> None:
        self.host = host or ""
        self.transport = transport or httpx_transport
        self.auth_fn = auth_fn
        # Kept for callers; refresh runs through token_refresher.
        self.refresh_token_fn = refresh_token_fn
        self.interceptors = interceptors or Interceptors()
        self._token_refresher = token_refresher

    async def get(self, request: ClientRequest) -> BshResponse | None:
        return await self._send_json(request, "GET")

    async def post(self, request: ClientRequest) -> BshResponse | None:
        return await self._send_json(request, "POST")

    async def put(self, request: ClientRequest) -> BshResponse | None:
        return await self._send_json(request, "PUT")

    async def patch(self, request: ClientRequest) -> BshResponse | None:
        return await self._send_json(request, "PATCH")

    async def delete(self, request: ClientRequest) -> BshResponse | None:
        return await self._send_json(request, "DELETE")

    async def download(self, request: ClientRequest) -> bytes | None:
        dispatched = await self._prepare(request, request.options.method or "GET")
        response = await self.transport(dispatched)
        return await self.parse_blob_outcome(response, dispatched, endpoint=request.path)

    async def parse_json_outcome(
        self,
        response: httpx.Response,
        request: ClientRequest,
        *,
        endpoint: str | None = None,
    ) -> BshResponse | None:
        endpoint = request.path if endpoint is None else endpoint
        if not response.is_success:
            return await self._raise_or_report(_failure_error(response, endpoint), request)

        try:
            envelope = _success_envelope(response)
        except ValueError:
            return await self._raise_or_report(BshResponseFormatError(response.status_code, endpoint), request)
        envelope.api = request.api

        if request.callbacks.on_success is not None:
            await _invoke(request.callbacks.on_success, envelope)
            return None

        for interceptor in self.interceptors.post:
            replacement = await interceptor(envelope, request)
            if replacement is not None:
                envelope = replacement
        return envelope

    async def parse_blob_outcome(
        self,
        response: httpx.Response,
        request: ClientRequest,
        *,
        endpoint: str | None = None,
    ) -> bytes | None:
        endpoint = request.path if endpoint is None else endpoint
        if not response.is_success:
            return await self._raise_or_report(_failure_error(response, endpoint), request)

        blob = response.content
        if request.callbacks.on_download is not None:
            await _invoke(request.callbacks.on_download, blob)
            return None
        return blob

    async def _send_json(self, request: ClientRequest, method: HttpMethod) -> BshResponse | None:
        dispatched = await self._prepare(request, method)
        response = await self.transport(dispatched)
        return await self.parse_json_outcome(response, dispatched, endpoint=request.path)

    async def _prepare(self, request: ClientRequest, method: HttpMethod) -> ClientRequest:
        credential = await resolve_credential(self.auth_fn, self._token_refresher)
        options = replace(
            request.options,
            method=method,
            headers={**request.options.headers, **auth_headers_for(credential)},
        )
        dispatched = replace(request, path=f"{self.host}{request.path}", options=options)
        for interceptor in self.interceptors.pre:
            replacement = await interceptor(dispatched)
            if replacement is not None:
                dispatched = replacement
        return dispatched

    async def _raise_or_report(self, error: BshError, request: ClientRequest) -> None:
        for interceptor in self.interceptors.error:
            replacement = await interceptor(error, error.response, request)
            if replacement is not None:
                error = replacement
        if request.callbacks.on_error is not None:
            await _invoke(request.callbacks.on_error, error)
            return None
        raise error


async def _invoke(callback: Callable[[Any], Any], argument: Any) -> None:
    result = callback(argument)
    if inspect.isawaitable(result):
        await result


def _envelope_from_payload(payload: Any, status_code: int) -> BshResponse:
    if not isinstance(payload, dict):
        raise ValueError("envelope must be a JSON object")
    fields = dict(payload)
    if fields.get("code") is None:
        fields["code"] = status_code
    return BshResponse.model_validate(fields)


def _success_envelope(response: httpx.Response) -> BshResponse:
    if not response.content:
        return BshResponse(code=response.status_code, status=response.reason_phrase)
    # json.JSONDecodeError and pydantic.ValidationError are both ValueErrors.
    return _envelope_from_payload(response.json(), response.status_code)


def _failure_error(response: httpx.Response, endpoint: str) -> BshError:
    return error_for_status(response.status_code, endpoint, _failure_envelope(response))


def _failure_envelope(response: httpx.Response) -> BshResponse:
    try:
        payload = response.json()
    except ValueError:
        return _text_envelope(response)
    if isinstance(payload, dict):
        try:
            return _envelope_from_payload(payload, response.status_code)
        except ValueError:
            return _text_envelope(response)
    if payload is None:
        return _text_envelope(response)
    return BshResponse(
        data=payload if isinstance(payload, list) else [payload],
        code=response.status_code,
        status=response.reason_phrase,
    )


def _text_envelope(response: httpx.Response) -> BshResponse:
    return BshResponse(
        code=response.status_code,
        status=response.reason_phrase,
        error=response.text or CONNECTION_ISSUE,
    )
