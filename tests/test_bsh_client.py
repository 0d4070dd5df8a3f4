from __future__ import annotations

import httpx
import pytest

from _helpers import FakeTransport, envelope, json_response
from bshengine.client.bsh_client import BshClient
from bshengine.client.errors import BshError, BshNotFoundError, BshResponseFormatError, BshServerError
from bshengine.client.types import AuthToken, AuthType, CallbackOptions, ClientRequest, Interceptors, RequestOptions
from bshengine.schemas.response import BshResponse


def _auth(token_type: str, token: str):
    async def auth_fn() -> AuthToken:
        return AuthToken(AuthType(token_type), token)

    return auth_fn


@pytest.mark.asyncio
async def test_get_resolves_to_envelope_and_dispatches_full_path(transport: FakeTransport) -> None:
    payload = envelope([{"id": 1}])
    transport.queue(json_response(payload))
    client = BshClient("https://api.test.com", transport)

    result = await client.get(ClientRequest(path="/users"))

    assert transport.last.path == "https://api.test.com/users"
    assert transport.last.options.method == "GET"
    assert transport.last.options.headers == {}
    assert result is not None
    assert result.model_dump(exclude_none=True) == payload


@pytest.mark.asyncio
async def test_post_forwards_body_unchanged_and_returns_created_envelope(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope([{"id": 7, "name": "Test"}], code=201), status_code=201))
    client = BshClient("", transport)
    body = {"name": "Test"}

    result = await client.post(ClientRequest(path="/users", options=RequestOptions(body=body)))

    assert transport.last.options.method == "POST"
    assert transport.last.options.body is body
    assert result is not None
    assert result.code == 201
    assert result.data == [{"id": 7, "name": "Test"}]


@pytest.mark.asyncio
@pytest.mark.parametrize("verb", ["get", "post", "put", "patch", "delete"])
async def test_empty_host_dispatches_path_verbatim(transport: FakeTransport, verb: str) -> None:
    client = BshClient("", transport)

    await getattr(client, verb)(ClientRequest(path="/api/entities/Foo/search?x=1"))

    assert transport.last.path == "/api/entities/Foo/search?x=1"
    assert transport.last.options.method == verb.upper()


@pytest.mark.asyncio
async def test_on_success_consumes_result(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope([{"id": 1}])))
    received: list[BshResponse] = []
    client = BshClient("", transport)

    result = await client.get(ClientRequest(path="/users", callbacks=CallbackOptions(on_success=received.append)))

    assert result is None
    assert len(received) == 1
    assert received[0].data == [{"id": 1}]


@pytest.mark.asyncio
async def test_async_callbacks_are_awaited(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope([{"id": 1}])))
    received: list[BshResponse] = []

    async def on_success(response: BshResponse) -> None:
        received.append(response)

    client = BshClient("", transport)
    result = await client.get(ClientRequest(path="/users", callbacks=CallbackOptions(on_success=on_success)))

    assert result is None
    assert [row.data for row in received] == [[{"id": 1}]]


@pytest.mark.asyncio
async def test_failure_without_callback_raises_typed_error(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope(code=404), status_code=404))
    client = BshClient("https://api.test.com", transport)

    with pytest.raises(BshError) as exc_info:
        await client.get(ClientRequest(path="/missing"))

    error = exc_info.value
    assert isinstance(error, BshNotFoundError)
    assert error.status == 404
    assert error.endpoint == "/missing"
    assert error.response is not None
    assert error.response.endpoint == "/missing"
    assert error.response.error == "failed"


@pytest.mark.asyncio
async def test_on_error_consumes_failure(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope(code=404), status_code=404))
    errors: list[BshError] = []
    successes: list[BshResponse] = []
    client = BshClient("", transport)

    result = await client.delete(
        ClientRequest(
            path="/missing",
            callbacks=CallbackOptions(on_success=successes.append, on_error=errors.append),
        )
    )

    assert result is None
    assert successes == []
    assert len(errors) == 1
    assert errors[0].status == 404
    assert errors[0].endpoint == "/missing"


@pytest.mark.asyncio
async def test_on_success_alone_does_not_swallow_failures(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope(code=500), status_code=500))
    client = BshClient("", transport)

    with pytest.raises(BshServerError):
        await client.get(ClientRequest(path="/boom", callbacks=CallbackOptions(on_success=lambda _r: None)))


@pytest.mark.asyncio
async def test_error_message_is_serialized_envelope(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope(code=400, error="bad field"), status_code=400))
    client = BshClient("", transport)

    with pytest.raises(BshError) as exc_info:
        await client.post(ClientRequest(path="/users", options=RequestOptions(body={})))

    message = str(exc_info.value)
    assert '"error": "bad field"' in message
    assert '"endpoint": "/users"' in message


@pytest.mark.asyncio
async def test_transport_exceptions_propagate_unwrapped(transport: FakeTransport) -> None:
    transport.queue(httpx.ConnectError("dns failure"))
    client = BshClient("", transport)

    with pytest.raises(httpx.ConnectError):
        await client.get(ClientRequest(path="/users", callbacks=CallbackOptions(on_error=lambda _e: None)))


@pytest.mark.asyncio
async def test_unparsable_error_body_becomes_text_envelope(transport: FakeTransport) -> None:
    transport.queue(httpx.Response(502, content=b"<html>Bad Gateway</html>"))
    client = BshClient("", transport)

    with pytest.raises(BshServerError) as exc_info:
        await client.get(ClientRequest(path="/users"))

    response = exc_info.value.response
    assert response is not None
    assert response.code == 502
    assert response.status == "Bad Gateway"
    assert response.error == "<html>Bad Gateway</html>"
    assert response.data == []


@pytest.mark.asyncio
async def test_empty_error_body_reports_connection_issue(transport: FakeTransport) -> None:
    transport.queue(httpx.Response(503))
    client = BshClient("", transport)

    with pytest.raises(BshError) as exc_info:
        await client.get(ClientRequest(path="/users"))

    assert exc_info.value.response is not None
    assert exc_info.value.response.error == "Connection Issue"


@pytest.mark.asyncio
async def test_non_json_success_body_is_format_error(transport: FakeTransport) -> None:
    transport.queue(httpx.Response(200, content=b"definitely not json"))
    errors: list[BshError] = []
    client = BshClient("", transport)

    result = await client.get(ClientRequest(path="/users", callbacks=CallbackOptions(on_error=errors.append)))

    assert result is None
    assert len(errors) == 1
    assert isinstance(errors[0], BshResponseFormatError)
    assert errors[0].status == 200
    assert errors[0].response is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "diagnostics",
    [
        {"pagination": {"current": 0, "total": 5}},
        {"meta": {"tips": {"hint": 1}}},
        {"timestamp": 1700000000000.5},
        {"validations": [{"field": "name", "error": None}]},
    ],
    ids=["partial-pagination", "numeric-tips", "fractional-timestamp", "null-validation-error"],
)
async def test_loose_diagnostics_do_not_reject_success_body(transport: FakeTransport, diagnostics: dict) -> None:
    transport.queue(json_response({**envelope([{"id": 1}]), **diagnostics}))
    client = BshClient("", transport)

    result = await client.get(ClientRequest(path="/x"))

    assert result is not None
    assert result.code == 200
    assert result.data == [{"id": 1}]


@pytest.mark.asyncio
async def test_partial_pagination_keeps_known_fields(transport: FakeTransport) -> None:
    transport.queue(json_response({**envelope([{"id": 1}]), "pagination": {"current": 0, "total": 5}}))
    client = BshClient("", transport)

    result = await client.get(ClientRequest(path="/x"))

    assert result is not None
    assert result.pagination is not None
    assert result.pagination.total == 5
    assert result.pagination.pages is None


def test_refresh_token_provider_is_kept_on_client() -> None:
    async def refresh_token_fn() -> str:
        return "r"

    client = BshClient("", FakeTransport(), refresh_token_fn=refresh_token_fn)

    assert client.refresh_token_fn is refresh_token_fn


@pytest.mark.asyncio
async def test_success_body_without_code_takes_http_status(transport: FakeTransport) -> None:
    transport.queue(json_response({"data": [{"id": 1}]}, status_code=201))
    client = BshClient("", transport)

    result = await client.post(ClientRequest(path="/users"))

    assert result is not None
    assert result.code == 201
    assert result.error == ""


@pytest.mark.asyncio
async def test_no_content_success_yields_empty_envelope(transport: FakeTransport) -> None:
    transport.queue(httpx.Response(204))
    client = BshClient("", transport)

    result = await client.delete(ClientRequest(path="/users/1"))

    assert result is not None
    assert result.code == 204
    assert result.data == []


@pytest.mark.asyncio
async def test_api_identifier_is_copied_to_envelope(transport: FakeTransport) -> None:
    client = BshClient("", transport)

    result = await client.get(ClientRequest(path="/api/users/me", api="user.me"))

    assert result is not None
    assert result.api == "user.me"


@pytest.mark.asyncio
async def test_jwt_credential_adds_bearer_header(transport: FakeTransport) -> None:
    client = BshClient("", transport, _auth("JWT", "T"))

    await client.get(ClientRequest(path="/test"))
    await client.post(ClientRequest(path="/test"))

    assert [call.options.headers for call in transport.calls] == [
        {"Authorization": "Bearer T"},
        {"Authorization": "Bearer T"},
    ]


@pytest.mark.asyncio
async def test_api_key_credential_adds_api_key_header(transport: FakeTransport) -> None:
    client = BshClient("", transport, _auth("APIKEY", "K"))

    await client.put(ClientRequest(path="/test"))

    assert transport.last.options.headers == {"X-BSH-APIKEY": "K"}


@pytest.mark.asyncio
async def test_api_key_alias_is_normalized(transport: FakeTransport) -> None:
    client = BshClient("", transport, _auth("API_KEY", "K"))

    await client.get(ClientRequest(path="/test"))

    assert transport.last.options.headers == {"X-BSH-APIKEY": "K"}


@pytest.mark.asyncio
async def test_missing_auth_provider_leaves_headers_untouched(transport: FakeTransport) -> None:
    client = BshClient("", transport)
    headers = {"Content-Type": "application/json"}

    await client.post(ClientRequest(path="/test", options=RequestOptions(headers=headers)))

    assert transport.last.options.headers == {"Content-Type": "application/json"}


@pytest.mark.asyncio
async def test_auth_provider_returning_none_adds_nothing(transport: FakeTransport) -> None:
    async def auth_fn() -> None:
        return None

    client = BshClient("", transport, auth_fn)

    await client.get(ClientRequest(path="/test", options=RequestOptions(headers={"X-Trace": "1"})))

    assert transport.last.options.headers == {"X-Trace": "1"}


@pytest.mark.asyncio
async def test_auth_header_merges_with_and_overrides_caller_headers(transport: FakeTransport) -> None:
    client = BshClient("", transport, _auth("JWT", "token"))

    await client.get(
        ClientRequest(
            path="/test",
            options=RequestOptions(headers={"Custom-Header": "value", "Authorization": "Basic abc"}),
        )
    )

    assert transport.last.options.headers == {"Custom-Header": "value", "Authorization": "Bearer token"}


@pytest.mark.asyncio
async def test_auth_provider_is_consulted_on_every_call(transport: FakeTransport) -> None:
    tokens = iter(["first", "second"])

    async def rotating_auth() -> AuthToken:
        return AuthToken(AuthType.JWT, next(tokens))

    client = BshClient("", transport, rotating_auth)
    await client.get(ClientRequest(path="/a"))
    await client.get(ClientRequest(path="/b"))

    assert [call.options.headers["Authorization"] for call in transport.calls] == ["Bearer first", "Bearer second"]


@pytest.mark.asyncio
async def test_download_returns_bytes(transport: FakeTransport) -> None:
    transport.queue(httpx.Response(200, content=b"id,name\n1,Foo\n"))
    client = BshClient("", transport)

    blob = await client.download(ClientRequest(path="/api/entities/Foo/export?format=csv"))

    assert blob == b"id,name\n1,Foo\n"
    assert transport.last.options.method == "GET"


@pytest.mark.asyncio
async def test_download_callback_consumes_bytes(transport: FakeTransport) -> None:
    transport.queue(httpx.Response(200, content=b"\x00\x01"))
    downloads: list[bytes] = []
    client = BshClient("", transport)

    result = await client.download(
        ClientRequest(path="/export", callbacks=CallbackOptions(on_download=downloads.append))
    )

    assert result is None
    assert downloads == [b"\x00\x01"]


@pytest.mark.asyncio
async def test_download_failure_follows_error_path(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope(code=403), status_code=403))
    errors: list[BshError] = []
    client = BshClient("", transport)

    result = await client.download(ClientRequest(path="/export", callbacks=CallbackOptions(on_error=errors.append)))

    assert result is None
    assert errors[0].status == 403
    assert errors[0].endpoint == "/export"


@pytest.mark.asyncio
async def test_interceptors_run_in_order(transport: FakeTransport) -> None:
    seen: list[str] = []

    async def tag_request(request: ClientRequest) -> ClientRequest:
        request.options.headers["X-Tag"] = "pre"
        seen.append("pre")
        return request

    async def decorate(response: BshResponse, request: ClientRequest) -> BshResponse:
        seen.append(f"post:{request.api}")
        response.status = "intercepted"
        return response

    client = BshClient("", transport, interceptors=Interceptors(pre=[tag_request], post=[decorate]))
    result = await client.get(ClientRequest(path="/test", api="status.load"))

    assert transport.last.options.headers["X-Tag"] == "pre"
    assert result is not None
    assert result.status == "intercepted"
    assert seen == ["pre", "post:status.load"]


@pytest.mark.asyncio
async def test_post_interceptors_skip_callback_results(transport: FakeTransport) -> None:
    calls: list[str] = []

    async def decorate(response: BshResponse, request: ClientRequest) -> None:  # noqa: ARG001
        calls.append("post")

    client = BshClient("", transport, interceptors=Interceptors(post=[decorate]))
    await client.get(ClientRequest(path="/test", callbacks=CallbackOptions(on_success=lambda _r: None)))

    assert calls == []


@pytest.mark.asyncio
async def test_error_interceptor_can_replace_error(transport: FakeTransport) -> None:
    transport.queue(json_response(envelope(code=404), status_code=404))

    class _Translated(BshError):
        pass

    async def translate(error: BshError, response: BshResponse | None, request: ClientRequest) -> BshError:
        assert response is error.response
        return _Translated(error.status, request.path, response)

    client = BshClient("https://api.test.com", transport, interceptors=Interceptors(error=[translate]))

    with pytest.raises(_Translated) as exc_info:
        await client.get(ClientRequest(path="/users/9"))

    assert exc_info.value.endpoint == "https://api.test.com/users/9"
