import asyncio
import time
import urllib.parse

import httpx
import pytest

from reception.services.chatwork_client import ChatworkClient
from reception.utils.exceptions import (
    ChatworkAPIException,
    ChatworkForbiddenException,
    ChatworkTimeoutException,
    ChatworkUnavailableException,
    InvalidApiKeyException,
    RateLimitException,
    RoomAccessException,
    RoomNotFoundException,
)


def run_with_client(handler, action, timeout=5):
    async def _run():
        client = ChatworkClient(
            "token-1",
            base_url="https://api.chatwork.test/v2/",
            timeout=timeout,
            transport=httpx.MockTransport(handler),
        )
        async with client:
            return await action(client)

    return asyncio.run(_run())


def test_send_message_posts_form_encoded_body():
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["request"] = request
        return httpx.Response(200, json={"message_id": "42"})

    result = run_with_client(handler, lambda client: client.send_message("R1", "hello [To:1]"))

    request = captured["request"]
    assert result == {"message_id": "42"}
    assert request.method == "POST"
    assert str(request.url) == "https://api.chatwork.test/v2/rooms/R1/messages"
    assert request.headers["X-ChatWorkToken"] == "token-1"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert urllib.parse.parse_qs(request.content.decode("utf-8")) == {"body": ["hello [To:1]"]}


@pytest.mark.parametrize(
    "status_code, exc_class",
    [
        (401, InvalidApiKeyException),
        (403, ChatworkForbiddenException),
        (404, RoomNotFoundException),
        (429, RateLimitException),
        (503, ChatworkUnavailableException),
    ],
)
def test_send_message_maps_status_codes(status_code, exc_class):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"errors": ["nope"]})

    with pytest.raises(exc_class) as exc_info:
        run_with_client(handler, lambda client: client.send_message("R1", "hi"))

    assert exc_info.value.chatwork_status == status_code


def test_send_message_unknown_status_is_generic():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(418, text="teapot")

    with pytest.raises(ChatworkAPIException) as exc_info:
        run_with_client(handler, lambda client: client.send_message("R1", "hi"))

    assert type(exc_info.value) is ChatworkAPIException
    assert exc_info.value.chatwork_status == 418


def test_get_room_failure_is_access_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"errors": ["not found"]})

    with pytest.raises(RoomAccessException) as exc_info:
        run_with_client(handler, lambda client: client.get_room("R9"))

    assert exc_info.value.chatwork_status == 404


def test_get_me_returns_account():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/v2/me"
        return httpx.Response(200, json={"account_id": 7, "name": "Bot"})

    assert run_with_client(handler, lambda client: client.get_me())["name"] == "Bot"


def test_timeout_maps_to_timeout_exception():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    with pytest.raises(ChatworkTimeoutException):
        run_with_client(handler, lambda client: client.get_room("R1"))


def test_connection_error_maps_to_generic_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ChatworkAPIException) as exc_info:
        run_with_client(handler, lambda client: client.send_message("R1", "hi"))

    assert exc_info.value.chatwork_status is None


def test_client_requires_context_manager():
    client = ChatworkClient("token-1")

    with pytest.raises(RuntimeError):
        asyncio.run(client.get_me())


@pytest.mark.parametrize(
    "status_code, detail",
    [
        (401, "Chatwork API key is invalid"),
        (429, "Chatwork API rate limit exceeded, please wait and try again"),
        (503, "Chatwork service is temporarily unavailable"),
        (500, "Failed to send message to Chatwork (500)"),
    ],
)
def test_status_code_suffix_only_on_generic_error(status_code, detail):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"errors": ["nope"]})

    with pytest.raises(ChatworkAPIException) as exc_info:
        run_with_client(handler, lambda client: client.send_message("R1", "hi"))

    assert exc_info.value.detail == detail


def test_slow_response_is_cut_off_at_total_deadline():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"room_id": 1})

    started = time.monotonic()
    with pytest.raises(ChatworkTimeoutException):
        run_with_client(handler, lambda client: client.get_room("R1"), timeout=0.2)

    assert time.monotonic() - started < 2


def test_slow_send_is_cut_off_at_total_deadline():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json={"message_id": "1"})

    with pytest.raises(ChatworkTimeoutException):
        run_with_client(handler, lambda client: client.send_message("R1", "hi"), timeout=0.2)


def test_non_json_success_body_is_accepted():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>ok</html>")

    assert run_with_client(handler, lambda client: client.get_room("R1")) == {}
    assert run_with_client(handler, lambda client: client.send_message("R1", "hi")) == {}


def test_empty_success_body_is_accepted():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(204)

    assert run_with_client(handler, lambda client: client.send_message("R1", "hi")) == {}
