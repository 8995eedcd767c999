"""
Chatwork API v2 클라이언트
- 호출당 1회만 시도 (재시도 없음)
- 상태 코드는 utils.exceptions의 예외로 변환
"""
import asyncio
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from reception.config import settings
from reception.utils.exceptions import (
    ChatworkAPIException,
    ChatworkTimeoutException,
    RoomAccessException,
    chatwork_exception_for_status,
)

logger = logging.getLogger(__name__)


class ChatworkClient:
    """X-ChatWorkToken 헤더를 사용하는 비동기 클라이언트"""

    def __init__(
            self,
            api_key: str,
            base_url: Optional[str] = None,
            timeout: Optional[float] = None,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = (base_url or settings.chatwork_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.chatwork_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "ChatworkClient":
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={"X-ChatWorkToken": self.api_key},
            timeout=self.timeout,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        if self._client is None:
            raise RuntimeError("ChatworkClient must be used as an async context manager")
        # 호출 전체 시간 상한 (httpx 타임아웃은 단계별)
        try:
            return await asyncio.wait_for(
                self._client.request(method, path, **kwargs),
                timeout=self.timeout,
            )
        except (httpx.TimeoutException, asyncio.TimeoutError) as exc:
            logger.warning(f"Chatwork request timed out: {method} {path}")
            raise ChatworkTimeoutException() from exc
        except httpx.RequestError as exc:
            logger.error(f"Chatwork request failed: {method} {path}: {exc}")
            raise ChatworkAPIException(detail=f"Failed to connect to Chatwork: {exc}") from exc

    @staticmethod
    def _json(response: httpx.Response) -> Dict[str, Any]:
        """응답 본문 파싱 (비어 있거나 JSON이 아니면 빈 dict)"""
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Chatwork returned a non-JSON body: status={response.status_code}")
            return {}

    async def get_me(self) -> Dict[str, Any]:
        """API 키 소유 계정 조회 (연결 테스트용)"""
        response = await self._request("GET", "/me")
        if not response.is_success:
            raise chatwork_exception_for_status(response.status_code)
        return self._json(response)

    async def get_room(self, room_id: str) -> Dict[str, Any]:
        """룸 정보 조회 (접근 권한 확인)"""
        response = await self._request("GET", f"/rooms/{room_id}")
        if not response.is_success:
            logger.warning(f"Chatwork room access check failed: room_id={room_id}, status={response.status_code}")
            raise RoomAccessException(chatwork_status=response.status_code)
        return self._json(response)

    async def send_message(self, room_id: str, body: str) -> Dict[str, Any]:
        """룸에 메시지 전송"""
        response = await self._request(
            "POST",
            f"/rooms/{room_id}/messages",
            data={"body": body},
        )
        if not response.is_success:
            logger.error(
                f"Chatwork API error: status={response.status_code}, "
                f"room_id={room_id}, response={response.text[:300]}"
            )
            raise chatwork_exception_for_status(response.status_code)
        return self._json(response)


# API 키를 받아 클라이언트를 생성 (테스트에서는 MockTransport 주입)
ChatworkClientFactory = Callable[[str], ChatworkClient]
