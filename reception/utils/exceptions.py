"""
사용자 정의 예외 클래스
"""
from typing import Optional
from fastapi import HTTPException, status


class NotFoundException(HTTPException):
    """리소스를 찾을 수 없을 때 발생"""
    def __init__(self, detail: str = "Resource not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class UnauthorizedException(HTTPException):
    """인증이 필요하거나 인증이 실패했을 때 발생"""
    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenException(HTTPException):
    """권한이 없을 때 발생"""
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ValidationException(HTTPException):
    """입력 데이터 검증 실패"""
    def __init__(self, detail: str = "Validation error"):
        super().__init__(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)


class ConfigurationException(HTTPException):
    """필수 설정(API 키, 룸 ID, 템플릿)이 없을 때 발생"""
    def __init__(self, detail: str = "Notification settings are not configured"):
        super().__init__(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail)


class PersistenceException(HTTPException):
    """
    로그 저장 실패
    - 메시지 전송이 이미 성공한 뒤에도 발생할 수 있음 (전송은 되돌릴 수 없음)
    """
    def __init__(self, detail: str = "Failed to save visitor log"):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)


# ---------------------------------------------------------------------------
# Chatwork 원격 호출 관련 예외
# ---------------------------------------------------------------------------

class RoomAccessException(HTTPException):
    """지정된 룸에 접근 권한이 없을 때 발생 (룸 조회 실패)"""
    def __init__(self, detail: str = "No access to the specified Chatwork room",
                 chatwork_status: Optional[int] = None):
        self.chatwork_status = chatwork_status
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


class ChatworkAPIException(HTTPException):
    """Chatwork API가 요청을 거부했을 때 발생"""
    default_detail = "Failed to send message to Chatwork"

    def __init__(self, detail: Optional[str] = None, chatwork_status: Optional[int] = None):
        self.chatwork_status = chatwork_status
        if detail is None:
            detail = self.default_detail
            # 상태 코드는 매핑되지 않은 일반 오류에만 붙임
            if chatwork_status is not None and type(self) is ChatworkAPIException:
                detail = f"{detail} ({chatwork_status})"
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)


class InvalidApiKeyException(ChatworkAPIException):
    """401: API 키가 유효하지 않음"""
    default_detail = "Chatwork API key is invalid"


class ChatworkForbiddenException(ChatworkAPIException):
    """403: 룸에 대한 권한 없음"""
    default_detail = "No permission to post to the Chatwork room"


class RoomNotFoundException(ChatworkAPIException):
    """404: 룸이 존재하지 않음"""
    default_detail = "Chatwork room not found"


class RateLimitException(ChatworkAPIException):
    """429: 요청 제한 초과"""
    default_detail = "Chatwork API rate limit exceeded, please wait and try again"


class ChatworkUnavailableException(ChatworkAPIException):
    """503: 서비스 일시 중단"""
    default_detail = "Chatwork service is temporarily unavailable"


class ChatworkTimeoutException(HTTPException):
    """원격 호출 시간 초과"""
    def __init__(self, detail: str = "Connection to Chatwork timed out, please check the network and try again"):
        super().__init__(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=detail)


# 상태 코드별 예외 매핑 (목록에 없으면 ChatworkAPIException)
CHATWORK_STATUS_EXCEPTIONS = {
    401: InvalidApiKeyException,
    403: ChatworkForbiddenException,
    404: RoomNotFoundException,
    429: RateLimitException,
    503: ChatworkUnavailableException,
}


def chatwork_exception_for_status(status_code: int) -> ChatworkAPIException:
    """Chatwork 응답 상태 코드를 예외로 변환"""
    exc_class = CHATWORK_STATUS_EXCEPTIONS.get(status_code, ChatworkAPIException)
    return exc_class(chatwork_status=status_code)
