"""
방문 알림 API 라우트 (키오스크)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from reception.database import get_db
from reception.dependencies import get_chatwork_client_factory
from reception.schemas.notification import NotificationRequest, NotificationResponse
from reception.services.notification_service import NotificationService
from reception.services.chatwork_client import ChatworkClientFactory

router = APIRouter(
    prefix="/api/notifications",
    tags=["Notifications"]
)


@router.post("", response_model=NotificationResponse)
async def send_notification(
        request: NotificationRequest,
        db: Session = Depends(get_db),
        client_factory: ChatworkClientFactory = Depends(get_chatwork_client_factory)
):
    """
    방문자 도착 알림 전송
    - 실패 시 에러 로그가 기록되고 예외 상태 코드로 응답합니다.
    """
    result = await NotificationService.dispatch(
        db,
        visitor_name=request.visitor_name,
        visitor_company=request.visitor_company,
        staff_member_id=request.staff_member_id,
        has_appointment=request.has_appointment,
        client_factory=client_factory,
    )
    return result
