"""
방문 알림 관련 Pydantic 스키마
"""
from pydantic import BaseModel, ConfigDict
from typing import Optional


class NotificationRequest(BaseModel):
    """
    방문 알림 요청
    - visitor_name 누락/공백은 서비스에서 검증 (실패도 에러 로그에 남기기 위함)
    """
    visitor_name: Optional[str] = None
    visitor_company: Optional[str] = None
    staff_member_id: Optional[int] = None
    has_appointment: bool = True


class NotificationResponse(BaseModel):
    """방문 알림 결과"""
    model_config = ConfigDict(from_attributes=True)

    success: bool = True
    room_id: str
    message: str
    has_appointment: bool
    visitor_log_id: int
