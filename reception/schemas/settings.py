"""
알림 설정 관련 Pydantic 스키마
- API 키는 응답에 포함하지 않음
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


class ChatworkSettingsUpdate(BaseModel):
    """Chatwork 설정 저장 요청"""
    api_key: str = Field(..., min_length=1, max_length=255)
    message_template: str = ""


class ChatworkSettingsResponse(BaseModel):
    """Chatwork 설정 응답"""
    id: int
    has_api_key: bool
    message_template: str
    created_at: datetime
    updated_at: datetime


class WalkinSettingsUpdate(BaseModel):
    """예약 없는 방문자 알림 설정 저장 요청"""
    chatwork_room_id: str = Field(..., min_length=1, max_length=50)
    message_template: str = Field(..., min_length=1)


class WalkinSettingsResponse(BaseModel):
    """예약 없는 방문자 알림 설정 응답"""
    id: int
    chatwork_room_id: str
    message_template: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConnectionTestResponse(BaseModel):
    """연결 테스트 결과"""
    account_name: str
    room_name: Optional[str] = None
