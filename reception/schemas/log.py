"""
감사 로그 관련 Pydantic 스키마
"""
from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional


class VisitorLogResponse(BaseModel):
    """방문 기록 응답 (담당자 이름 포함)"""
    id: int
    visitor_name: str
    visitor_company: str
    staff_member_id: Optional[int]
    staff_name: Optional[str] = None
    has_appointment: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class VisitorLogListResponse(BaseModel):
    """방문 기록 목록 응답"""
    total: int
    items: list[VisitorLogResponse]


class ErrorLogResponse(BaseModel):
    """에러 로그 응답"""
    id: int
    error_message: str
    error_stack: Optional[str]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ErrorLogListResponse(BaseModel):
    """에러 로그 목록 응답"""
    total: int
    items: list[ErrorLogResponse]
