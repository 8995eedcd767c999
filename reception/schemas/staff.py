"""
담당자 관련 Pydantic 스키마 (API 요청/응답)
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional


class StaffMemberCreate(BaseModel):
    """담당자 생성 요청"""
    name: str = Field(..., min_length=1, max_length=100)
    company_id: Optional[int] = None
    department: Optional[str] = Field(None, max_length=100)
    chatwork_id: Optional[str] = Field(None, max_length=50)
    photo_url: Optional[str] = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        # 공백만 있는 이름은 min_length에서 거부
        return v.strip() if isinstance(v, str) else v


class StaffMemberUpdate(BaseModel):
    """담당자 정보 수정"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    company_id: Optional[int] = None
    department: Optional[str] = Field(None, max_length=100)
    chatwork_id: Optional[str] = Field(None, max_length=50)
    photo_url: Optional[str] = Field(None, max_length=500)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        # 공백만 있는 이름은 min_length에서 거부
        return v.strip() if isinstance(v, str) else v


class StaffMemberResponse(BaseModel):
    """담당자 응답"""
    id: int
    company_id: Optional[int]
    name: str
    department: Optional[str]
    chatwork_id: Optional[str]
    photo_url: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class StaffMemberListResponse(BaseModel):
    """담당자 목록 응답"""
    total: int
    items: list[StaffMemberResponse]
