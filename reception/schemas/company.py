"""
회사 관련 Pydantic 스키마 (API 요청/응답)
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
from typing import Optional


def _blank_to_none(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    v = v.strip()
    return v or None


def _strip(v):
    return v.strip() if isinstance(v, str) else v


class CompanyCreate(BaseModel):
    """회사 생성 요청"""
    name: str = Field(..., min_length=1, max_length=100)
    chatwork_room_id: Optional[str] = Field(None, max_length=50)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip(v)

    @field_validator("chatwork_room_id")
    @classmethod
    def normalize_room_id(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CompanyUpdate(BaseModel):
    """회사 정보 수정"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    chatwork_room_id: Optional[str] = Field(None, max_length=50)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return _strip(v)

    @field_validator("chatwork_room_id")
    @classmethod
    def normalize_room_id(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class CompanyResponse(BaseModel):
    """회사 응답"""
    id: int
    name: str
    chatwork_room_id: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CompanyListResponse(BaseModel):
    """회사 목록 응답"""
    total: int
    items: list[CompanyResponse]
