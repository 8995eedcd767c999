"""
알림 설정 API 라우트 (관리자 전용)
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from reception.database import get_db
from reception.dependencies import get_chatwork_client_factory, get_current_admin
from reception.models.settings import ChatworkSettings
from reception.schemas.settings import (
    ChatworkSettingsUpdate,
    ChatworkSettingsResponse,
    WalkinSettingsUpdate,
    WalkinSettingsResponse,
    ConnectionTestResponse
)
from reception.services.chatwork_client import ChatworkClientFactory
from reception.services.settings_service import SettingsService

router = APIRouter(
    prefix="/api/settings",
    tags=["Settings"],
    dependencies=[Depends(get_current_admin)]
)


def _chatwork_response(chatwork_settings: Optional[ChatworkSettings]) -> Optional[dict]:
    # API 키 자체는 응답에 노출하지 않음
    if chatwork_settings is None:
        return None
    return {
        "id": chatwork_settings.id,
        "has_api_key": bool(chatwork_settings.api_key),
        "message_template": chatwork_settings.message_template or "",
        "created_at": chatwork_settings.created_at,
        "updated_at": chatwork_settings.updated_at,
    }


@router.get("/chatwork", response_model=Optional[ChatworkSettingsResponse])
async def get_chatwork_settings(db: Session = Depends(get_db)):
    """Chatwork 설정 조회 (미설정이면 null)"""
    return _chatwork_response(SettingsService.get_chatwork_settings(db))


@router.put("/chatwork", response_model=ChatworkSettingsResponse)
async def save_chatwork_settings(
        settings_data: ChatworkSettingsUpdate,
        db: Session = Depends(get_db)
):
    """Chatwork 설정 저장"""
    return _chatwork_response(SettingsService.save_chatwork_settings(db, settings_data))


@router.post("/chatwork/test", response_model=ConnectionTestResponse)
async def test_chatwork_settings(
        db: Session = Depends(get_db),
        client_factory: ChatworkClientFactory = Depends(get_chatwork_client_factory)
):
    """저장된 API 키로 연결 테스트"""
    return await SettingsService.test_chatwork_connection(db, client_factory)


@router.get("/walkin", response_model=Optional[WalkinSettingsResponse])
async def get_walkin_settings(db: Session = Depends(get_db)):
    """예약 없는 방문자 알림 설정 조회 (미설정이면 null)"""
    return SettingsService.get_walkin_settings(db)


@router.put("/walkin", response_model=WalkinSettingsResponse)
async def save_walkin_settings(
        settings_data: WalkinSettingsUpdate,
        db: Session = Depends(get_db)
):
    """예약 없는 방문자 알림 설정 저장"""
    return SettingsService.save_walkin_settings(db, settings_data)


@router.post("/walkin/test", response_model=ConnectionTestResponse)
async def test_walkin_settings(
        db: Session = Depends(get_db),
        client_factory: ChatworkClientFactory = Depends(get_chatwork_client_factory)
):
    """API 키 인증 및 룸 접근 테스트"""
    return await SettingsService.test_walkin_connection(db, client_factory)
