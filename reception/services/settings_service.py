"""
알림 설정 서비스
- 설정 테이블은 0 또는 1행: 행이 없으면 None ("미설정") 을 돌려줌
"""
import logging
from sqlalchemy.orm import Session
from typing import Optional
from reception.models.settings import ChatworkSettings, WalkinSettings
from reception.schemas.settings import ChatworkSettingsUpdate, WalkinSettingsUpdate
from reception.services.chatwork_client import ChatworkClient, ChatworkClientFactory
from reception.utils.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


class SettingsService:
    """알림 설정 서비스"""

    @staticmethod
    def get_chatwork_settings(db: Session) -> Optional[ChatworkSettings]:
        """Chatwork 설정 조회 (없으면 None)"""
        return db.query(ChatworkSettings).order_by(ChatworkSettings.id).first()

    @staticmethod
    def get_walkin_settings(db: Session) -> Optional[WalkinSettings]:
        """예약 없는 방문자 알림 설정 조회 (없으면 None)"""
        return db.query(WalkinSettings).order_by(WalkinSettings.id).first()

    @staticmethod
    def save_chatwork_settings(db: Session, settings_data: ChatworkSettingsUpdate) -> ChatworkSettings:
        """Chatwork 설정 저장 (기존 행이 있으면 수정, 없으면 생성)"""
        chatwork_settings = SettingsService.get_chatwork_settings(db)
        if chatwork_settings is None:
            chatwork_settings = ChatworkSettings(**settings_data.model_dump())
            db.add(chatwork_settings)
        else:
            for field, value in settings_data.model_dump().items():
                setattr(chatwork_settings, field, value)

        db.commit()
        db.refresh(chatwork_settings)
        logger.info("Chatwork settings saved")
        return chatwork_settings

    @staticmethod
    def save_walkin_settings(db: Session, settings_data: WalkinSettingsUpdate) -> WalkinSettings:
        """예약 없는 방문자 알림 설정 저장 (기존 행이 있으면 수정, 없으면 생성)"""
        walkin_settings = SettingsService.get_walkin_settings(db)
        if walkin_settings is None:
            walkin_settings = WalkinSettings(**settings_data.model_dump())
            db.add(walkin_settings)
        else:
            for field, value in settings_data.model_dump().items():
                setattr(walkin_settings, field, value)

        db.commit()
        db.refresh(walkin_settings)
        logger.info(f"Walk-in settings saved: room_id={walkin_settings.chatwork_room_id}")
        return walkin_settings

    @staticmethod
    def _require_api_key(db: Session) -> str:
        chatwork_settings = SettingsService.get_chatwork_settings(db)
        if chatwork_settings is None or not chatwork_settings.api_key:
            raise ConfigurationException(detail="Chatwork API key is not configured")
        return chatwork_settings.api_key

    @staticmethod
    async def test_chatwork_connection(
            db: Session,
            client_factory: ChatworkClientFactory = ChatworkClient,
    ) -> dict:
        """저장된 API 키로 /me 를 호출해 인증 확인"""
        api_key = SettingsService._require_api_key(db)
        async with client_factory(api_key) as client:
            me = await client.get_me()
        return {"account_name": me.get("name", "")}

    @staticmethod
    async def test_walkin_connection(
            db: Session,
            client_factory: ChatworkClientFactory = ChatworkClient,
    ) -> dict:
        """API 키 인증 후 예약 없는 방문자용 룸 접근 가능 여부 확인"""
        walkin_settings = SettingsService.get_walkin_settings(db)
        if walkin_settings is None or not walkin_settings.chatwork_room_id:
            raise ConfigurationException(detail="Walk-in notification room ID is not configured")

        api_key = SettingsService._require_api_key(db)
        async with client_factory(api_key) as client:
            me = await client.get_me()
            room = await client.get_room(walkin_settings.chatwork_room_id.strip())
        return {"account_name": me.get("name", ""), "room_name": room.get("name", "")}
