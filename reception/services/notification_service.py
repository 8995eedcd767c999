"""
방문 알림 서비스
- 설정 조회 → 템플릿 렌더링 → 룸 접근 확인 → 메시지 전송 → 방문 기록 저장
- 어느 단계든 실패하면 에러 로그를 남기고 같은 예외를 다시 발생시킴
- 재시도는 하지 않음 (원격 호출은 dispatch 1회당 각각 최대 1번)
"""
import logging
import traceback
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session

from reception.services.chatwork_client import ChatworkClient, ChatworkClientFactory
from reception.services.log_service import LogService
from reception.services.settings_service import SettingsService
from reception.services.staff_service import StaffService
from reception.services.template_renderer import (
    DEFAULT_APPOINTMENT_TEMPLATE,
    render_template,
    staff_attributes,
    visitor_attributes,
)
from reception.utils.exceptions import (
    ConfigurationException,
    NotFoundException,
    ValidationException,
)

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """알림 전송 결과"""
    room_id: str
    message: str
    has_appointment: bool
    visitor_log_id: int


@dataclass
class _PreparedMessage:
    room_id: str
    message: str
    staff_member_id: Optional[int]
    has_appointment: bool


class NotificationService:
    """방문 알림 서비스"""

    @staticmethod
    async def dispatch(
            db: Session,
            visitor_name: Optional[str],
            visitor_company: Optional[str] = None,
            staff_member_id: Optional[int] = None,
            has_appointment: bool = True,
            client_factory: ChatworkClientFactory = ChatworkClient,
    ) -> DispatchResult:
        """방문자 도착을 담당자(또는 예약 없는 방문자용 룸)에 알림"""
        try:
            return await NotificationService._dispatch(
                db, visitor_name, visitor_company, staff_member_id, has_appointment, client_factory
            )
        except Exception as exc:
            error_message = getattr(exc, "detail", None) or str(exc) or exc.__class__.__name__
            logger.error(
                f"Chatwork notification error: {error_message} "
                f"(visitor_name={visitor_name!r}, visitor_company={visitor_company!r}, "
                f"staff_member_id={staff_member_id}, has_appointment={has_appointment})"
            )
            LogService.record_error(db, str(error_message), traceback.format_exc())
            raise

    @staticmethod
    async def _dispatch(
            db: Session,
            visitor_name: Optional[str],
            visitor_company: Optional[str],
            staff_member_id: Optional[int],
            has_appointment: bool,
            client_factory: ChatworkClientFactory,
    ) -> DispatchResult:
        if not visitor_name or not visitor_name.strip():
            raise ValidationException(detail="Visitor name is required")

        # 1. Chatwork 설정 (API 키 필수)
        chatwork_settings = SettingsService.get_chatwork_settings(db)
        if chatwork_settings is None or not chatwork_settings.api_key:
            raise ConfigurationException(detail="Chatwork API key is not configured")

        # 2. 예약 여부에 따라 룸과 메시지 결정
        if has_appointment and staff_member_id is not None:
            prepared = NotificationService._prepare_appointment(
                db, chatwork_settings.message_template, visitor_name, visitor_company, staff_member_id
            )
        else:
            prepared = NotificationService._prepare_walkin(db, visitor_name, visitor_company)

        # 3. 룸 ID 검증 (원격 호출 전)
        room_id = (prepared.room_id or "").strip()
        if not room_id:
            raise ConfigurationException(detail="Chatwork room is not configured")

        logger.info(
            f"Chatwork API request: room_id={room_id}, message_length={len(prepared.message)}, "
            f"has_appointment={prepared.has_appointment}, staff_member_id={prepared.staff_member_id}"
        )

        # 4-5. 룸 접근 확인 후 전송
        async with client_factory(chatwork_settings.api_key) as client:
            await client.get_room(room_id)
            await client.send_message(room_id, prepared.message)

        # 6. 방문 기록 (전송은 이미 완료됨 - 실패해도 되돌릴 수 없음)
        visitor_log = LogService.create_visitor_log(
            db,
            visitor_name=visitor_name,
            visitor_company=visitor_company,
            staff_member_id=prepared.staff_member_id,
            has_appointment=prepared.has_appointment,
        )

        return DispatchResult(
            room_id=room_id,
            message=prepared.message,
            has_appointment=prepared.has_appointment,
            visitor_log_id=visitor_log.id,
        )

    @staticmethod
    def _prepare_appointment(
            db: Session,
            message_template: Optional[str],
            visitor_name: str,
            visitor_company: Optional[str],
            staff_member_id: int,
    ) -> _PreparedMessage:
        """예약 방문: 담당자 소속 회사의 룸으로 전송"""
        staff = StaffService.get_staff_with_company(db, staff_member_id)
        if staff is None:
            raise NotFoundException(detail="Staff member not found")
        if staff.company is None:
            raise NotFoundException(detail=f"Company for staff member {staff.name} not found")
        if not staff.company.chatwork_room_id:
            raise ConfigurationException(
                detail=f"Chatwork room ID is not configured for {staff.company.name}"
            )

        attributes = visitor_attributes(visitor_name, visitor_company)
        attributes.update(staff_attributes(staff))
        message = render_template(message_template or DEFAULT_APPOINTMENT_TEMPLATE, attributes)

        return _PreparedMessage(
            room_id=staff.company.chatwork_room_id,
            message=message,
            staff_member_id=staff.id,
            has_appointment=True,
        )

    @staticmethod
    def _prepare_walkin(
            db: Session,
            visitor_name: str,
            visitor_company: Optional[str],
    ) -> _PreparedMessage:
        """예약 없는 방문: 공용 룸으로 전송 (담당자 토큰 없음)"""
        walkin_settings = SettingsService.get_walkin_settings(db)
        if walkin_settings is None or not walkin_settings.chatwork_room_id:
            raise ConfigurationException(detail="Walk-in notification room ID is not configured")
        if not walkin_settings.message_template:
            raise ConfigurationException(detail="Walk-in message template is not configured")

        message = render_template(
            walkin_settings.message_template,
            visitor_attributes(visitor_name, visitor_company),
        )

        return _PreparedMessage(
            room_id=walkin_settings.chatwork_room_id,
            message=message,
            staff_member_id=None,
            has_appointment=False,
        )
