"""
감사 로그 서비스
방문 기록 / 에러 로그 (추가 전용)
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload
from typing import List, Optional
from reception.models.log import VisitorLog, ErrorLog
from reception.utils.exceptions import PersistenceException

logger = logging.getLogger(__name__)


class LogService:
    """감사 로그 서비스"""

    @staticmethod
    def create_visitor_log(
            db: Session,
            visitor_name: str,
            visitor_company: Optional[str],
            staff_member_id: Optional[int],
            has_appointment: bool,
    ) -> VisitorLog:
        """방문 기록 저장 (실패 시 PersistenceException)"""
        visitor_log = VisitorLog(
            visitor_name=visitor_name,
            visitor_company=visitor_company or "",
            staff_member_id=staff_member_id,
            has_appointment=has_appointment,
        )
        try:
            db.add(visitor_log)
            db.commit()
            db.refresh(visitor_log)
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Visitor log error: {exc}")
            raise PersistenceException() from exc
        return visitor_log

    @staticmethod
    def record_error(db: Session, error_message: str, error_stack: Optional[str] = None) -> None:
        """
        에러 로그 저장 (best-effort)
        - 직전 실패로 깨진 트랜잭션을 먼저 롤백
        - 저장 실패는 호출자에게 전달하지 않음
        """
        try:
            db.rollback()
            db.add(ErrorLog(error_message=error_message, error_stack=error_stack))
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            logger.warning(f"Failed to write error log: {exc}")

    @staticmethod
    def get_visitor_logs(db: Session, skip: int = 0, limit: int = 100) -> tuple[List[VisitorLog], int]:
        """방문 기록 조회 (최신순)"""
        query = db.query(VisitorLog).options(joinedload(VisitorLog.staff_member))
        total = db.query(VisitorLog).count()
        visitor_logs = (
            query.order_by(VisitorLog.created_at.desc(), VisitorLog.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return visitor_logs, total

    @staticmethod
    def get_error_logs(db: Session, skip: int = 0, limit: int = 100) -> tuple[List[ErrorLog], int]:
        """에러 로그 조회 (최신순)"""
        total = db.query(ErrorLog).count()
        error_logs = (
            db.query(ErrorLog)
            .order_by(ErrorLog.created_at.desc(), ErrorLog.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return error_logs, total
