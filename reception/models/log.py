"""
감사 로그 모델 (추가 전용)
"""
from sqlalchemy import Column, Integer, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from reception.database import Base


class VisitorLog(Base):
    """방문 기록 테이블 (알림 전송 성공 후에만 기록)"""
    __tablename__ = "visitor_logs"

    id = Column(Integer, primary_key=True, index=True)
    visitor_name = Column(Text, nullable=False)
    visitor_company = Column(Text, nullable=False, default="")
    staff_member_id = Column(Integer, ForeignKey("staff_members.id", ondelete="SET NULL"), nullable=True)
    has_appointment = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    # 관계
    staff_member = relationship("StaffMember")

    @property
    def staff_name(self):
        """담당자 이름 (미지정 또는 삭제된 경우 None)"""
        return self.staff_member.name if self.staff_member else None

    def __repr__(self):
        return f"<VisitorLog(id={self.id}, visitor={self.visitor_name}, appointment={self.has_appointment})>"


class ErrorLog(Base):
    """에러 로그 테이블"""
    __tablename__ = "error_logs"

    id = Column(Integer, primary_key=True, index=True)
    error_message = Column(Text, nullable=False)
    error_stack = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)

    def __repr__(self):
        return f"<ErrorLog(id={self.id}, message={self.error_message[:30]!r})>"
