"""
회사 모델 (데이터베이스 테이블)
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from reception.database import Base


class Company(Base):
    """회사 테이블"""
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    chatwork_room_id = Column(String(50), nullable=True)  # 예약 방문 알림을 보낼 룸
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # 관계 (회사 삭제 시 담당자는 미소속으로 남김)
    staff_members = relationship("StaffMember", back_populates="company", passive_deletes=True)

    def __repr__(self):
        return f"<Company(id={self.id}, name={self.name}, room={self.chatwork_room_id})>"
