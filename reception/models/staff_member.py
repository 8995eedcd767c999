"""
담당자 모델 (데이터베이스 테이블)
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from reception.database import Base


class StaffMember(Base):
    """담당자 테이블"""
    __tablename__ = "staff_members"

    id = Column(Integer, primary_key=True, index=True)
    company_id = Column(Integer, ForeignKey("companies.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    department = Column(String(100), nullable=True)
    chatwork_id = Column(String(50), nullable=True)  # 멘션([To:...])에 사용
    photo_url = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    # 관계
    company = relationship("Company", back_populates="staff_members")

    def __repr__(self):
        return f"<StaffMember(id={self.id}, name={self.name}, company_id={self.company_id})>"
