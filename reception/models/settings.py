"""
알림 설정 모델 (테이블당 0 또는 1행만 존재)
"""
from sqlalchemy import Column, Integer, String, Text, DateTime
from datetime import datetime
from reception.database import Base


class ChatworkSettings(Base):
    """Chatwork API 설정 테이블"""
    __tablename__ = "chatwork_settings"

    id = Column(Integer, primary_key=True, index=True)
    api_key = Column(String(255), nullable=False)
    message_template = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<ChatworkSettings(id={self.id})>"


class WalkinSettings(Base):
    """예약 없는 방문자 알림 설정 테이블"""
    __tablename__ = "walkin_settings"

    id = Column(Integer, primary_key=True, index=True)
    chatwork_room_id = Column(String(50), nullable=False)
    message_template = Column(Text, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self):
        return f"<WalkinSettings(id={self.id}, room={self.chatwork_room_id})>"
