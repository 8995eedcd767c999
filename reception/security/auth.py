"""
인증 및 보안 관련 함수
관리자 비밀번호 검증, JWT 토큰 생성/검증
"""
import secrets
from datetime import datetime, timedelta
from typing import Optional, Protocol
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from reception.config import Settings, settings
from reception.schemas.auth import TokenPayload

ADMIN_SUBJECT = "admin"
ADMIN_ROLE = "admin"

# 비밀번호 해싱 설정
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """비밀번호 해싱 (ADMIN_PASSWORD_HASH 값 생성용)"""
    return pwd_context.hash(password)


class CredentialChecker(Protocol):
    """비밀번호 검증 인터페이스 (외부 인증 제공자로 교체 가능)"""

    def verify(self, password: str) -> bool:
        ...


class SettingsCredentialChecker:
    """설정 파일의 관리자 비밀번호로 검증"""

    def __init__(self, config: Settings = settings):
        self.config = config

    def verify(self, password: str) -> bool:
        if self.config.admin_password_hash:
            return pwd_context.verify(password, self.config.admin_password_hash)
        return secrets.compare_digest(password.encode("utf-8"), self.config.admin_password.encode("utf-8"))


def create_access_token(subject: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    """JWT 액세스 토큰 생성"""
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {
        "sub": subject,
        "role": role,
        "iat": datetime.utcnow(),
        "exp": expire
    }

    encoded_jwt = jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)
    return encoded_jwt


def verify_token(token: str) -> Optional[TokenPayload]:
    """JWT 토큰 검증 및 페이로드 반환"""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        if payload.get("sub") is None:
            return None
        token_payload = TokenPayload(**payload)
        return token_payload
    except (JWTError, ValidationError):
        return None
