"""
인증 의존성 및 외부 연동 의존성
FastAPI 의존성 주입 패턴 사용 (테스트에서 dependency_overrides로 교체)
"""
from fastapi import Depends, Header
from typing import Optional
from reception.schemas.auth import TokenPayload
from reception.security.auth import ADMIN_ROLE, CredentialChecker, SettingsCredentialChecker, verify_token
from reception.services.chatwork_client import ChatworkClient, ChatworkClientFactory
from reception.utils.exceptions import ForbiddenException, UnauthorizedException


def get_credential_checker() -> CredentialChecker:
    """관리자 비밀번호 검증기"""
    return SettingsCredentialChecker()


def get_chatwork_client_factory() -> ChatworkClientFactory:
    """API 키를 받아 Chatwork 클라이언트를 만드는 팩토리"""
    return ChatworkClient


async def get_current_session(authorization: Optional[str] = Header(None)) -> TokenPayload:
    """
    현재 인증된 세션 가져오기
    - Authorization 헤더에서 Bearer 토큰을 추출하고 검증합니다.
    """
    if not authorization:
        raise UnauthorizedException(detail="Missing authorization header")

    # Bearer 토큰 형식 추출 (Scheme과 Token 분리)
    try:
        scheme, token = authorization.split()
    except ValueError:
        raise UnauthorizedException(detail="Invalid authorization header format")
    if scheme.lower() != "bearer":
        raise UnauthorizedException(detail="Invalid authentication scheme")

    token_payload = verify_token(token)
    if not token_payload:
        raise UnauthorizedException(detail="Invalid or expired token")

    return token_payload


def get_current_admin(session: TokenPayload = Depends(get_current_session)) -> TokenPayload:
    """현재 세션이 관리자 권한인지 확인"""
    if session.role != ADMIN_ROLE:
        raise ForbiddenException(detail="Admin access required")
    return session
