"""
관리자 인증 API 라우트
"""
from datetime import timedelta
from fastapi import APIRouter, Depends
from reception.config import settings
from reception.dependencies import get_credential_checker, get_current_admin
from reception.schemas.auth import AdminLogin, SessionResponse, TokenPayload, TokenResponse
from reception.security.auth import ADMIN_ROLE, ADMIN_SUBJECT, CredentialChecker, create_access_token
from reception.utils.exceptions import UnauthorizedException

router = APIRouter(
    prefix="/api/auth",
    tags=["Authentication"]
)


@router.post("/login", response_model=TokenResponse)
async def login(
        admin_login: AdminLogin,
        checker: CredentialChecker = Depends(get_credential_checker)
):
    """관리자 로그인 및 토큰 발급"""
    if not checker.verify(admin_login.password):
        raise UnauthorizedException(detail="Invalid password")

    expires_minutes = settings.access_token_expire_minutes
    access_token = create_access_token(
        ADMIN_SUBJECT, ADMIN_ROLE, expires_delta=timedelta(minutes=expires_minutes)
    )

    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": expires_minutes * 60
    }


@router.get("/me", response_model=SessionResponse)
async def get_current_session_info(
        session: TokenPayload = Depends(get_current_admin)
):
    """현재 로그인한 관리자 세션 조회 (토큰 기반)"""
    return {"subject": session.sub, "role": session.role}
