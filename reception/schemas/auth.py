"""
관리자 인증 관련 Pydantic 스키마
"""
from pydantic import BaseModel


class AdminLogin(BaseModel):
    """관리자 로그인 요청"""
    password: str


class TokenResponse(BaseModel):
    """토큰 응답"""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class TokenPayload(BaseModel):
    """토큰 페이로드"""
    sub: str
    exp: int
    iat: int
    role: str


class SessionResponse(BaseModel):
    """현재 세션 정보"""
    subject: str
    role: str
