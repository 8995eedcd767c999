"""
애플리케이션 설정 파일
환경 변수를 통해 설정 관리
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from pathlib import Path


class Settings(BaseSettings):
    """애플리케이션 설정"""

    # 데이터베이스 설정
    database_url: str = "sqlite:///./reception.db"

    # JWT 설정
    secret_key: str = "your-secret-key-here-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 12

    # 관리자 비밀번호 (해시가 있으면 해시 우선)
    admin_password: str = "admin"
    admin_password_hash: Optional[str] = None

    # Chatwork API 설정
    chatwork_api_base_url: str = "https://api.chatwork.com/v2"
    chatwork_timeout_seconds: float = 30.0

    # 애플리케이션 설정
    app_name: str = "Visitor Reception Kiosk"
    debug: bool = False
    log_level: str = "INFO"

    # CORS 설정
    allowed_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # 실행 위치와 무관하게 "프로젝트 루트의 .env"를 찾도록 고정
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[1] / ".env"),
        case_sensitive=False,
    )


settings = Settings()
