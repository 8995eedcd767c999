"""
데이터베이스 연결 설정
- 엔진 / 세션 팩토리 / 모델 기본 클래스
- 테스트는 make_engine으로 메모리 SQLite 엔진을 생성
"""
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from reception.config import settings


class Base(DeclarativeBase):
    pass


def make_engine(database_url: str, **engine_options) -> Engine:
    """URL에 맞는 엔진 생성 (SQLite는 스레드 검사 해제)"""
    if database_url.startswith("sqlite"):
        engine_options.setdefault("connect_args", {"check_same_thread": False})
    else:
        engine_options.setdefault("pool_pre_ping", True)
    return create_engine(database_url, **engine_options)


def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(bind=bind, autoflush=False, expire_on_commit=True)


def init_db(bind: Engine) -> None:
    """모델 테이블 생성 (이미 있으면 건너뜀)"""
    Base.metadata.create_all(bind=bind)


engine = make_engine(settings.database_url)
SessionLocal = make_session_factory(engine)


def get_db() -> Iterator[Session]:
    """요청 단위 세션 의존성"""
    with SessionLocal() as db:
        yield db
