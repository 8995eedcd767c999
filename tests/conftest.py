"""
테스트 공통 픽스처
- 메모리 SQLite (StaticPool) + Chatwork API 대역 (httpx.MockTransport)
"""
import urllib.parse
from typing import Optional

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from reception.database import Base, get_db, init_db, make_engine, make_session_factory
from reception.dependencies import get_chatwork_client_factory
from reception.main import app
from reception.models.company import Company
from reception.models.settings import ChatworkSettings, WalkinSettings
from reception.models.staff_member import StaffMember
from reception.services.chatwork_client import ChatworkClient

CHATWORK_TEST_BASE_URL = "https://api.chatwork.test/v2"


class FakeChatwork:
    """Chatwork API 대역: 요청을 기록하고 지정된 상태 코드로 응답"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.me_status = 200
        self.room_status = 200
        self.send_status = 200
        self.send_timeout = False
        self.room_timeout = False
        self.plain_text_replies = False

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/me"):
            return httpx.Response(self.me_status, json={"account_id": 1, "name": "Reception Bot"})
        if path.endswith("/messages"):
            if self.send_timeout:
                raise httpx.ReadTimeout("timed out", request=request)
            if self.plain_text_replies and self.send_status == 200:
                return httpx.Response(200, text="<html>ok</html>")
            return httpx.Response(self.send_status, json={"message_id": "1001"})
        if self.room_timeout:
            raise httpx.ReadTimeout("timed out", request=request)
        if self.plain_text_replies and self.room_status == 200:
            return httpx.Response(200, text="<html>ok</html>")
        return httpx.Response(self.room_status, json={"room_id": 1, "name": "Lobby"})

    def factory(self, api_key: str) -> ChatworkClient:
        return ChatworkClient(
            api_key,
            base_url=CHATWORK_TEST_BASE_URL,
            timeout=5,
            transport=httpx.MockTransport(self.handler),
        )

    @property
    def sent(self) -> list[dict]:
        """전송된 메시지 목록 (room path, body, token)"""
        messages = []
        for request in self.requests:
            if request.method == "POST":
                form = urllib.parse.parse_qs(request.content.decode("utf-8"))
                messages.append({
                    "path": request.url.path,
                    "body": form["body"][0],
                    "token": request.headers.get("X-ChatWorkToken"),
                })
        return messages


@pytest.fixture
def engine():
    test_engine = make_engine("sqlite://", poolclass=StaticPool)
    init_db(test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = make_session_factory(engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def chatwork():
    return FakeChatwork()


@pytest.fixture
def client(db, chatwork):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_chatwork_client_factory] = lambda: chatwork.factory
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(client):
    response = client.post("/api/auth/login", json={"password": "admin"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def make_company(db, name: str = "Acme", chatwork_room_id: Optional[str] = "R1") -> Company:
    company = Company(name=name, chatwork_room_id=chatwork_room_id)
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


def make_staff(db, company: Optional[Company], name: str = "Staff", **fields) -> StaffMember:
    staff = StaffMember(name=name, company_id=company.id if company else None, **fields)
    db.add(staff)
    db.commit()
    db.refresh(staff)
    return staff


def configure_chatwork(db, api_key: str = "K", message_template: str = "") -> ChatworkSettings:
    chatwork_settings = ChatworkSettings(api_key=api_key, message_template=message_template)
    db.add(chatwork_settings)
    db.commit()
    return chatwork_settings


def configure_walkin(db, chatwork_room_id: str = "R2",
                     message_template: str = "Walkin: {visitor_name}{visitor_company_info}") -> WalkinSettings:
    walkin_settings = WalkinSettings(chatwork_room_id=chatwork_room_id, message_template=message_template)
    db.add(walkin_settings)
    db.commit()
    return walkin_settings
