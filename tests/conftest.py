"""
Shared fixtures: an app wired to in-memory SQLite and a fake SendGrid.
"""

from typing import Callable, List

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from config.settings import Settings
from database.session import Database
from mail.sendgrid import SendGridClient
from main import create_app

SQLITE_URL = "sqlite+aiosqlite:///:memory:"
SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path) -> Settings:
    pdf_dir = tmp_path / "pdf"
    pdf_dir.mkdir()
    (pdf_dir / "resume.pdf").write_bytes(b"%PDF-1.4 test document")
    return Settings(
        database_url=SQLITE_URL,
        secret_key=SECRET,
        bcrypt_rounds=4,
        sendgrid_api_key="",
        mail_from="",
        client_url="https://client.example.com",
        pdf_dir=str(pdf_dir),
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def register_user(client) -> Callable[..., httpx.Response]:
    def _register(username="alice", password="p4ss", email="a@x.com"):
        return client.post(
            "/register",
            json={"username": username, "password": password, "email": email},
        )

    return _register


@pytest.fixture
def sent_mail(client) -> List[httpx.Request]:
    """Swap in a SendGrid client whose transport records requests and answers 202."""
    captured: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        return httpx.Response(202)

    client.app.state.mailer = SendGridClient(
        "SG.test-key",
        "noreply@example.com",
        transport=httpx.MockTransport(handler),
    )
    return captured


@pytest_asyncio.fixture
async def database():
    db = Database(SQLITE_URL)
    await db.create_schema()
    yield db
    await db.dispose()
