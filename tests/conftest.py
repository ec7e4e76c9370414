import httpx
import pytest

from app.core.config import Settings
from app.db.database import Database
from app.db.message_store import MessageStore
from app.services.smslenz_service import SmslenzClient


class GatewayStub:
    """
    Stands in for the SMSlenz endpoint through httpx.MockTransport.
    Records every request; `fail_with` makes it raise instead of answering.
    """

    def __init__(self, status_code=200, body='{"success": true}'):
        self.status_code = status_code
        self.body = body
        self.fail_with = None
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_with is not None:
            raise self.fail_with(request)
        return httpx.Response(self.status_code, text=self.body)

    def client(self, **credentials) -> SmslenzClient:
        values = {"user_id": "user-1", "api_key": "key-1", "sender_id": "LogozoDev"}
        values.update(credentials)
        return SmslenzClient(transport=httpx.MockTransport(self), **values)


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite:///{tmp_path / 'contact.db'}",
        SMS_USER_ID="user-1",
        SMS_API_KEY="key-1",
        SMS_SENDER_ID="LogozoDev",
    )


@pytest.fixture
def database(settings):
    database = Database.from_settings(settings)
    database.create_tables()
    yield database
    database.dispose()


@pytest.fixture
def store(database):
    return MessageStore(database)


@pytest.fixture
def gateway():
    return GatewayStub()


@pytest.fixture
def valid_form():
    return {
        "first_name": "  Nimal ",
        "last_name": "Perera",
        "email": "nimal@example.lk",
        "number": "077 123 4567",
        "subject": "Website   quote",
        "message": "Hello,\n\n  I need a landing page.",
    }
