import httpx
import pytest
import pytest_asyncio

from contactform.api.dependencies import get_db
from contactform.api.main import app
from contactform.core.database import QueryResult


ALICE = {
    "name": "Alice Smith",
    "email": "a@b.com",
    "phone": "1234567890",
    "location": "Springfield",
    "dob": "1990-01-01",
}


class StubDatabase:
    """Records statements and replays a canned result or error."""

    def __init__(self):
        self.result = QueryResult()
        self.error = None
        self.statements = []

    async def query(self, statement):
        self.statements.append(statement)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def alice():
    return dict(ALICE)


@pytest.fixture
def stub_db():
    return StubDatabase()


@pytest_asyncio.fixture
async def api_client(stub_db):
    app.dependency_overrides[get_db] = lambda: stub_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
