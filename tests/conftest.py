import pytest
from httpx import ASGITransport, AsyncClient

from library_graphql.app import create_app
from library_graphql.schema import schema
from library_graphql.store import LibraryStore


@pytest.fixture
def store():
    return LibraryStore.seeded()


@pytest.fixture
def execute(store):
    def run(query, **variables):
        return schema.execute_sync(query, variable_values=variables or None, context_value={"store": store})

    return run


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
