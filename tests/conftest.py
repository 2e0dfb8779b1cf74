import pytest

from northwind.infrastructure.database.connection import ConnectionProvider
from northwind.infrastructure.database.schema import create_schema


@pytest.fixture
def provider(tmp_path):
    """A file-backed SQLite database with the schema created."""
    conn_provider = ConnectionProvider(f"sqlite:///{tmp_path / 'northwind.db'}")
    create_schema(conn_provider.engine)
    yield conn_provider
    conn_provider.dispose()
