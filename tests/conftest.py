import pytest

from app import create_app
from config import Config
from storage import JsonFileStore, MemoryStore


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def file_store(tmp_path):
    return JsonFileStore(str(tmp_path / "data"))


@pytest.fixture
def app(store):
    return create_app(TestingConfig, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def file_client(file_store):
    return create_app(TestingConfig, store=file_store).test_client()
