import pytest
from fastapi.testclient import TestClient

from userservice.config.logger import get_logger
from userservice.config.settings import AppSettings, Settings
from userservice.main import create_app
from userservice.users.crud import UserStore
from userservice.users.services import UserService


@pytest.fixture
def settings():
    return Settings(app=AppSettings(log_file=""))


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def service(store, settings):
    return UserService(store, logger=get_logger("users", settings))


@pytest.fixture
def app(settings, store):
    return create_app(settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
