import pytest
from fastapi.testclient import TestClient

from verification_service.application.static_codes import (
    StaticVerificationCodeManager,
)
from verification_service.main import create_app
from verification_service.presentation.dependencies import get_static_code_manager
from tests.fakes import FakeStaticCodeStore


@pytest.fixture()
def app_and_deps():
    app = create_app()
    store = FakeStaticCodeStore()
    manager = StaticVerificationCodeManager(store, clock=lambda: 1_700_000_000)

    def _get_manager():
        return manager

    app.dependency_overrides[get_static_code_manager] = _get_manager

    try:
        yield app, store
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(app_and_deps):
    app, _ = app_and_deps
    return TestClient(app, raise_server_exceptions=False)
