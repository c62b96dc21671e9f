import pytest

from verification_service.application.static_codes import (
    StaticVerificationCodeManager,
)
from tests.fakes import NOW, FakeErroredStaticCodeStore, FakeStaticCodeStore


@pytest.fixture()
def store():
    return FakeStaticCodeStore()


@pytest.fixture()
def errored_store():
    return FakeErroredStaticCodeStore()


@pytest.fixture()
def clock():
    return lambda: NOW


@pytest.fixture()
def manager(store, clock):
    return StaticVerificationCodeManager(store, clock=clock)
