import pytest

from tests.fakes.cryptography import FakeEncrypter, FakeHasher
from tests.fakes.repositories import InMemoryUserRepository


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def fake_hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture
def fake_encrypter() -> FakeEncrypter:
    return FakeEncrypter()
