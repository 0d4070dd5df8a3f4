import pytest

from _helpers import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()
