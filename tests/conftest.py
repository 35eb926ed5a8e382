import pytest

from helpers import FakeUpstream, make_settings
from jobassist.config import Settings


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()
