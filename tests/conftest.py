import pytest
import structlog

from mc_templater.testing import RecordingWorld


@pytest.fixture
def world():
    return RecordingWorld()


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()
