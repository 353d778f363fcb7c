import pytest

from sylow import config


@pytest.fixture(autouse=True)
def default_config():
    config.reset()
    yield
    config.reset()
