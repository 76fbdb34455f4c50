import pytest

from xsect.config import reset_config


@pytest.fixture(autouse=True)
def _default_geometry_config():
    reset_config()
    yield
    reset_config()
