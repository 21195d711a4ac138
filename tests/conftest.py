import pytest

from affinecracker.classical import register_all
from affinecracker.core import config

register_all()


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    for name in ("MIN_LONG_WORD", "SHORT_TEXT_MAX_WORDS", "MAJORITY_THRESHOLD"):
        monkeypatch.delenv(config.ENV_PREFIX + name, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()
