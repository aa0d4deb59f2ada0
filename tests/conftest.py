import os

import pytest

from theater.config import load_config


@pytest.fixture(autouse=True)
def clear_theater_env(monkeypatch):
    for key in list(os.environ):
        if key.startswith("THEATER_"):
            monkeypatch.delenv(key, raising=False)
    load_config.cache_clear()
    yield
    load_config.cache_clear()
