import os

import pytest

os.environ.setdefault("LOG_LEVEL", "DEBUG")


@pytest.fixture(autouse=True)
def _reset_default_scorer():
    # get_default_scorer ist per lru_cache prozessweit gecacht
    from app.services.scoring.essay_scorer import get_default_scorer

    get_default_scorer.cache_clear()
    yield
    get_default_scorer.cache_clear()
