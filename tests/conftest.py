import pytest

from maxprofit.config.settings import get_settings
from maxprofit.models.entities import COMMERCIAL, PUB, THEATRE


@pytest.fixture
def reference_scenarios():
    """Known optimal plans: horizon -> (counts, profit)."""
    return {
        0: ({"T": 0, "P": 0, "C": 0}, 0),
        3: ({"T": 0, "P": 0, "C": 0}, 0),
        7: ({"T": 1, "P": 0, "C": 0}, 3000),
        8: ({"T": 1, "P": 0, "C": 0}, 4500),
        13: ({"T": 2, "P": 0, "C": 0}, 16500),
        49: ({"T": 8, "P": 2, "C": 0}, 324000),
    }


@pytest.fixture
def mixed_sequence():
    """Theatre, pub, commercial park built back to back (finishes at 5, 9, 19)."""
    return [THEATRE, PUB, COMMERCIAL]


@pytest.fixture
def settings_override(monkeypatch):
    """Rebuild settings from MAXPROFIT_* environment overrides."""
    def _apply(**values):
        for key, value in values.items():
            monkeypatch.setenv(f"MAXPROFIT_{key.upper()}", str(value))
        get_settings.cache_clear()
        return get_settings()

    yield _apply
    get_settings.cache_clear()
