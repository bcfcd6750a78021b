"""Configure test environment for loginwidget."""

import sys
from collections.abc import Iterator
from pathlib import Path
import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Drop ambient LOGINWIDGET_* variables and cached settings."""
    from loginwidget import config

    monkeypatch.delenv("LOGINWIDGET_BOT_TOKEN", raising=False)
    monkeypatch.delenv("LOGINWIDGET_DIGEST_CASE", raising=False)
    config.get_settings(refresh=True)
    yield
    config._load_settings.cache_clear()
