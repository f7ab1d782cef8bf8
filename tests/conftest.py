from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def clean_discogs_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep DISCOGS_* variables of the developer machine out of the settings."""
    for var in [key for key in os.environ if key.startswith("DISCOGS_")]:
        monkeypatch.delenv(var)
