"""Pytest fixtures for Flicker tests."""

from __future__ import annotations

import os
import random
import tempfile
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

from tests.helpers.clock import FakeClock

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="flicker-tests-"))
os.environ["FLICKER_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ["FLICKER_CACHE_DIR"] = str(_TEST_BASE_DIR / "cache")


settings.register_profile(
    "ci",
    max_examples=100,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=20,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def config_dir() -> Path:
    path = Path(os.environ["FLICKER_CONFIG_DIR"])
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture(autouse=True)
def _clean_config(config_dir: Path):
    """Ensure config files written by one test don't leak into the next."""
    yield
    for child in config_dir.iterdir():
        child.unlink()


@pytest.fixture
def terminal_env(monkeypatch):
    """Clear terminal detection variables; returns a setter for the test to use."""
    for var in ("COLORTERM", "TEXTUAL_COLOR_SYSTEM", "TERM_PROGRAM", "WT_SESSION", "TERM"):
        monkeypatch.delenv(var, raising=False)

    def set_env(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(key, value)

    return set_env
