"""Shared test constants and fixtures."""

from pathlib import Path

import pytest

from sta_advisor.config import Settings

DATA_DIR = (Path(__file__).parent / "data").resolve()


@pytest.fixture
def tempus_violated() -> str:
    """Tempus-style report of a violated setup path (slack -0.045)."""
    return (DATA_DIR / "tempus_violated.rpt").read_text()


@pytest.fixture
def primetime_met() -> str:
    """PrimeTime-style report of a passing path without negative values."""
    return (DATA_DIR / "primetime_met.rpt").read_text()


@pytest.fixture
def deep_path() -> str:
    """Report with nine combinational cells and a 'long path' note."""
    return (DATA_DIR / "deep_path.rpt").read_text()


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at a fake report server."""
    return Settings(
        base_url="https://reports.example.com",
        api_token="secret-token",
        use_fallback=False,
        timeout=5.0,
    )
