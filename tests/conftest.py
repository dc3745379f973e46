"""Shared fixtures for the textcompare test suite."""

import pytest

from textcompare import reset_settings


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts and ends with settings read fresh from the environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def sentence_dictionary() -> set[str]:
    return {"we", "canon", "see", "ash", "ort", "distance", "ahead"}


@pytest.fixture
def chinese_dictionary() -> set[str]:
    return {"他", "特别", "喜欢", "北京烤鸭"}
