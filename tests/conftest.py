"""
Pytest Configuration and Fixtures for hof Tests
===============================================

Purpose
-------
Centralized test fixtures and configuration for the hof test suite.

Responsibilities
----------------
- Put the process into the testing environment before hof is imported
- Reload static configuration around tests that change the environment
- Provide fresh factory instances for domain tests
"""

from __future__ import annotations

import os
from typing import Generator

import pytest


# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config):
    """Configure pytest environment."""
    os.environ["ENVIRONMENT"] = "testing"
    os.environ["LOG_LEVEL"] = "DEBUG"


# ============================================================================
# CONFIG FIXTURES
# ============================================================================


@pytest.fixture
def reload_config(monkeypatch) -> Generator:
    """
    Reload Config after the test has patched environment variables.

    Usage:
        def test_x(monkeypatch, reload_config):
            monkeypatch.setenv("LOG_LEVEL", "WARNING")
            reload_config()
    """
    from hof.core.config import Config

    yield Config.reload

    monkeypatch.undo()
    Config.reload()


# ============================================================================
# FACTORY FIXTURES
# ============================================================================


@pytest.fixture
def sample_pocket():
    """Pocket holding 50 coins at the fixed prices."""
    from hof import pocket

    return pocket(50)


@pytest.fixture
def sample_lives():
    """Lives tracker starting at 5."""
    from hof import lives

    return lives(5)
