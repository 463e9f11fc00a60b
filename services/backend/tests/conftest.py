"""Root pytest configuration for test discovery and auto-skip behavior.

This conftest.py makes all tests visible in the IDE test explorer while
auto-skipping slow/manual tests unless explicitly enabled via environment
variables or pytest options.

Test Structure:
    tests/
    ├── recipebook/            # Application tests (API, CLI, recipes)
    │   ├── unit/
    │   └── integration/
    ├── recipebook_identity/   # Identity tests (users, intents, services)
    │   ├── unit/
    │   └── integration/       # Repository tests against SQLite files
    ├── recipebook_auth/       # Credential directory and password hashing
    └── shared/                # Shared fixtures and utilities

Environment Variables:
    RUN_INTEGRATION=1    Run @pytest.mark.integration tests
    RUN_MANUAL=1         Run @pytest.mark.manual tests
    RUN_ALL_TESTS=1      Run all tests (overrides other settings)

Pytest Options:
    --run-integration    Run integration tests
    --run-manual         Run manual tests
    --run-all            Run all tests
"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

from recipebook_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT.parent.parent / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def _enabled(config, option: str, env_var: str) -> bool:
    return config.getoption(option) or os.environ.get(
        env_var,
        "",
    ).lower() in ("1", "true", "yes")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.integration",
    )
    parser.addoption(
        "--run-manual",
        action="store_true",
        default=False,
        help="Run tests marked with @pytest.mark.manual",
    )
    parser.addoption(
        "--run-all",
        action="store_true",
        default=False,
        help="Run all tests regardless of markers",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests needing external services such as PostgreSQL (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "manual: Tests requiring manual intervention (auto-skipped)",
    )
    config.addinivalue_line(
        "markers",
        "slow: Tests that take more than 1 second",
    )


def pytest_collection_modifyitems(config, items):
    """Auto-skip tests based on markers unless explicitly enabled."""
    if _enabled(config, "--run-all", "RUN_ALL_TESTS"):
        return

    run_integration = _enabled(config, "--run-integration", "RUN_INTEGRATION")
    run_manual = _enabled(config, "--run-manual", "RUN_MANUAL")

    skip_integration = pytest.mark.skip(
        reason="Integration test - run with --run-integration or RUN_INTEGRATION=1",
    )
    skip_manual = pytest.mark.skip(
        reason="Manual test - run with --run-manual or RUN_MANUAL=1",
    )

    for item in items:
        # Explicit markers only, not folder names
        item_markers = {mark.name for mark in item.iter_markers()}

        if not run_integration and "integration" in item_markers:
            item.add_marker(skip_integration)

        if not run_manual and "manual" in item_markers:
            item.add_marker(skip_manual)


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Ensure settings are loaded fresh for the test session."""
    clear_settings_cache()
    yield
    clear_settings_cache()
