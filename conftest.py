"""
Global pytest configuration and fixtures.
"""
import os
from typing import Dict

import pytest

from timesheet_checker.config import TimesheetConfig, reload_config, reset_logging
from timesheet_checker.models.timesheet import TimeEntryRow


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'BASIC_THRESHOLD_MINUTES': '2400',
        'MISMATCH_TOLERANCE_MINUTES': '1',
        'SUBMISSION_URL': 'https://forms.example.com/timesheet',
        'MAX_RETRIES': '0',
        'RETRY_DELAY': '0',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import timesheet_checker.config.settings
    timesheet_checker.config.settings._config = None

    yield test_env_vars

    timesheet_checker.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> TimesheetConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def make_row():
    """Factory for timesheet rows; the lunch break is passed as ``lunch``."""

    def _make_row(index: int = 1, **fields) -> TimeEntryRow:
        return TimeEntryRow(index=index, **fields)

    return _make_row


@pytest.fixture
def sample_rows():
    """A clean week of rows: 5 days of 9:00-17:30 with 30 minutes lunch."""
    return [
        TimeEntryRow(
            index=i,
            date=f"1{i}/03/2025",
            day=day,
            week="Week 12",
            start="9:00",
            finish="17:30",
            lunch="30",
            basic="8",
        )
        for i, day in enumerate(["Mon", "Tue", "Wed", "Thu", "Fri"], start=1)
    ]


@pytest.fixture(autouse=True)
def cleanup_logging():
    """Remove handlers installed by the CLI between tests."""
    yield
    reset_logging()


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        path = str(item.fspath).replace(os.sep, "/")
        if "tests/unit/" in path:
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in path:
            item.add_marker(pytest.mark.integration)
