"""
================================================================================
Root Pytest Configuration
================================================================================

Registers the suite's markers and tags collected tests by directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against a running Financial App"
    )
    config.addinivalue_line(
        "markers", "unit: Browser-free tests of the framework and page objects"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )

    # Feature markers
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )
    config.addinivalue_line(
        "markers", "login: Tests of the login screen"
    )
    config.addinivalue_line(
        "markers", "register: Tests of the registration screen"
    )
    config.addinivalue_line(
        "markers", "xdist_group(name): Run on the same pytest-xdist worker as the rest of the group"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-tag tests by the directory they live in."""
    for item in items:
        path = str(item.path)

        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            item.add_marker(pytest.mark.e2e)

        if "unit" in item.path.parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Financial App UI Test Suite",
        "=" * 60,
        "",
    ]
