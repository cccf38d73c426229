"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser management, page objects and test data.

Key Features:
- One browser per session, a fresh context + page per test
- Page Object fixtures for the login and register screens
- Screenshot attached to Allure on failure
- Whole directory skipped when the application is not reachable

================================================================================
"""

from pathlib import Path
from typing import AsyncGenerator, Dict

import allure
import httpx
import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.config_loader import ConfigLoader
from testsuites.ui_testing.pages.login_page import LoginPage
from testsuites.ui_testing.pages.register_page import RegisterPage


UI_TESTS_DIR = Path(__file__).parent

TEST_DATA_KEYS = (
    "valid_email",
    "valid_password",
    "invalid_email",
    "invalid_password",
    "invalid_email_format",
    "new_fullname",
    "new_email",
    "new_password",
)

# Per-item reports keyed by phase ("setup", "call", "teardown")
phase_report_key = pytest.StashKey[Dict[str, pytest.TestReport]]()


# ================================================================================
# Collection
# ================================================================================

def _app_reachable(base_url: str, timeout: float) -> bool:
    try:
        httpx.get(base_url, timeout=timeout, follow_redirects=True)
    except httpx.HTTPError as e:
        logger.warning(f"Financial App not reachable at {base_url}: {e}")
        return False
    return True


def pytest_collection_modifyitems(config, items):
    """Skip the end-to-end scenarios when nothing answers on `ui.base_url`."""
    ui_items = [item for item in items if UI_TESTS_DIR in item.path.parents]
    if not ui_items:
        return

    loader = ConfigLoader()
    base_url = loader.get("ui.base_url", "http://localhost:3000")
    if _app_reachable(base_url, loader.get("ui.reachability_timeout", 3.0)):
        return

    skip = pytest.mark.skip(reason=f"Financial App not reachable at {base_url}")
    for item in ui_items:
        item.add_marker(skip)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    One browser launch for the whole session; contexts are per test.
    """
    manager = BrowserManager()
    await manager.start()
    yield manager
    await manager.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(browser_manager: BrowserManager) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(request: pytest.FixtureRequest, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Attaches a full-page screenshot to Allure when the test body failed.
    """
    page = await context.new_page()
    yield page

    reports = request.node.stash.get(phase_report_key, {})
    if "call" in reports and reports["call"].failed:
        try:
            screenshot = await page.screenshot(full_page=True)
            allure.attach(
                screenshot,
                name="failure_screenshot",
                attachment_type=allure.attachment_type.PNG,
            )
        except Exception as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")

    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def login_page(page: Page) -> LoginPage:
    """Provides LoginPage instance."""
    return LoginPage(page)


@pytest.fixture
def register_page(page: Page) -> RegisterPage:
    """Provides RegisterPage instance."""
    return RegisterPage(page)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Keep each phase report on the item so fixtures can see the outcome."""
    outcome = yield
    report = outcome.get_result()
    item.stash.setdefault(phase_report_key, {})[report.when] = report


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data() -> Dict[str, str]:
    """
    Account data for the scenarios.

    Placeholders live in config/config.yaml; real runs override them with
    TEST_DATA_VALID_EMAIL, TEST_DATA_NEW_EMAIL, ...
    """
    loader = ConfigLoader()
    return {key: loader.get(f"test_data.{key}", "") for key in TEST_DATA_KEYS}
