"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Fail-fast construction (no page object without a driver handle)
    - Declarative locators resolved once per instance
    - Auth-provider error texts injected from configuration
    - Navigation, form-validation and screenshot helpers

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Dict, Mapping, Optional

import allure
from loguru import logger

from .config_loader import ConfigLoader
from .driver import ElementHandle, PageDriver


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

VALIDATION_MESSAGE_JS = "el => el.validationMessage"


class MissingPageError(ValueError):
    """Raised when a page object is constructed without a driver handle."""
    pass


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare:
        URL_PATH: route the page object navigates to
        SELECTORS: locator name -> selector string
        ERROR_SELECTORS: locator name -> key in the `auth_errors` config section

    Every declared name becomes an attribute holding the resolved locator:

        class LoginPage(BasePage):
            SELECTORS = {"email_input": "#email"}

        LoginPage(page).email_input  # page.locator("#email")
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""
    SELECTORS: Dict[str, str] = {}
    ERROR_SELECTORS: Dict[str, str] = {}

    def __init__(
        self,
        page: PageDriver,
        base_url: str = "",
        error_messages: Optional[Mapping[str, str]] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page (or any PageDriver implementation)
            base_url: Base URL for the application. Defaults to `ui.base_url`.
            error_messages: Auth error texts by code. Defaults to `auth_errors`.

        Raises:
            MissingPageError: If `page` is missing or falsy.
        """
        if not page:
            raise MissingPageError(
                f"The 'page' parameter must be provided to {type(self).__name__} constructor."
            )

        self.page = page
        config = ConfigLoader()
        if not base_url:
            base_url = config.get("ui.base_url", "http://localhost:3000")
        self.base_url = base_url.rstrip("/")

        messages = dict(error_messages) if error_messages is not None else config.auth_errors()
        self.locators: Dict[str, ElementHandle] = {}
        for name, selector in self.selectors(messages).items():
            self.locators[name] = page.locator(selector)
            setattr(self, name, self.locators[name])

    def selectors(self, error_messages: Mapping[str, str]) -> Dict[str, str]:
        """
        Full locator table for this page: static selectors plus text selectors
        built from the configured error messages.

        Raises:
            KeyError: If an ERROR_SELECTORS code has no configured message.
        """
        table = dict(self.SELECTORS)
        for name, code in self.ERROR_SELECTORS.items():
            table[name] = f"text={error_messages[code]}"
        return table

    @property
    def url(self) -> str:
        """Get full page URL."""
        return self.url_for(self.URL_PATH)

    def url_for(self, path: str) -> str:
        """Absolute URL of `path` on the application under test."""
        return f"{self.base_url}{path}"

    async def navigate(self) -> None:
        """Navigate to this page. Exactly one `goto`; errors propagate."""
        with allure.step(f"Navigate to {self.URL_PATH}"):
            await self.page.goto(self.url)
            logger.debug(f"Navigated to: {self.url}")

    async def fill(self, name: str, value: str) -> None:
        """Fill the declared locator `name` with `value`."""
        shown = "*" * len(value) if value and "password" in name.lower() else value
        with allure.step(f"Fill {name}: {shown}"):
            await self.locators[name].fill(value)

    async def submit(self, name: str) -> None:
        """
        Click a submit control without waiting for what follows.

        The caller owns any wait on the resulting navigation or DOM change.
        """
        with allure.step(f"Click: {name}"):
            await self.locators[name].click(no_wait_after=True)
            logger.debug(f"Clicked {name} on {type(self).__name__}")

    async def validation_message(self, element: ElementHandle) -> str:
        """
        Browser-native constraint validation message of a form control.

        Returns an empty string when the control is valid.
        """
        return await element.evaluate(VALIDATION_MESSAGE_JS) or ""

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        screenshot_dir = Path(ConfigLoader().get("ui.screenshot_dir", str(SCREENSHOT_DIR)))
        screenshot_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = screenshot_dir / f"{name}_{timestamp}.png"

        data = await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach(
                data,
                name=name,
                attachment_type=allure.attachment_type.PNG,
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "MissingPageError",
    "PageBase",
    "SCREENSHOT_DIR",
]

# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage
