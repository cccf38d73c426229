"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Login screen of the Financial App.

The error locator is built from the `auth_errors.invalid_credential` text in
configuration, so switching auth providers only touches config/config.yaml.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Financial App | Login"

    SELECTORS = {
        "email_input": "#email",
        "password_input": "#password",
        "login_button": 'button[type="submit"]',
    }
    ERROR_SELECTORS = {
        "error_message": "invalid_credential",
    }

    email_input: Locator
    password_input: Locator
    login_button: Locator
    error_message: Locator

    @allure.step("Input credentials")
    async def input_credentials(self, email: str = "", password: str = "") -> None:
        """Fill email and password. Blank by default; no validation here."""
        await self.fill("email_input", email)
        await self.fill("password_input", password)

    @allure.step("Submit login form")
    async def login(self) -> None:
        """Click the login button once, without waiting for navigation."""
        await self.submit("login_button")
