"""
================================================================================
Register Page Object (Async / Playwright)
================================================================================

Registration screen of the Financial App. Same shape as LoginPage with a
full-name field and two auth-provider error locators.

================================================================================
"""

from __future__ import annotations

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import PageBase


class RegisterPage(PageBase):
    """Register page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Financial App | Register"

    SELECTORS = {
        "full_name_input": "#fullName",
        "email_input": "#email",
        "password_input": "#password",
        "login_button": 'button[type="submit"]',
    }
    ERROR_SELECTORS = {
        "error_message_email_already_in_use": "email_already_in_use",
        "error_message_password": "weak_password",
    }

    full_name_input: Locator
    email_input: Locator
    password_input: Locator
    login_button: Locator
    error_message_email_already_in_use: Locator
    error_message_password: Locator

    @allure.step("Input registration details")
    async def input_registration_details(
        self,
        full_name: str = "",
        email: str = "",
        password: str = "",
    ) -> None:
        """Fill full name, email and password in that order."""
        await self.fill("full_name_input", full_name)
        await self.fill("email_input", email)
        await self.fill("password_input", password)

    @allure.step("Submit registration form")
    async def register(self) -> None:
        """Click the submit button once, without waiting for navigation."""
        await self.submit("login_button")
