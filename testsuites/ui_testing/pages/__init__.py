"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Financial App.

Each page class encapsulates:
    - Element locators
    - Page-specific actions

Author: Automation Team
License: MIT
================================================================================
"""

from .login_page import LoginPage
from .register_page import RegisterPage

__all__ = [
    "LoginPage",
    "RegisterPage",
]
