"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework.

Components:
    - driver: page/element capability contract
    - page_base: base page object for common operations
    - browser_manager: browser lifecycle management
    - config_loader: YAML + environment configuration
    - log_setup: Loguru sink configuration
    - recording_driver: browser-free driver double for unit tests

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import BrowserManager
from .config_loader import ConfigLoader, ConfigurationError
from .driver import ElementHandle, PageDriver
from .log_setup import init_logger
from .page_base import BasePage, MissingPageError
from .recording_driver import RecordingLocator, RecordingPage

__all__ = [
    "BasePage",
    "BrowserManager",
    "ConfigLoader",
    "ConfigurationError",
    "ElementHandle",
    "MissingPageError",
    "PageDriver",
    "RecordingLocator",
    "RecordingPage",
    "init_logger",
]
