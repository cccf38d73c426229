"""
================================================================================
Page Driver Contract
================================================================================

The capabilities page objects need from a browser-automation handle.

`playwright.async_api.Page` and `Locator` satisfy these protocols
structurally; `RecordingPage` / `RecordingLocator` in `recording_driver`
are the browser-free doubles used by the unit tests.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ElementHandle(Protocol):
    """A lazily resolved element reference (Playwright `Locator` shape)."""

    async def fill(self, value: str, **kwargs: Any) -> None: ...

    async def click(self, **kwargs: Any) -> None: ...

    async def evaluate(self, expression: str, arg: Any = None, **kwargs: Any) -> Any: ...

    async def is_visible(self, **kwargs: Any) -> bool: ...

    async def get_attribute(self, name: str, **kwargs: Any) -> Optional[str]: ...


@runtime_checkable
class PageDriver(Protocol):
    """A controllable browser tab (Playwright `Page` shape)."""

    @property
    def url(self) -> str: ...

    async def goto(self, url: str, **kwargs: Any) -> Any: ...

    def locator(self, selector: str, **kwargs: Any) -> ElementHandle: ...

    async def title(self) -> str: ...

    async def screenshot(self, **kwargs: Any) -> bytes: ...


__all__ = [
    "ElementHandle",
    "PageDriver",
]
