"""
================================================================================
Recording Driver (test double)
================================================================================

Browser-free implementation of the `PageDriver` contract.

Every call is appended to a shared `calls` log as `(action, target, payload)`
so unit tests can assert exactly what a page object asked the browser to do:

    page = RecordingPage()
    login = LoginPage(page)
    await login.input_credentials("a@b.c", "pw")
    assert page.calls == [
        ("fill", "#email", "a@b.c"),
        ("fill", "#password", "pw"),
    ]

`failures` maps an action name to an exception raised on that action, which
is how propagation of driver errors is exercised.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple


Call = Tuple[str, str, Any]


class RecordingLocator:
    """Element handle that records actions instead of touching a DOM."""

    def __init__(self, owner: "RecordingPage", selector: str):
        self.owner = owner
        self.selector = selector

    def _record(self, action: str, payload: Any = None) -> None:
        error = self.owner.failures.get(action)
        if error is not None:
            raise error
        self.owner.calls.append((action, self.selector, payload))

    async def fill(self, value: str, **kwargs: Any) -> None:
        self._record("fill", value)

    async def click(self, **kwargs: Any) -> None:
        self._record("click", kwargs)

    async def evaluate(self, expression: str, arg: Any = None, **kwargs: Any) -> Any:
        self._record("evaluate", expression)
        return self.owner.evaluate_results.get(self.selector)

    async def is_visible(self, **kwargs: Any) -> bool:
        self._record("is_visible")
        return self.selector in self.owner.visible

    async def get_attribute(self, name: str, **kwargs: Any) -> Optional[str]:
        self._record("get_attribute", name)
        return self.owner.attributes.get((self.selector, name))

    def __repr__(self) -> str:
        return f"RecordingLocator({self.selector!r})"


class RecordingPage:
    """Page handle that records navigation and locator resolution."""

    def __init__(
        self,
        url: str = "about:blank",
        title: str = "",
        failures: Optional[Dict[str, Exception]] = None,
    ):
        self._url = url
        self._title = title
        self.calls: List[Call] = []
        self.resolved: List[str] = []
        self.failures: Dict[str, Exception] = failures or {}
        self.visible: set = set()
        self.attributes: Dict[Tuple[str, str], str] = {}
        self.evaluate_results: Dict[str, Any] = {}

    @property
    def url(self) -> str:
        return self._url

    def locator(self, selector: str, **kwargs: Any) -> RecordingLocator:
        self.resolved.append(selector)
        return RecordingLocator(self, selector)

    async def goto(self, url: str, **kwargs: Any) -> None:
        error = self.failures.get("goto")
        if error is not None:
            raise error
        self.calls.append(("goto", url, kwargs))
        self._url = url

    async def title(self) -> str:
        return self._title

    async def screenshot(self, **kwargs: Any) -> bytes:
        self.calls.append(("screenshot", kwargs.get("path", ""), kwargs))
        return b"\x89PNG\r\n\x1a\n"

    def actions(self, action: str) -> List[Call]:
        """Recorded calls of a single kind, in order."""
        return [call for call in self.calls if call[0] == action]


__all__ = [
    "RecordingLocator",
    "RecordingPage",
]
