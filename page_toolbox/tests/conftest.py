"""
Shared fixtures: a fake Playwright driver that records every launch and close.

The fake mirrors the slice of the async Playwright API the session manager
touches: ``async_playwright().start()``, ``chromium.launch``,
``browser.new_context``, ``context.new_page`` and the page calls used by the
tools.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

import pytest
from playwright.async_api import Error as PlaywrightError

from page_toolbox.tools import ToolExecutor, build_tool_registry
from page_toolbox.tools.browser import BrowserOptions, BrowserSessionManager


@dataclass
class FakeBrowserState:
    """What the fake page serves, plus a record of what happened to it."""

    # Served content
    title: str = ""
    html: str = "<html><head></head><body></body></html>"
    raw_elements: list[dict[str, Any]] = field(default_factory=list)
    raw_nodes: Optional[list[dict[str, Any]]] = None
    screenshot_bytes: bytes = b"\x89PNG fake"
    inner_html: dict[str, str] = field(default_factory=dict)
    invalid_selectors: set[str] = field(default_factory=set)

    # Failure injection
    launch_error: Optional[str] = None
    goto_error: Optional[str] = None
    evaluate_error: Optional[str] = None
    close_error: Optional[str] = None

    # Records
    launches: int = 0
    closes: int = 0
    stops: int = 0
    launch_kwargs: list[dict[str, Any]] = field(default_factory=list)
    context_kwargs: list[dict[str, Any]] = field(default_factory=list)
    visited: list[str] = field(default_factory=list)
    goto_kwargs: list[dict[str, Any]] = field(default_factory=list)
    contents_set: list[str] = field(default_factory=list)
    queried_selectors: list[str] = field(default_factory=list)
    screenshot_kwargs: list[dict[str, Any]] = field(default_factory=list)
    default_timeout: Optional[int] = None


class FakeElementHandle:
    def __init__(self, html: str) -> None:
        self._html = html

    async def inner_html(self) -> str:
        return self._html


class FakePage:
    def __init__(self, state: FakeBrowserState) -> None:
        self.state = state

    def set_default_timeout(self, timeout: int) -> None:
        self.state.default_timeout = timeout

    async def goto(self, url: str, **kwargs: Any) -> None:
        self.state.visited.append(url)
        self.state.goto_kwargs.append(kwargs)
        if self.state.goto_error:
            raise PlaywrightError(self.state.goto_error)

    async def set_content(self, html: str, **kwargs: Any) -> None:
        self.state.contents_set.append(html)

    async def title(self) -> str:
        return self.state.title

    async def content(self) -> str:
        return self.state.html

    async def eval_on_selector_all(self, selector: str, script: str) -> list[dict[str, Any]]:
        self.state.queried_selectors.append(selector)
        if self.state.evaluate_error:
            raise PlaywrightError(self.state.evaluate_error)
        return self.state.raw_elements

    async def evaluate(self, script: str) -> Any:
        if self.state.evaluate_error:
            raise PlaywrightError(self.state.evaluate_error)
        return self.state.raw_nodes

    async def screenshot(self, **kwargs: Any) -> bytes:
        self.state.screenshot_kwargs.append(kwargs)
        return self.state.screenshot_bytes

    async def query_selector(self, selector: str) -> Optional[FakeElementHandle]:
        self.state.queried_selectors.append(selector)
        if selector in self.state.invalid_selectors:
            raise PlaywrightError(f"Unexpected token in selector {selector}")
        if selector in self.state.inner_html:
            return FakeElementHandle(self.state.inner_html[selector])
        return None


class FakeContext:
    def __init__(self, state: FakeBrowserState) -> None:
        self.state = state

    async def new_page(self) -> FakePage:
        return FakePage(self.state)


class FakeBrowser:
    def __init__(self, state: FakeBrowserState) -> None:
        self.state = state

    async def new_context(self, **kwargs: Any) -> FakeContext:
        self.state.context_kwargs.append(kwargs)
        return FakeContext(self.state)

    async def close(self) -> None:
        self.state.closes += 1
        if self.state.close_error:
            raise PlaywrightError(self.state.close_error)


class FakeChromium:
    def __init__(self, state: FakeBrowserState) -> None:
        self.state = state

    async def launch(self, **kwargs: Any) -> FakeBrowser:
        self.state.launch_kwargs.append(kwargs)
        if self.state.launch_error:
            raise PlaywrightError(self.state.launch_error)
        self.state.launches += 1
        return FakeBrowser(self.state)


class FakePlaywright:
    def __init__(self, state: FakeBrowserState) -> None:
        self.chromium = FakeChromium(state)
        self.state = state

    async def stop(self) -> None:
        self.state.stops += 1


class FakePlaywrightStarter:
    """Stands in for the object returned by ``async_playwright()``."""

    def __init__(self, state: FakeBrowserState) -> None:
        self.state = state

    async def start(self) -> FakePlaywright:
        return FakePlaywright(self.state)


@pytest.fixture
def browser_state() -> FakeBrowserState:
    return FakeBrowserState()


@pytest.fixture
def browser_options() -> BrowserOptions:
    return BrowserOptions(timeout=5000)


@pytest.fixture
def playwright_factory(browser_state):
    return lambda: FakePlaywrightStarter(browser_state)


@pytest.fixture
def session_manager(browser_options, playwright_factory) -> BrowserSessionManager:
    return BrowserSessionManager(
        options=browser_options,
        playwright_factory=playwright_factory,
    )


@pytest.fixture
def tool_registry(session_manager):
    return build_tool_registry(session_manager)


@pytest.fixture
def tool_executor(tool_registry) -> ToolExecutor:
    return ToolExecutor(registry=tool_registry)
