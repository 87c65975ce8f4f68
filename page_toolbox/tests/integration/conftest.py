"""
Fixtures for the real-browser tests: skipped when Chromium is not installed.
"""

import os

import pytest
from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from page_toolbox.tools import ToolExecutor, build_tool_registry
from page_toolbox.tools.browser import BrowserOptions, BrowserSessionManager


@pytest.fixture(scope="session")
def chromium_installed() -> None:
    try:
        with sync_playwright() as playwright:
            executable = playwright.chromium.executable_path
    except PlaywrightError as e:
        pytest.skip(f"Playwright driver unavailable: {e}")
    if not os.path.exists(executable):
        pytest.skip("Chromium is not installed (run `playwright install chromium`)")


@pytest.fixture
def browser_executor(chromium_installed) -> ToolExecutor:
    manager = BrowserSessionManager(options=BrowserOptions(timeout=15000))
    return ToolExecutor(registry=build_tool_registry(manager))
