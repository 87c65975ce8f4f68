"""
Browser session manager for web automation.

Every tool call gets its own headless Chromium: launched when the session is
opened, closed when the ``async with`` block exits, on success and on failure.
Sessions are never pooled or shared between calls.
"""

import base64
import os
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Callable, Literal, Optional
from uuid import uuid4

from dotenv import load_dotenv
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright
from pydantic import BaseModel, Field

from page_toolbox.tools.errors import BrowserSessionError
from page_toolbox.utils.logger import get_logger

logger = get_logger(__name__)


# ======================================================================
# Configuration Models
# ======================================================================


def _env_bool(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class BrowserOptions(BaseModel):
    """Configuration options for browser instances."""

    headless: bool = Field(
        default=True,
        description="Run browser in headless mode (no GUI)",
    )
    user_agent: Optional[str] = Field(
        default=None,
        description="Custom user agent string",
    )
    viewport_width: int = Field(
        default=1280,
        description="Browser viewport width in pixels",
    )
    viewport_height: int = Field(
        default=720,
        description="Browser viewport height in pixels",
    )
    timeout: int = Field(
        default=30000,
        description="Default timeout for operations (ms)",
    )
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = Field(
        default="load",
        description="When to consider navigation succeeded",
    )
    slow_mo: int = Field(
        default=0,
        description="Slow down operations by specified ms (useful for debugging)",
    )

    @classmethod
    def from_env(cls) -> "BrowserOptions":
        """Build options from BROWSER_* environment variables (and .env).

        Unset variables keep the field defaults.
        """
        load_dotenv()

        env_map = {
            "headless": ("BROWSER_HEADLESS", _env_bool),
            "user_agent": ("BROWSER_USER_AGENT", str),
            "viewport_width": ("BROWSER_VIEWPORT_WIDTH", int),
            "viewport_height": ("BROWSER_VIEWPORT_HEIGHT", int),
            "timeout": ("BROWSER_TIMEOUT_MS", int),
            "wait_until": ("BROWSER_WAIT_UNTIL", str),
            "slow_mo": ("BROWSER_SLOW_MO", int),
        }

        values: dict[str, Any] = {}
        for field_name, (env_name, convert) in env_map.items():
            raw = os.getenv(env_name)
            if raw is not None and raw != "":
                values[field_name] = convert(raw)
        return cls(**values)


# ======================================================================
# Browser Session
# ======================================================================


@dataclass
class BrowserSession:
    """One browser plus one page, owned by a single tool invocation."""

    session_id: str
    browser: Any  # playwright.async_api.Browser
    context: Any  # playwright.async_api.BrowserContext
    page: Any  # playwright.async_api.Page
    options: BrowserOptions

    async def navigate(self, url: str) -> None:
        """Navigate to a URL and wait according to ``options.wait_until``."""
        logger.info(f"[{self.session_id}] Navigating to {url}")
        await self.page.goto(
            url,
            wait_until=self.options.wait_until,
            timeout=self.options.timeout,
        )

    async def set_content(self, html: str) -> None:
        """Load an HTML string into the page instead of navigating."""
        logger.info(f"[{self.session_id}] Loading {len(html)} characters of HTML")
        await self.page.set_content(html, timeout=self.options.timeout)

    async def title(self) -> str:
        return await self.page.title()

    async def content(self) -> str:
        """Full serialized markup of the current document."""
        return await self.page.content()

    async def query_all(self, selector: str, script: str) -> list[Any]:
        """Run ``script`` over every element matching ``selector``."""
        return await self.page.eval_on_selector_all(selector, script)

    async def evaluate(self, script: str) -> Any:
        logger.debug(f"[{self.session_id}] Evaluating JavaScript")
        return await self.page.evaluate(script)

    async def screenshot(self, full_page: bool = True) -> str:
        """Capture the page as PNG and return it base64-encoded."""
        logger.info(f"[{self.session_id}] Taking screenshot (full_page={full_page})")
        image = await self.page.screenshot(full_page=full_page, type="png")
        return base64.b64encode(image).decode()

    async def inner_html(self, selector: str) -> Optional[str]:
        """innerHTML of the first element matching ``selector``.

        Returns None when nothing matches or the selector cannot be evaluated.
        """
        try:
            handle = await self.page.query_selector(selector)
            if handle is None:
                return None
            return await handle.inner_html()
        except PlaywrightError as e:
            logger.warning(f"[{self.session_id}] Selector {selector!r} failed: {e}")
            return None


# ======================================================================
# Session Manager
# ======================================================================


class BrowserSessionManager:
    """Opens exclusively owned browser sessions.

    Holds configuration only; no browser outlives the session that launched it.
    """

    def __init__(
        self,
        options: BrowserOptions | None = None,
        playwright_factory: Callable[[], Any] = async_playwright,
    ):
        """Initialize the session manager.

        Args:
            options: Browser options for every session
            playwright_factory: Returns an object whose ``start()`` coroutine
                yields a Playwright driver (``async_playwright`` by default)
        """
        self.options = options or BrowserOptions()
        self._playwright_factory = playwright_factory

    @asynccontextmanager
    async def open_session(self, offline: bool = False) -> AsyncIterator[BrowserSession]:
        """Launch a browser, yield a session on a fresh page, always close it.

        Args:
            offline: Disable network access for the page (used for HTML strings)

        Raises:
            BrowserSessionError: If the browser fails to launch or any
                Playwright call inside the block fails
        """
        session_id = uuid4().hex[:8]
        playwright = None
        browser = None

        try:
            playwright = await self._playwright_factory().start()
            browser = await playwright.chromium.launch(
                headless=self.options.headless,
                slow_mo=self.options.slow_mo,
            )
            logger.info(f"[{session_id}] Browser launched")

            context = await browser.new_context(
                viewport={
                    "width": self.options.viewport_width,
                    "height": self.options.viewport_height,
                },
                user_agent=self.options.user_agent,
                offline=offline,
            )
            page = await context.new_page()
            page.set_default_timeout(self.options.timeout)

            yield BrowserSession(
                session_id=session_id,
                browser=browser,
                context=context,
                page=page,
                options=self.options,
            )
        except PlaywrightError as e:
            logger.error(f"[{session_id}] Browser session failed: {e}")
            raise BrowserSessionError(str(e)) from e
        finally:
            await self._shutdown(session_id, playwright, browser)

    async def _shutdown(self, session_id: str, playwright: Any, browser: Any) -> None:
        # Close errors are logged so they never replace the original failure
        if browser is not None:
            try:
                await browser.close()
                logger.info(f"[{session_id}] Browser closed")
            except Exception as e:
                logger.error(f"[{session_id}] Error closing browser: {e}")
        if playwright is not None:
            try:
                await playwright.stop()
            except Exception as e:
                logger.error(f"[{session_id}] Error stopping playwright: {e}")
