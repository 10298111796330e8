"""Headless browser session (patchright) for sources that render client-side.

Rules:
  - One browser + one context per session; pages are opened per query.
  - Heavy resources (images, stylesheets, fonts by default) are aborted.
  - navigator.webdriver is hidden on every new document.
"""

import logging
from types import TracebackType
from typing import Any

from patchright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from jobsearch.core.config import BrowserConfig

logger = logging.getLogger(__name__)

_LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-blink-features=AutomationControlled",
]

_HIDE_WEBDRIVER = "Object.defineProperty(navigator, 'webdriver', { get: () => false });"


class BrowserSession:
    """Async context manager that owns one patchright browser + context.

    Usage::

        async with BrowserSession(config, user_agent) as session:
            page = await session.new_page()
            await page.goto("https://...")
    """

    def __init__(self, config: BrowserConfig, user_agent: str | None = None) -> None:
        self._config = config
        self._user_agent = user_agent
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None

    @property
    def timeout_ms(self) -> int:
        return self._config.timeout_ms

    async def new_page(self) -> Page:
        """Open a new tab in the session's context. Raises if not entered."""
        if self._context is None:
            msg = "BrowserSession not entered; use 'async with'"
            raise RuntimeError(msg)
        return await self._context.new_page()

    async def __aenter__(self) -> "BrowserSession":
        pw = await async_playwright().start()
        self._playwright = pw
        try:
            self._browser = await pw.chromium.launch(
                headless=self._config.headless,
                args=_LAUNCH_ARGS,
            )

            context_kwargs: dict[str, Any] = {}
            if self._user_agent:
                context_kwargs["user_agent"] = self._user_agent
            self._context = await self._browser.new_context(**context_kwargs)
            self._context.set_default_timeout(self._config.timeout_ms)
            await self._context.add_init_script(_HIDE_WEBDRIVER)

            if self._config.blocked_resource_types:
                await self._context.route("**/*", self._route)
        except BaseException:
            # __aexit__ is not called when __aenter__ raises.
            await self.__aexit__(None, None, None)
            raise
        logger.debug("Browser session started (headless=%s)", self._config.headless)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._context is not None:
            await self._context.close()
        if self._browser is not None:
            await self._browser.close()
        if self._playwright is not None:
            await self._playwright.stop()
        self._context = None
        self._browser = None
        self._playwright = None

    async def _route(self, route: Any) -> None:
        if should_block(route.request.resource_type, self._config.blocked_resource_types):
            await route.abort()
        else:
            await route.continue_()


def should_block(resource_type: str, blocked: list[str]) -> bool:
    """Return True if a request of this resource type should be aborted."""
    return resource_type.lower() in {b.lower() for b in blocked}
