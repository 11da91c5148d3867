"""
Browser Renderer - Prints HTML to PDF with headless Chromium.

Every call launches its own browser and closes it before returning;
nothing is pooled or reused between requests.
"""
import logging
from typing import Optional

from playwright.async_api import async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from core.constants import BROWSER_ARGS, ERROR_MESSAGES, PRINT_OPTIONS
from core.errors import RenderError


logger = logging.getLogger(__name__)


class BrowserPdfRenderer:
    """Renders HTML documents to PDF via Playwright."""

    def __init__(
        self,
        timeout_ms: int = 30000,
        headless: bool = True,
        print_options: Optional[dict] = None
    ):
        """
        Initialize renderer.

        Args:
            timeout_ms: Timeout for loading content and printing
            headless: Run Chromium without a window
            print_options: Overrides for page.pdf() options
        """
        self.timeout_ms = timeout_ms
        self.headless = headless
        self.print_options = {**PRINT_OPTIONS, **(print_options or {})}

    async def render(self, html: str) -> bytes:
        """
        Render an HTML document to PDF.

        Args:
            html: Complete HTML document

        Returns:
            PDF bytes

        Raises:
            RenderError: On launch failure, timeout or browser crash
        """
        try:
            async with async_playwright() as playwright:
                browser = await playwright.chromium.launch(
                    headless=self.headless,
                    args=BROWSER_ARGS
                )
                try:
                    page = await browser.new_page()
                    page.set_default_timeout(self.timeout_ms)
                    await page.set_content(html, wait_until="load")
                    return await page.pdf(**self.print_options)
                finally:
                    await browser.close()
        except PlaywrightTimeoutError as e:
            logger.warning(f"Browser render timed out after {self.timeout_ms}ms: {e}")
            raise RenderError(ERROR_MESSAGES['render_error'], detail=str(e)) from e
        except PlaywrightError as e:
            logger.warning(f"Browser render failed: {e}")
            raise RenderError(ERROR_MESSAGES['render_error'], detail=str(e)) from e
        except MemoryError as e:
            raise RenderError(ERROR_MESSAGES['render_error'], detail="out of memory") from e
