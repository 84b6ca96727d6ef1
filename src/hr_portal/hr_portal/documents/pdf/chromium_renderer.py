from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ...core.exceptions import RenderError
from .base import PageSetup, PdfRenderer

logger = logging.getLogger(__name__)

DEFAULT_LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox")


class ChromiumPdfRenderer(PdfRenderer):
    """Headless Chromium via Playwright, one browser process per render.

    Timeouts are disabled (0): template HTML is expected to be self-contained.
    """

    def __init__(
        self,
        page_setup: Optional[PageSetup] = None,
        *,
        launch_args: Sequence[str] = DEFAULT_LAUNCH_ARGS,
        playwright_factory: Callable = sync_playwright,
    ):
        self._page_setup = page_setup or PageSetup()
        self._launch_args = list(launch_args)
        self._playwright_factory = playwright_factory

    def render(self, html: str) -> bytes:
        try:
            with self._playwright_factory() as p:
                browser = p.chromium.launch(headless=True, args=self._launch_args)
                try:
                    page = browser.new_page()
                    page.set_default_navigation_timeout(0)
                    page.set_default_timeout(0)
                    page.set_content(html, wait_until="domcontentloaded", timeout=0)
                    pdf = page.pdf(
                        format=self._page_setup.paper_format,
                        print_background=self._page_setup.print_background,
                        margin=dict(self._page_setup.margin),
                    )
                finally:
                    browser.close()
        except (PlaywrightError, OSError) as e:
            logger.error("[pdf] chromium render failed: %s", e)
            raise RenderError("Failed to render PDF") from e

        logger.debug("[pdf] rendered %d bytes", len(pdf))
        return bytes(pdf)
