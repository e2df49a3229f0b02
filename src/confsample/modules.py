"""🌐 Module Index - Is a module documented upstream?

The upstream module configuration page lists every in-tree module. Sample
files for those modules link to the upstream docs; everything else links to
the custom prefix. The page is fetched once and cached on disk.
"""

from __future__ import annotations

import tempfile
from collections.abc import Iterable
from pathlib import Path

import httpx

from .errors import ModuleIndexError

MODULE_LIST_URL = "https://docs.asterisk.org/Latest_API/API_Documentation/Module_Configuration/"
DEFAULT_CACHE_PATH = Path(tempfile.gettempdir()) / "confsample_asterisk_modules.html"


class ModuleIndex:
    """Membership test against the cached upstream module page.

    Example:
        index = ModuleIndex()
        index.contains("app_confbridge")  # → True
    """

    def __init__(
        self,
        url: str = MODULE_LIST_URL,
        cache_path: Path | str = DEFAULT_CACHE_PATH,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the index.

        Args:
            url: Page listing the in-tree modules
            cache_path: File caching the page between runs
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        self.url = url
        self.cache_path = Path(cache_path)
        self.timeout = timeout
        self.transport = transport
        self._page: str | None = None

    @property
    def page(self) -> str:
        """Page text, loaded from cache or fetched on first access."""
        if self._page is None:
            if self.cache_path.exists():
                self._page = self._read_cache()
            else:
                self._page = self._fetch()
                self._write_cache(self._page)
        return self._page

    def contains(self, module: str) -> bool:
        """Check whether a module is mentioned on the upstream page."""
        return module in self.page

    def _fetch(self) -> str:
        """Fetch the module page.

        Raises:
            ModuleIndexError: On network or HTTP errors
        """
        try:
            with httpx.Client(
                timeout=self.timeout, follow_redirects=True, transport=self.transport
            ) as client:
                response = client.get(self.url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise ModuleIndexError(f"Failed to fetch module list from {self.url}: {e}") from e
        return response.text

    def _read_cache(self) -> str:
        try:
            return self.cache_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ModuleIndexError(f"Failed to read module cache {self.cache_path}: {e}") from e

    def _write_cache(self, page: str) -> None:
        try:
            self.cache_path.write_text(page, encoding="utf-8")
        except OSError as e:
            raise ModuleIndexError(f"Failed to write module cache {self.cache_path}: {e}") from e


class StaticModuleIndex:
    """Module index over a fixed set of names (offline use and tests)."""

    def __init__(self, modules: Iterable[str] = ()) -> None:
        self.modules = set(modules)

    def contains(self, module: str) -> bool:
        return module in self.modules
