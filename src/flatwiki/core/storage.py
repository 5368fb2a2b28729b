"""Storage abstraction for wiki pages."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from flatwiki.core.errors import PageNotFoundError, PersistenceError
from flatwiki.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    def load_page(self, title: str) -> Page:
        """Load a page by title. Raises PageNotFoundError if unreadable."""
        ...

    @abstractmethod
    def save_page(self, page: Page) -> None:
        """Write a page, replacing any previous content."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is one file, ``<title>.txt``, holding the raw body bytes.
    New files are created readable and writable by the owner only.
    Concurrent saves to one title are not coordinated; the last write wins.
    """

    EXTENSION = ".txt"
    FILE_MODE = 0o600

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / (title + self.EXTENSION)

    def load_page(self, title: str) -> Page:
        """Load a page by title."""
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except OSError as exc:
            logger.debug("Page %r not loaded: %s", title, exc)
            raise PageNotFoundError(title) from exc
        return Page(title=title, body=body)

    def save_page(self, page: Page) -> None:
        """Save a page."""
        path = self._get_path(page.title)
        try:
            path.touch(mode=self.FILE_MODE, exist_ok=True)
            path.write_bytes(page.body)
        except OSError as exc:
            logger.exception("Failed to save page %r", page.title)
            raise PersistenceError(page.title, str(exc)) from exc
        logger.info("Saved page %r (%d bytes)", page.title, len(page.body))
