"""Storage abstraction for notes."""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from quicknotes.core.errors import PageNotFoundError, PageStorageError
from quicknotes.core.models import Page

logger = logging.getLogger(__name__)


class Storage(ABC):
    """Abstract base class for page storage."""

    @abstractmethod
    def get_page(self, title: str) -> Page:
        """Get a page by title. Raises PageNotFoundError if it cannot be read."""
        ...

    @abstractmethod
    def save_page(self, page: Page) -> Page:
        """Save a page. Creates it if it doesn't exist, overwrites otherwise."""
        ...

    @abstractmethod
    def list_pages(self) -> list[Page]:
        """List all pages as title-only stubs. Never raises."""
        ...


class FileStorage(Storage):
    """File-based storage implementation.

    Each page is ``<base_path>/<title>.txt`` holding the raw body bytes,
    with no header or encoding step. The directory is created on the
    first save, not here.

    Titles are used as filenames unchanged; callers pass titles that
    went through ``quicknotes.core.titles``.
    """

    SUFFIX = ".txt"

    def __init__(self, base_path: Path):
        self.base_path = Path(base_path)

    def _title_to_filename(self, title: str) -> str:
        return title + self.SUFFIX

    def _filename_to_title(self, filename: str) -> str:
        return filename.removesuffix(self.SUFFIX)

    def _get_path(self, title: str) -> Path:
        """Get full path for a page."""
        return self.base_path / self._title_to_filename(title)

    def get_page(self, title: str) -> Page:
        """Read a page from disk.

        Missing and unreadable files both raise PageNotFoundError.
        """
        path = self._get_path(title)
        try:
            body = path.read_bytes()
        except OSError as exc:
            raise PageNotFoundError(title) from exc
        return Page(title=title, body=body)

    def save_page(self, page: Page) -> Page:
        """Write a page, replacing any existing body."""
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PageStorageError(
                page.title, f"failed to create directory {self.base_path}"
            ) from exc

        path = self._get_path(page.title)
        try:
            path.write_bytes(page.body)
        except OSError as exc:
            raise PageStorageError(page.title, f"failed to write {path}") from exc

        logger.info("Saved page %s (%d bytes)", page.title, len(page.body))
        return page

    def list_pages(self) -> list[Page]:
        """List pages in directory order.

        Subdirectories and files without the .txt suffix are skipped.
        An unreadable or missing directory gives an empty list.
        """
        pages = []
        try:
            with os.scandir(self.base_path) as entries:
                for entry in entries:
                    if entry.is_dir():
                        continue
                    if not entry.name.endswith(self.SUFFIX):
                        continue
                    title = self._filename_to_title(entry.name)
                    if title:
                        pages.append(Page(title=title))
        except OSError as exc:
            logger.warning("Failed to list pages in %s: %s", self.base_path, exc)
            return []
        return pages
