"""Data models for QuickNotes."""

from pydantic import BaseModel, Field


class Page(BaseModel):
    """A note: a title plus the raw bytes stored under it."""

    title: str = Field(min_length=1)
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display. Storage never uses this."""
        return self.body.decode("utf-8", errors="replace")


class ListPageInfo(BaseModel):
    """Listing projection rebuilt on every request.

    Pages are stubs: only the title is set.
    """

    page_title: str
    pages: list[Page] = Field(default_factory=list)
