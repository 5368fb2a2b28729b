"""Data models for FlatWiki."""

from pydantic import BaseModel, Field

TITLE_PATTERN = r"^[a-zA-Z0-9]+$"


class Page(BaseModel):
    """A wiki page: an alphanumeric title and its raw body bytes."""

    title: str = Field(pattern=TITLE_PATTERN)
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded for display."""
        return self.body.decode("utf-8", errors="replace")
