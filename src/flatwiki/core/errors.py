"""Exceptions raised while serving wiki requests.

Each one ends the request it was raised in. The app maps them to
responses in ``flatwiki.main``:

    InvalidTitleError  -> 404
    PageNotFoundError  -> redirect to edit, or a blank page
    PersistenceError   -> 500 with the failure text
    RenderError        -> 500 with the failure text
    StartupError       -> import of the app fails
"""


class WikiError(Exception):
    """Base class for FlatWiki errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidTitleError(WikiError):
    """Request path does not name a valid page."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid page title in path {path!r}")


class PageNotFoundError(WikiError):
    """Page could not be read from storage."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(f"Page {title!r} not found")


class PersistenceError(WikiError):
    """Page could not be written to storage."""

    def __init__(self, title: str, reason: str):
        self.title = title
        super().__init__(reason)


class RenderError(WikiError):
    """Template could not be rendered."""

    def __init__(self, view: str, reason: str):
        self.view = view
        super().__init__(reason)


class StartupError(WikiError):
    """Templates could not be loaded when the app was created."""
