"""Request path validation."""

import logging
import re

from fastapi import Request

from flatwiki.core.errors import InvalidTitleError

logger = logging.getLogger(__name__)

# The title is the second group. Alphanumeric only, so a title can never
# reach the filesystem as anything but a plain file name.
VALID_PATH = re.compile(r"^/(edit|save|view)/([a-zA-Z0-9]+)$")


def extract_title(path: str) -> str:
    """Return the page title from a request path.

    Raises:
        InvalidTitleError: If the path is not ``/<verb>/<alphanumeric title>``.
    """
    m = VALID_PATH.fullmatch(path)
    if m is None:
        logger.warning("Rejected request path %r", path)
        raise InvalidTitleError(path)
    return m.group(2)


def page_title(request: Request) -> str:
    """FastAPI dependency resolving the page title of the current request."""
    return extract_title(request.scope["path"])
