from typing import Annotated

from markupsafe import escape
from pydantic import AfterValidator


def sanitize_text(content: str | None) -> str | None:
    """
    Escape HTML and trim surrounding whitespace.
    :param content: Raw user input
    :return: Sanitized content, None stays None
    """
    if content is None:
        return content
    return str(escape(content)).strip()


def sanitize_username(name: str) -> str:
    """
    Sanitize username
    :param name: Raw user input
    :return: Sanitized username
    """
    return str(escape(name)).strip()


SanitizedString = Annotated[str, AfterValidator(sanitize_text)]
SanitizedOptionalString = Annotated[str | None, AfterValidator(sanitize_text)]
SanitizedUsername = Annotated[str, AfterValidator(sanitize_username)]
