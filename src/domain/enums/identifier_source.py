"""Request locations a resource owner identifier can be read from."""

from enum import Enum


class IdentifierSource(str, Enum):
    """Where to look for an owner identifier in a request."""

    PATH = "path"
    BODY = "body"
    QUERY = "query"


DEFAULT_IDENTIFIER_SOURCES: tuple[IdentifierSource, ...] = (
    IdentifierSource.PATH,
    IdentifierSource.BODY,
    IdentifierSource.QUERY,
)
"""Default lookup priority: path parameter, then body field, then query."""
