"""Resource owner identifier extraction.

Reads the id of the user owning a resource from request parameters, in a
configurable source priority (path > body > query by default), and
validates it as an integer before any ownership rule runs. A missing id and
a malformed id are reported as distinct 400-class failures so they are
never confused with a 403 denial.

Accepted values:
    - ``int`` (not ``bool``) as-is
    - ``str`` matching an optionally signed decimal integer after trimming

``None`` and blank strings count as absent and lookup continues with the
next candidate. Any other present value is malformed.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from src.core.result import Failure, Result, Success
from src.domain.enums import DEFAULT_IDENTIFIER_SOURCES, IdentifierSource
from src.domain.errors import AuthorizationError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, kw_only=True, slots=True)
class RequestParameters:
    """Transport-neutral view of a request's parameters.

    Attributes:
        path: Path parameters.
        body: Top-level fields of a JSON object body.
        query: Query string parameters.
    """

    path: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    body: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)
    query: Mapping[str, Any] = field(default_factory=lambda: _EMPTY)

    def source(self, source: IdentifierSource) -> Mapping[str, Any]:
        match source:
            case IdentifierSource.PATH:
                return self.path
            case IdentifierSource.BODY:
                return self.body
            case IdentifierSource.QUERY:
                return self.query


def extract_owner_id(
    params: RequestParameters,
    param_name: str,
    *,
    sources: Iterable[IdentifierSource] = DEFAULT_IDENTIFIER_SOURCES,
    aliases: Iterable[str] = (),
) -> Result[int, AuthorizationError]:
    """Find and parse the owner id named ``param_name``.

    Sources are searched in order; inside each source ``param_name`` is
    tried before ``aliases``. The first present value wins, even if it
    turns out to be malformed.

    Args:
        params: Request parameters.
        param_name: Primary parameter name, e.g. "userId".
        sources: Lookup priority.
        aliases: Alternative names, e.g. ("id",).

    Returns:
        Result[int, AuthorizationError]:
            - Success(value=owner_id)
            - Failure(MISSING_RESOURCE_IDENTIFIER) if nothing was found
            - Failure(MALFORMED_RESOURCE_IDENTIFIER) if the value is not an integer
    """
    names = (param_name, *aliases)
    for source in sources:
        values = params.source(IdentifierSource(source))
        for name in names:
            raw = values.get(name)
            if _is_absent(raw):
                continue
            owner_id = parse_identifier(raw)
            if owner_id is None:
                return Failure(error=AuthorizationError.malformed_identifier(name))
            return Success(value=owner_id)
    return Failure(error=AuthorizationError.missing_identifier(param_name))


def parse_identifier(raw: Any) -> int | None:
    """Parse ``raw`` as an integer id, None when it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # Over the interpreter's int string conversion limit
                return None
    return None


def _is_absent(raw: Any) -> bool:
    return raw is None or (isinstance(raw, str) and not raw.strip())
