"""Facet filters for search requests.

A filter is a set of ``(key, value)`` constraints decoded from repeated
``f`` query parameters. Each parameter is a ``key:value`` token, split on
the first colon, so values may contain colons themselves::

    f=type:pdf&f=server:ftp.example.org&f=type:iso

Tokens that do not decode to a valid pair are dropped. Decoding never
fails the request.
"""

import logging
import re
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)

TOKEN_SEPARATOR = ":"
KEY_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.]*$")


def parse_token(token: str) -> tuple[str, str] | None:
    """Decode a single ``key:value`` token, or return None if it is malformed."""
    if not isinstance(token, str) or TOKEN_SEPARATOR not in token:
        return None

    key, value = token.split(TOKEN_SEPARATOR, 1)
    key = key.strip()
    value = value.strip()
    if not KEY_PATTERN.match(key) or not value:
        return None
    return key, value


class Filter:
    """Immutable, order-independent set of facet constraints."""

    __slots__ = ("_constraints",)

    def __init__(self, constraints: Iterable[tuple[str, str]] = ()):
        self._constraints = frozenset(constraints)

    @classmethod
    def decode(cls, tokens: Iterable[str]) -> "Filter":
        """Build a filter from string tokens, dropping malformed ones."""
        constraints = []
        for token in tokens:
            pair = parse_token(token)
            if pair is None:
                logger.debug(f"Ignoring malformed filter token: {token!r}")
                continue
            constraints.append(pair)
        return cls(constraints)

    def encode(self) -> list[str]:
        """Return the sorted ``key:value`` tokens for this filter."""
        return [f"{key}{TOKEN_SEPARATOR}{value}" for key, value in self]

    def keys(self) -> list[str]:
        return sorted({key for key, _ in self._constraints})

    def values_for(self, key: str) -> list[str]:
        return sorted(value for k, value in self._constraints if k == key)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(sorted(self._constraints))

    def __len__(self) -> int:
        return len(self._constraints)

    def __contains__(self, item) -> bool:
        return item in self._constraints

    def __eq__(self, other) -> bool:
        if not isinstance(other, Filter):
            return NotImplemented
        return self._constraints == other._constraints

    def __hash__(self) -> int:
        return hash(self._constraints)

    def __repr__(self) -> str:
        return f"Filter({self.encode()!r})"
