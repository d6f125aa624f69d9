"""
Import path classification.

An import path is *external* when it looks like a hostname-qualified path
(a segment containing a dot, followed later by a slash). External paths
that start with one of the configured project prefixes are *local*.
Everything else is *builtin* (standard library).
"""

import re
from typing import Iterable, List, Optional, Union

from .types import Category


# Hostname-style path: something.something/...
EXTERNAL_PATTERN = r".+\..+/"


def split_prefixes(value: Union[str, Iterable[str], None]) -> List[str]:
    """Normalize a comma-separated string or an iterable into a prefix list."""
    if value is None:
        return []
    if isinstance(value, str):
        items = value.split(",")
    else:
        items = list(value)
    return [item.strip() for item in items if item and item.strip()]


def build_local_pattern(prefixes: Iterable[str]) -> Optional[re.Pattern]:
    """Join project prefixes into one alternation, or None when empty."""
    escaped = [re.escape(prefix) for prefix in prefixes]
    if not escaped:
        return None
    return re.compile("|".join(escaped))


class Matcher:
    """Classifies raw import lines into builtin, external and local.

    The compiled patterns are never mutated after construction, so a single
    matcher can be shared by any number of threads.
    """

    def __init__(self, prefixes: Union[str, Iterable[str], None] = None):
        self.prefixes = tuple(split_prefixes(prefixes))
        self._external = re.compile(EXTERNAL_PATTERN)
        self._local = build_local_pattern(self.prefixes)

    @classmethod
    def from_prefixes(cls, prefixes: Union[str, Iterable[str], None]) -> "Matcher":
        return cls(prefixes)

    def is_external(self, line: str) -> bool:
        return self._external.search(line) is not None

    def is_local(self, line: str) -> bool:
        if self._local is None:
            return False
        return self._local.search(line) is not None

    def classify(self, line: str) -> Category:
        """Return the category of a raw, non-blank import line."""
        if not self.is_external(line):
            return Category.BUILTIN
        if self.is_local(line):
            return Category.LOCAL
        return Category.EXTERNAL

    def __repr__(self):
        return f"Matcher(prefixes={list(self.prefixes)!r})"
