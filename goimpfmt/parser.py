"""
Import block parsing.

Turns the lines of an import declaration into an ``ImportBlock``: either a
verbatim single-line import, or the three category groups of a
parenthesized block together with the count of blank and comment lines
that were consumed.
"""

import logging
from typing import List, Optional, Sequence

from .matcher import Matcher
from .types import (
    Category, Entry, GroupedImports, ImportBlock, SingleImport,
    COMMENT_MARKER, IMPORT_CLOSE, IMPORT_OPEN,
)

logger = logging.getLogger(__name__)


def whitespace_prefix(line: str) -> str:
    """Return the leading run of spaces and tabs of a line."""
    for i, c in enumerate(line):
        if c != ' ' and c != '\t':
            return line[:i]
    return ""


def parse_entry(line: str) -> Entry:
    """
    Parse one raw import line into an Entry.

    ``json "github.com/x/json"`` yields alias ``json``; a line with a single
    token has no alias and the whole token is the path. An empty line
    yields an entry with an empty path rather than failing.
    """
    prefix = whitespace_prefix(line)
    tokens = line.strip().split(" ", 1)
    if len(tokens) > 1:
        return Entry(prefix=prefix, alias=tokens[0], path=tokens[1])
    return Entry(prefix=prefix, path=tokens[0])


class ImportBlockParser:
    """Line-by-line state machine over a grouped import block."""

    def __init__(self, matcher: Matcher):
        self.matcher = matcher
        self.block = GroupedImports()
        self.comment: Optional[str] = None

    def feed(self, line: str) -> None:
        """Consume one line found between the block delimiters."""
        if line.strip().startswith(COMMENT_MARKER):
            self._parse_comment(line)
        else:
            self._parse_import(line)

    def finish(self) -> GroupedImports:
        if self.comment is not None:
            logger.debug(f"Dropping comment with no import after it: {self.comment!r}")
            self.comment = None
        return self.block

    def _parse_comment(self, line: str) -> None:
        self.block.blank_lines += 1
        if self.comment is None:
            self.comment = line
        else:
            self.comment = f"{self.comment}\n{line}"

    def _parse_import(self, line: str) -> None:
        entry = parse_entry(line)
        if self.comment is not None:
            entry.comment = self.comment
            self.comment = None

        # Classify the raw line so alias placement cannot affect the match
        category = self.matcher.classify(line)
        if category is Category.BUILTIN and not line.strip():
            self.block.blank_lines += 1
            return
        self.block.group(category).append(entry)


def parse_block(lines: Sequence[str], matcher: Matcher) -> ImportBlock:
    """
    Parse an import declaration starting at its ``import`` line.

    Args:
        lines: Source lines, the first one being the import keyword line
        matcher: Classifier for import paths

    Returns:
        SingleImport for the one-line form, GroupedImports otherwise
    """
    if not lines:
        raise ValueError("parse_block needs at least the import line")

    if lines[0] != IMPORT_OPEN:
        return SingleImport(lines[0])

    parser = ImportBlockParser(matcher)
    for line in lines[1:]:
        if line == IMPORT_CLOSE:
            break
        parser.feed(line)
    else:
        logger.debug("Import block has no closing delimiter, using the lines available")

    return parser.finish()


def parse_text(text: str, matcher: Matcher) -> ImportBlock:
    """Convenience wrapper parsing a block given as one string."""
    lines: List[str] = text.split('\n')
    return parse_block(lines, matcher)
