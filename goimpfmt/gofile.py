"""
File-level import formatting.

Locates the first import declaration of a file, replaces it with its
canonical rendering and diffs the old block against the new one. The rest
of the file is treated as an opaque sequence of lines.
"""

import logging
from typing import List, Optional

from .diff import diff
from .matcher import Matcher
from .parser import parse_block
from .renderer import render_lines
from .types import FormatResult, EditScript, IMPORT_KEYWORD

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split on newlines, ignoring the empty tail left by a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def find_import_line(lines: List[str]) -> Optional[int]:
    """Index of the first line opening an import declaration, if any."""
    for i, line in enumerate(lines):
        if len(line) > len(IMPORT_KEYWORD) and line.startswith(IMPORT_KEYWORD):
            return i
    return None


def process(text: str, matcher: Matcher) -> Optional[FormatResult]:
    """
    Format the first import block of a file.

    Args:
        text: Full file content
        matcher: Classifier built from the project prefixes

    Returns:
        FormatResult with the rewritten file text and the block diff, or
        None when the file has no import declaration
    """
    lines = split_lines(text)
    start = find_import_line(lines)
    if start is None:
        return None

    block = parse_block(lines[start:], matcher)
    end = start + block.lines_occupied()

    original_block = lines[start:end]
    canonical_block = render_lines(block)

    output = lines[:start] + canonical_block + lines[end:]
    return FormatResult(
        text="\n".join(output) + "\n",
        edit_script=diff(original_block, canonical_block),
    )


class GoFile:
    """A source file on disk together with its formatting result."""

    def __init__(self, path: str, original: str, result: Optional[FormatResult]):
        self.path = path
        self.original = original
        self.result = result

    @classmethod
    def load(cls, path: str, matcher: Matcher) -> "GoFile":
        """Read and format a file. Raises OSError/UnicodeDecodeError on read failure."""
        with open(path, 'r', encoding='utf-8') as f:
            original = f.read()
        result = process(original, matcher)
        if result is None:
            logger.debug(f"No import declaration in {path}")
        return cls(path, original, result)

    @property
    def changed(self) -> bool:
        return self.result is not None and self.result.changed

    @property
    def output(self) -> str:
        if self.result is None:
            return self.original
        return self.result.text

    @property
    def edit_script(self) -> Optional[EditScript]:
        if self.result is None:
            return None
        return self.result.edit_script

    def write(self) -> None:
        """Persist the formatted text. Raises OSError on write failure."""
        with open(self.path, 'w', encoding='utf-8') as f:
            f.write(self.output)
        logger.info(f"Rewrote imports in {self.path}")
