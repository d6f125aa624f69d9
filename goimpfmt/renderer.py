"""
Canonical rendering of parsed import blocks.

Groups are written in the fixed order builtin, local, external, each one
sorted by path and separated from the previous non-empty group by a single
blank line.
"""

from typing import Iterable, List

from .types import Entry, ImportBlock, SingleImport, IMPORT_CLOSE, IMPORT_OPEN


class BlockWriter:
    """Accumulates sorted groups between the block delimiters."""

    def __init__(self, header: str = IMPORT_OPEN + "\n"):
        self.out = header
        self.previous = False

    def push(self, group: Iterable[Entry]) -> "BlockWriter":
        entries = sorted(group)
        if not entries:
            return self
        if self.previous:
            self.out += "\n"

        for entry in entries:
            self.out += entry.to_text()
            self.out += "\n"

        self.previous = True
        return self

    def build(self) -> str:
        return self.out + IMPORT_CLOSE


def render(block: ImportBlock) -> str:
    """Return the canonical text of an import block."""
    if isinstance(block, SingleImport):
        return block.line

    return (
        BlockWriter()
        .push(block.builtin)
        .push(block.local)
        .push(block.external)
        .build()
    )


def render_lines(block: ImportBlock) -> List[str]:
    return render(block).split("\n")

