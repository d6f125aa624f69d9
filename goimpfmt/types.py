"""
Core types for the goimpfmt import formatter.

This module provides the shared dataclasses used by the parser, renderer,
diff engine and file orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import List, Literal, Optional, Union


# Type aliases for clarity
DiffTag = Literal["same", "added", "removed"]

IMPORT_KEYWORD = "import"
IMPORT_OPEN = "import ("
IMPORT_CLOSE = ")"
COMMENT_MARKER = "//"

# Opening and closing delimiter lines of a grouped block
IMPORT_WRAP_LEN = 2


class Category(Enum):
    """Classification of an import path."""
    BUILTIN = "builtin"
    EXTERNAL = "external"
    LOCAL = "local"


@total_ordering
@dataclass(eq=False)
class Entry:
    """One import declaration inside a grouped import block.

    Attributes:
        prefix: Leading whitespace exactly as found in the source line
        path: Quoted path literal, quotes included; the sort key
        alias: Optional identifier written before the path
        comment: Optional ``//`` lines found right above the entry
    """
    prefix: str
    path: str
    alias: Optional[str] = None
    comment: Optional[str] = None

    def __eq__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.path == other.path

    def __lt__(self, other):
        if not isinstance(other, Entry):
            return NotImplemented
        return self.path < other.path

    def __hash__(self):
        return hash(self.path)

    def to_text(self) -> str:
        """Rebuild the source text of the entry, comment included."""
        out = self.prefix
        if self.alias is not None:
            out += self.alias + " "
        out += self.path
        if self.comment is not None:
            return f"{self.comment}\n{out}"
        return out

    def __str__(self):
        return self.to_text()


Group = List[Entry]


@dataclass(frozen=True)
class SingleImport:
    """A one-line ``import "path"`` declaration, kept verbatim."""
    line: str

    def lines_occupied(self) -> int:
        return 1


@dataclass
class GroupedImports:
    """A parenthesized import block split into its three categories."""
    builtin: Group = field(default_factory=list)
    external: Group = field(default_factory=list)
    local: Group = field(default_factory=list)
    # Blank and comment lines consumed while parsing
    blank_lines: int = 0

    def group(self, category: Category) -> Group:
        if category is Category.BUILTIN:
            return self.builtin
        if category is Category.LOCAL:
            return self.local
        return self.external

    def lines_occupied(self) -> int:
        """Number of source lines the block spans, delimiters included."""
        return self.entry_count + self.blank_lines + IMPORT_WRAP_LEN

    @property
    def entry_count(self) -> int:
        return len(self.builtin) + len(self.external) + len(self.local)


ImportBlock = Union[SingleImport, GroupedImports]


@dataclass(frozen=True)
class DiffLine:
    """A single line of an edit script."""
    tag: DiffTag
    text: str


@dataclass(frozen=True)
class EditScript:
    """Line-aligned difference between two line sequences.

    ``distance`` counts edit operations, one per maximal run of consecutive
    lines sharing the same ``added`` or ``removed`` tag. It is zero exactly
    when both sequences are equal.
    """
    lines: List[DiffLine]
    distance: int

    @property
    def added(self) -> int:
        return sum(1 for line in self.lines if line.tag == "added")

    @property
    def removed(self) -> int:
        return sum(1 for line in self.lines if line.tag == "removed")

    @property
    def changed(self) -> bool:
        return self.distance > 0

    def __iter__(self):
        return iter(self.lines)

    def __len__(self):
        return len(self.lines)


@dataclass(frozen=True)
class FormatResult:
    """Outcome of formatting one file's text."""
    text: str
    edit_script: EditScript

    @property
    def changed(self) -> bool:
        return self.edit_script.changed


@dataclass
class FileReport:
    """Per-path outcome of a formatting run."""
    path: str
    edit_script: Optional[EditScript] = None
    error: Optional[str] = None
    written: bool = False

    @property
    def changed(self) -> bool:
        return self.edit_script is not None and self.edit_script.changed
