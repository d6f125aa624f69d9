"""
goimpfmt package.

Groups and sorts the import blocks of Go source files into standard
library, project and third-party sections.
"""

__version__ = "0.2.0"

from .types import (
    Category, Entry, Group, SingleImport, GroupedImports, ImportBlock,
    DiffLine, EditScript, FormatResult, FileReport
)

from .matcher import Matcher

from .parser import parse_entry, parse_block

from .renderer import render

from .diff import diff

from .gofile import process, GoFile

from .config import (
    FormatterConfig, load_config, save_config, find_config_file
)

__all__ = [
    # Types
    "Category", "Entry", "Group", "SingleImport", "GroupedImports", "ImportBlock",
    "DiffLine", "EditScript", "FormatResult", "FileReport",

    # Core
    "Matcher", "parse_entry", "parse_block", "render", "diff", "process", "GoFile",

    # Config
    "FormatterConfig", "load_config", "save_config", "find_config_file",
]
