"""
Report formatting for goimpfmt.

Renders edit scripts as plain or ANSI-coloured text, and whole runs as a
human-readable summary or a JSON document.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import json

from .types import DiffLine, EditScript, FileReport

REPORT_VERSION = "1"

MARKERS = {
    "same": "  ",
    "added": "+ ",
    "removed": "- ",
}


class DiffFormatter(ABC):
    """Abstract base class for edit script renderers."""

    @abstractmethod
    def format_line(self, line: DiffLine) -> str:
        """Render a single diff line."""
        pass

    @abstractmethod
    def format_header(self, path: str) -> str:
        pass

    def format(self, path: str, script: EditScript) -> str:
        """Render the header, every diff line and a change summary."""
        out = [self.format_header(path)]
        out.extend(self.format_line(line) for line in script)
        out.append(format_summary(script))
        return "\n".join(out)


class PlainFormatter(DiffFormatter):
    """Uncoloured output, suitable for logs and pipes."""

    def format_line(self, line: DiffLine) -> str:
        return f"{MARKERS[line.tag]}{line.text}"

    def format_header(self, path: str) -> str:
        return f"==> {path}"


class ColorFormatter(DiffFormatter):
    """ANSI coloured output for terminals."""

    # Color constants
    RESET = '\033[0m'
    BOLD = '\033[1m'
    GREEN = '\033[92m'
    RED = '\033[91m'
    BLUE = '\033[94m'

    COLORS = {
        "added": GREEN,
        "removed": RED,
    }

    def format_line(self, line: DiffLine) -> str:
        text = f"{MARKERS[line.tag]}{line.text}"
        color = self.COLORS.get(line.tag)
        if color is None:
            return text
        return f"{color}{text}{self.RESET}"

    def format_header(self, path: str) -> str:
        return f"{self.BOLD}{self.BLUE}==> {path}{self.RESET}"


def get_formatter(color: bool) -> DiffFormatter:
    """Get the diff renderer for the requested colour mode."""
    if color:
        return ColorFormatter()
    return PlainFormatter()


def format_summary(script: EditScript) -> str:
    return f"    {script.added} added, {script.removed} removed"


def format_pretty(reports: List[FileReport], color: bool = True, dry_run: bool = False) -> str:
    """
    Render a run as human-readable text.

    Every changed file gets its diff; errors are listed after the diffs and
    a final line sums up the run.
    """
    formatter = get_formatter(color)
    lines = []

    changed = [r for r in reports if r.changed]
    for report in changed:
        lines.append(formatter.format(report.path, report.edit_script))
        lines.append("")

    errors = [r for r in reports if r.error]
    for report in errors:
        lines.append(f"error: {report.path}: {report.error}")

    verb = "would change" if dry_run else "changed"
    lines.append(f"Scanned {len(reports)} files, {len(changed)} {verb}, {len(errors)} errors")
    return "\n".join(lines)


def report_to_dict(report: FileReport) -> Dict[str, Any]:
    script = report.edit_script
    return {
        "path": report.path,
        "changed": report.changed,
        "written": report.written,
        "distance": script.distance if script else 0,
        "added": script.added if script else 0,
        "removed": script.removed if script else 0,
        "diff": [{"tag": line.tag, "text": line.text} for line in script] if script else [],
        "error": report.error,
    }


def format_json(reports: List[FileReport], dry_run: bool = False) -> str:
    """Render a run as a JSON document."""
    document = {
        "version": REPORT_VERSION,
        "dry_run": dry_run,
        "files_scanned": len(reports),
        "files_changed": sum(1 for r in reports if r.changed),
        "files": [report_to_dict(r) for r in reports],
        "errors": [{"path": r.path, "error": r.error} for r in reports if r.error],
    }
    return json.dumps(document, indent=2)
