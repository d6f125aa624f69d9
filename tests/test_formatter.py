"""Tests for report rendering."""

import json

from goimpfmt.diff import diff
from goimpfmt.formatter import (
    ColorFormatter, PlainFormatter, format_json, format_pretty, get_formatter,
)
from goimpfmt.types import DiffLine, FileReport


def _script():
    return diff(["import (", '\t"os"', '\t"fmt"', ")"], ["import (", '\t"fmt"', '\t"os"', ")"])


class TestDiffFormatters:

    def test_get_formatter(self):
        assert isinstance(get_formatter(True), ColorFormatter)
        assert isinstance(get_formatter(False), PlainFormatter)

    def test_plain_lines(self):
        formatter = PlainFormatter()
        assert formatter.format_line(DiffLine("same", "a")) == "  a"
        assert formatter.format_line(DiffLine("added", "a")) == "+ a"
        assert formatter.format_line(DiffLine("removed", "a")) == "- a"

    def test_plain_report(self):
        out = PlainFormatter().format("main.go", _script())
        lines = out.split("\n")
        assert lines[0] == "==> main.go"
        assert lines[1] == "  import ("
        assert lines[-1] == "    1 added, 1 removed"
        assert "\033[" not in out

    def test_color_lines(self):
        formatter = ColorFormatter()
        assert formatter.format_line(DiffLine("added", "a")) == f"{ColorFormatter.GREEN}+ a{ColorFormatter.RESET}"
        assert formatter.format_line(DiffLine("removed", "a")) == f"{ColorFormatter.RED}- a{ColorFormatter.RESET}"
        assert formatter.format_line(DiffLine("same", "a")) == "  a"


class TestRunReports:

    def setup_method(self):
        self.reports = [
            FileReport(path="a.go", edit_script=_script(), written=True),
            FileReport(path="b.go", edit_script=diff(["x"], ["x"])),
            FileReport(path="c.go"),
            FileReport(path="d.go", error="Permission denied"),
        ]

    def test_pretty(self):
        out = format_pretty(self.reports, color=False)
        assert "==> a.go" in out
        assert "==> b.go" not in out
        assert "error: d.go: Permission denied" in out
        assert out.endswith("Scanned 4 files, 1 changed, 1 errors")

    def test_pretty_dry_run(self):
        out = format_pretty(self.reports, color=False, dry_run=True)
        assert out.endswith("Scanned 4 files, 1 would change, 1 errors")

    def test_json(self):
        document = json.loads(format_json(self.reports))
        assert document["files_scanned"] == 4
        assert document["files_changed"] == 1
        assert document["errors"] == [{"path": "d.go", "error": "Permission denied"}]

        by_path = {f["path"]: f for f in document["files"]}
        assert set(by_path) == {"a.go", "b.go", "c.go", "d.go"}
        assert by_path["a.go"]["changed"] is True
        assert by_path["a.go"]["written"] is True
        assert by_path["a.go"]["error"] is None
        assert by_path["a.go"]["distance"] == 2
        assert by_path["a.go"]["diff"][0] == {"tag": "same", "text": "import ("}
        assert by_path["c.go"]["diff"] == []
        assert by_path["d.go"]["error"] == "Permission denied"

    def test_json_counts_match_listed_files(self):
        reports = [
            FileReport(path="a.go", edit_script=_script(), written=True),
            FileReport(path="w.go", edit_script=_script(), error="Read-only file system"),
        ]
        document = json.loads(format_json(reports))
        changed = [f for f in document["files"] if f["changed"]]
        assert document["files_changed"] == len(changed) == 2
        assert changed[1]["path"] == "w.go"
        assert changed[1]["written"] is False
        assert changed[1]["error"] == "Read-only file system"
