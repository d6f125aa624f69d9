"""Tests for canonical rendering of import blocks."""

import pytest

from goimpfmt.matcher import Matcher
from goimpfmt.parser import parse_block
from goimpfmt.renderer import BlockWriter, render, render_lines
from goimpfmt.types import Entry, GroupedImports, SingleImport


def _render(text: str, prefixes: str = "github.com/vendor/api") -> str:
    return render(parse_block(text.split("\n"), Matcher(prefixes)))


class TestRender:
    """Test cases for grouping, sorting and spacing."""

    def test_single_import_unchanged(self):
        assert render(SingleImport('import "os"')) == 'import "os"'

    def test_simple_block_unchanged(self):
        text = 'import (\n\t"os"\n)'
        assert _render(text) == text

    def test_regroup_and_sort(self):
        text = "\n".join([
            "import (",
            '  "github.com/vendor/api/x"',
            '  "os"',
            "  // This is something",
            '  "github.com/vendor/tools/y"',
            '  "github.com/me/project"',
            ")",
        ])
        expected = "\n".join([
            "import (",
            '  "os"',
            "",
            '  "github.com/vendor/api/x"',
            "",
            '  "github.com/me/project"',
            "  // This is something",
            '  "github.com/vendor/tools/y"',
            ")",
        ])
        assert _render(text) == expected

    def test_two_prefixes_share_local_group(self):
        text = "\n".join([
            "import (",
            '\t"github.com/third/z"',
            '\t"github.com/other/lib"',
            '\t"github.com/vendor/api/x"',
            ")",
        ])
        expected = "\n".join([
            "import (",
            '\t"github.com/other/lib"',
            '\t"github.com/vendor/api/x"',
            "",
            '\t"github.com/third/z"',
            ")",
        ])
        assert _render(text, "github.com/vendor/api,github.com/other") == expected

    def test_alias_is_reemitted(self):
        text = 'import (\n\tkafka "github.com/vendor/api/kafka"\n\t"fmt"\n)'
        expected = 'import (\n\t"fmt"\n\n\tkafka "github.com/vendor/api/kafka"\n)'
        assert _render(text) == expected

    def test_sort_uses_path_not_alias(self):
        text = 'import (\n\tz "github.com/a/a"\n\ta "github.com/b/b"\n)'
        expected = 'import (\n\tz "github.com/a/a"\n\ta "github.com/b/b"\n)'
        assert _render(text, "none.example/x") == expected

    def test_blank_lines_are_normalized(self):
        text = 'import (\n\n\t"os"\n\n\n\t"fmt"\n\n)'
        assert _render(text) == 'import (\n\t"fmt"\n\t"os"\n)'

    def test_empty_block(self):
        assert _render("import (\n)") == "import (\n)"

    @pytest.mark.parametrize("text", [
        'import (\n\t"fmt"\n\t"os"\n)',
        'import (\n\t"os"\n\n\t"github.com/vendor/api/x"\n)',
        'import (\n\t"github.com/vendor/api/x"\n\n\t"github.com/me/project"\n)',
        'import (\n\t"fmt"\n\n\t// why\n\tlog "github.com/sirupsen/logrus"\n)',
    ])
    def test_idempotent_on_canonical_blocks(self, text):
        assert _render(text) == text

    def test_group_order_and_sorting(self):
        text = "\n".join([
            "import (",
            '\t"github.com/zz/ext"',
            '\t"strings"',
            '\t"github.com/vendor/api/b"',
            '\t"github.com/aa/ext"',
            '\t"bytes"',
            '\t"github.com/vendor/api/a"',
            ")",
        ])
        lines = render_lines(parse_block(text.split("\n"), Matcher("github.com/vendor/api")))
        inner = lines[1:-1]
        groups = [[]]
        for line in inner:
            if line == "":
                groups.append([])
            else:
                groups[-1].append(line.strip())
        assert groups == [
            ['"bytes"', '"strings"'],
            ['"github.com/vendor/api/a"', '"github.com/vendor/api/b"'],
            ['"github.com/aa/ext"', '"github.com/zz/ext"'],
        ]
        for group in groups:
            assert group == sorted(group)


class TestBlockWriter:

    def test_skips_empty_groups(self):
        out = BlockWriter().push([]).push([Entry("\t", '"os"')]).push([]).build()
        assert out == 'import (\n\t"os"\n)'

    def test_does_not_mutate_group(self):
        group = [Entry("\t", '"os"'), Entry("\t", '"fmt"')]
        BlockWriter().push(group)
        assert [e.path for e in group] == ['"os"', '"fmt"']

    def test_grouped_block_without_local(self):
        block = GroupedImports(
            builtin=[Entry("\t", '"os"')],
            external=[Entry("\t", '"github.com/x/y"')],
        )
        assert render(block) == 'import (\n\t"os"\n\n\t"github.com/x/y"\n)'
