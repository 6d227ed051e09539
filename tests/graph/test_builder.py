"""Tests for converting edge-list text into a Graph."""

from __future__ import annotations

import io
from typing import Iterator

import pytest

from mvsgraph.errors import FormatError
from mvsgraph.graph import Edge, GraphBuilder, convert, convert_stream, convert_text

SCENARIO = "root pkgA@1.0.0\nroot pkgB@1.0.0\npkgA@1.0.0 pkgB@2.0.0\n"


def test_scenario_picks_and_unpicks() -> None:
    """Reference scenario: pkgB@1.0.0 is demoted once 2.0.0 is observed."""
    graph = convert_text(SCENARIO)

    assert graph.root == "root"
    assert len(graph.edges) == 3
    assert graph.picked == ("pkgA@1.0.0", "pkgB@2.0.0")
    assert graph.unpicked == ("pkgB@1.0.0",)


def test_edges_preserve_order_and_duplicates() -> None:
    """Repeated edges are kept, in input order."""
    graph = convert(["a b@v1", "a c@v1", "a b@v1"])

    assert [(e.from_, e.to) for e in graph.edges] == [
        ("a", "b@v1"),
        ("a", "c@v1"),
        ("a", "b@v1"),
    ]


def test_empty_lines_are_skipped() -> None:
    """Lines with no characters produce no edge."""
    graph = convert_text("\nroot m@v1.0.0\n\n\nm@v1.0.0 n@v1.0.0\n")

    assert len(graph.edges) == 2


def test_fields_split_on_any_whitespace() -> None:
    """Tokens may be separated by runs of spaces or tabs."""
    graph = convert_text("root \t  m@v1.0.0\r\n")

    assert graph.edges == (Edge(from_="root", to="m@v1.0.0"),)


@pytest.mark.parametrize(
    "line, count",
    [("a b c", 3), ("a", 1), ("   ", 0)],
)
def test_malformed_line_raises(line: str, count: int) -> None:
    """A non-empty line without exactly two tokens is a FormatError."""
    text = f"root m@v1.0.0\n{line}\nroot n@v1.0.0\n"

    with pytest.raises(FormatError) as excinfo:
        convert_text(text)

    err = excinfo.value
    assert err.line_number == 2
    assert err.token_count == count
    assert err.line == line
    assert f"got {count}" in str(err)


def test_format_error_is_value_error() -> None:
    """FormatError can be handled as a ValueError."""
    with pytest.raises(ValueError):
        convert_text("just-one-token\n")


def test_read_error_propagates() -> None:
    """Failures from the line source are not turned into FormatError."""

    def failing_lines() -> Iterator[str]:
        yield "root m@v1.0.0\n"
        raise OSError("read failed")

    with pytest.raises(OSError, match="read failed"):
        convert(failing_lines())


def test_convert_stream_reads_file_like_objects() -> None:
    """Text streams are consumed line by line."""
    graph = convert_stream(io.StringIO(SCENARIO))

    assert graph.picked == ("pkgA@1.0.0", "pkgB@2.0.0")


def test_empty_input_has_no_root() -> None:
    """Empty input yields an empty graph with no root."""
    graph = convert_text("")

    assert graph.root == ""
    assert graph.edges == ()
    assert graph.picked == ()


def test_explicit_root_skips_foreign_bare_nodes() -> None:
    """With an explicit root, edges through other bare nodes are dropped."""
    text = "app m@v1.0.0\ntool m@v2.0.0\nm@v1.0.0 n@v1.0.0\n"

    graph = convert_text(text, root="app")

    assert graph.root == "app"
    assert len(graph.edges) == 2
    assert graph.picked == ("m@v1.0.0", "n@v1.0.0")
    assert graph.unpicked == ()


def test_inferred_root_ignores_later_bare_nodes() -> None:
    """Later bare nodes neither replace the root nor get classified."""
    graph = convert_text("app m@v1.0.0\ntool m@v2.0.0\n")

    assert graph.root == "app"
    assert len(graph.edges) == 2
    assert graph.picked == ("m@v2.0.0",)
    assert graph.unpicked == ("m@v1.0.0",)


def test_builder_counts_lines() -> None:
    """The incremental builder tracks lines consumed."""
    builder = GraphBuilder()
    builder.feed_line("root m@v1.0.0\n")
    builder.feed_line("\n")

    assert builder.line_count == 2
    assert len(builder.build().edges) == 1


GO_MOD_GRAPH = """\
example.com/app github.com/pkg/errors@v0.9.1
example.com/app golang.org/x/text@v0.3.0
example.com/app go@1.21
github.com/pkg/errors@v0.9.1 golang.org/x/text@v0.14.0
golang.org/x/text@v0.14.0 golang.org/x/tools@v0.1.12
golang.org/x/text@v0.3.0 golang.org/x/tools@v0.1.9
golang.org/x/text@v0.14.0 go@1.18
golang.org/x/tools@v0.1.12 golang.org/x/text@v0.3.0
"""


def _distinct_versioned(text: str) -> set:
    nodes = set()
    for line in text.splitlines():
        for token in line.split():
            if "@" in token:
                nodes.add(token)
    return nodes


def test_realistic_graph_properties() -> None:
    """Picked and unpicked partition the versioned nodes; picks are maximal."""
    graph = convert_text(GO_MOD_GRAPH)

    assert graph.root == "example.com/app"
    assert len(graph.edges) == len(GO_MOD_GRAPH.splitlines())

    picked = set(graph.picked)
    unpicked = set(graph.unpicked)
    assert picked.isdisjoint(unpicked)
    assert picked | unpicked == _distinct_versioned(GO_MOD_GRAPH)

    assert graph.picked == (
        "github.com/pkg/errors@v0.9.1",
        "go@1.21",
        "golang.org/x/text@v0.14.0",
        "golang.org/x/tools@v0.1.12",
    )
    assert graph.unpicked == (
        "golang.org/x/text@v0.3.0",
        "golang.org/x/tools@v0.1.9",
        "go@1.18",
    )


def test_duplicate_order_does_not_change_selection() -> None:
    """Reordering lines changes unpicked order at most, never content."""
    lines = GO_MOD_GRAPH.splitlines()
    forward = convert(lines)
    backward = convert(list(reversed(lines)))

    assert forward.picked == backward.picked
    assert sorted(forward.unpicked) == sorted(backward.unpicked)
