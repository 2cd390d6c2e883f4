"""Decode delimiter-separated pair lines into graph edges."""
import logging
from typing import Iterable

from topsort.core.dependency_graph import DependencyGraph
from topsort.core.errors import InvalidSeparatorError, ParseError

DEFAULT_EDGE_SEP = "-"
DEFAULT_PAIR_SEP = ","


def check_separators(edge_sep: str, pair_sep: str) -> None:
    if not pair_sep:
        raise InvalidSeparatorError("pair")
    if not edge_sep:
        raise InvalidSeparatorError("edge")


def parse_line(graph: DependencyGraph, edge_sep: str, pair_sep: str, line: str, line_no: int = 1) -> None:
    """Register every pair-token of one line.

    ``A-B`` adds the edge A -> B, a bare ``F`` adds an isolated node. Only the
    first ``edge_sep`` splits a token, so ``A-B-C`` is the edge A -> "B-C".
    Tokens are taken verbatim, whitespace included.
    """
    for token in line.split(pair_sep):
        if not token:
            continue
        source, sep, target = token.partition(edge_sep)
        if not sep:
            graph.add_node(token)
        elif source and target:
            graph.add_edge(source, target)
        else:
            raise ParseError(line_no, line, token)


def parse_lines(graph: DependencyGraph, edge_sep: str, pair_sep: str, lines: Iterable[str]) -> None:
    """Feed lines into ``graph`` until the source is exhausted.

    Args:
        graph: Graph receiving nodes and edges.
        edge_sep: Separator between source and target inside a pair.
        pair_sep: Separator between pairs on a line.
        lines: Line source, without line terminators. Exhaustion ends the
            parse normally; any other error it raises propagates.

    Raises:
        InvalidSeparatorError: If either separator is empty. Checked before
            the first line is requested.
        ParseError: On a pair with an empty source or target.
    """
    check_separators(edge_sep, pair_sep)
    line_no = 0
    for line_no, line in enumerate(lines, 1):
        parse_line(graph, edge_sep, pair_sep, line, line_no)
    logging.debug(f"Parsed {line_no} lines, graph has {len(graph)} nodes",
                  extra={"line_no": line_no, "nodes": len(graph)})
