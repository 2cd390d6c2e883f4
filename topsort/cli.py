"""topsort CLI entry point."""
import argparse
import logging
import os
import sys
from typing import Iterable, Iterator, List, Optional, TextIO

from topsort.core.config import Config, load_config
from topsort.core.dependency_graph import DependencyGraph
from topsort.core.errors import ParseError, SourceError, TopsortError
from topsort.core.logging import setup_logging, get_run_id, timed
from topsort.core.ordering import depth_first, top_sort
from topsort.core.parser import check_separators, parse_lines

STDIN = "-"

DESCRIPTION = """\
Topological sorting algorithms are especially useful for dependency
calculation, and this implementation is mainly intended for that purpose.
The direction of edges and the order of the results may seem reversed
compared to other implementations of topological sorting.
"""

EPILOG = """\
examples:
  echo "A-B,B-C,B-D,E-D,F" | topsort
  echo "A-B:B-C:B-D:E-D:F" | topsort -p :
  topsort pairs.txt
  echo "A-B,B-C" | topsort pairs1.txt pairs2.txt - pairs3.txt
"""


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog='topsort',
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('files', nargs='*', metavar='file',
                        help="Input files, read in order; '-' is stdin (default)")
    parser.add_argument('-T', '--top-sort', action='store_true',
                        help='Use Topological node classifier, otherwise Depth-first classifier')
    parser.add_argument('-p', '--pair-sep', help='Set the pairs separator (default: ",")')
    parser.add_argument('-e', '--edge-sep', help='Set the edge separator (default: "-")')
    parser.add_argument('--config', '-c', help='Path to YAML config file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Verbosity: -v=INFO, -vv=DEBUG')
    parser.add_argument('--json-logs', action='store_true',
                        help='Output logs in JSON format')
    return parser.parse_args(argv)


def unique_sources(files: Iterable[str]) -> List[str]:
    """Resolve file names to absolute paths, keeping the first of duplicates."""
    sources: List[str] = []
    for name in files:
        if name != STDIN:
            name = os.path.abspath(name)
        if name not in sources:
            sources.append(name)
    return sources or [STDIN]


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines without their ``\\n`` or ``\\r\\n`` terminator."""
    for line in stream:
        if line.endswith("\n"):
            line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def read_source(graph: DependencyGraph, source: str, config: Config) -> None:
    """Parse one source into ``graph``.

    Lines are split on ``\\n`` only, for files and stdin alike; a lone
    ``\\r`` stays part of the line.
    """
    logging.info(f"Reading {source}", extra={"source": source})
    try:
        if source == STDIN:
            # replaced streams (io.StringIO) already split on "\n" only
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(newline="\n")
            parse_lines(graph, config.edge_sep, config.pair_sep, read_lines(sys.stdin))
        else:
            with open(source, newline="\n") as f:
                parse_lines(graph, config.edge_sep, config.pair_sep, read_lines(f))
    except (OSError, UnicodeDecodeError, ParseError) as e:
        raise SourceError(source, e) from e


@timed
def sort_graph(graph: DependencyGraph, config: Config) -> List[str]:
    name = config.classifier_name
    logging.info(f"{name} classifier over {len(graph)} nodes",
                 extra={"algorithm": name, "nodes": len(graph)})
    return top_sort(graph) if config.top_sort else depth_first(graph)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    # Load config from file or defaults
    config = load_config(args.config)

    # CLI args override config
    if args.top_sort:
        config.top_sort = True
    if args.pair_sep is not None:
        config.pair_sep = args.pair_sep
    if args.edge_sep is not None:
        config.edge_sep = args.edge_sep
    if args.verbose:
        config.verbosity = args.verbose
    if args.json_logs:
        config.json_logs = True

    setup_logging(config.verbosity, config.json_logs)
    logging.info(f"topsort run_id={get_run_id()} classifier={config.classifier_name}")

    try:
        check_separators(config.edge_sep, config.pair_sep)
        graph = DependencyGraph()
        for source in unique_sources(args.files):
            read_source(graph, source, config)
    except TopsortError as e:
        logging.error(str(e))
        return 1

    try:
        results = sort_graph(graph, config)
    except TopsortError as e:
        logging.error(f"{config.classifier_name} classifier: {e}")
        return 1

    for label in results:
        sys.stdout.write(label + "\n")
    return 0


if __name__ == '__main__':
    sys.exit(main())
