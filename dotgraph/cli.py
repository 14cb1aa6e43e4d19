import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List

from .graph import Graph

log = logging.getLogger(__name__)


def collect_graphs(path: str) -> List[Graph]:
    """Execute a Python file and return the module level graphs it defines, in definition order."""
    namespace: Dict[str, object] = {"__name__": "__main__", "__file__": path}
    with open(path, encoding="utf-8") as f:
        code = compile(f.read(), path, "exec")
    log.debug("executing %s", path)
    exec(code, namespace)
    graphs = [value for value in namespace.values() if isinstance(value, Graph)]
    log.debug("found %d graph(s) in %s", len(graphs), path)
    return graphs


def run() -> int:
    """
    Run Python files that build dotgraph graphs and emit every graph they define.
    Args:
        paths: A list of paths to Python files containing dotgraph code.

    Returns:
        The exit code.
    """
    parser = argparse.ArgumentParser(
        description="Run Python files that build dotgraph graphs and print or render them.",
    )
    parser.add_argument(
        "paths",
        metavar="path",
        type=str,
        nargs="+",
        help="a Python file containing dotgraph code",
    )
    parser.add_argument(
        "-f",
        "--format",
        help="render with Graphviz to this output format instead of printing DOT",
    )
    parser.add_argument(
        "-e",
        "--engine",
        default="dot",
        help="Graphviz layout engine (default: dot)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=".",
        help="directory for rendered files (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    exit_code = 0
    for path in args.paths:
        graphs = collect_graphs(path)
        if not graphs:
            print(f"{path}: no graph defined", file=sys.stderr)
            exit_code = 1
            continue
        stem = Path(path).stem
        for index, graph in enumerate(graphs):
            if args.format is None:
                print(graph.to_dot())
                continue
            name = stem if len(graphs) == 1 else f"{stem}_{index + 1}"
            graph.render(os.path.join(args.output_dir, name), format=args.format, engine=args.engine)

    return exit_code


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
