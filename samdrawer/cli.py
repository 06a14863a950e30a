"""Command line entry point for drawing suffix automata."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from samdrawer.render import generate_dot, generate_svg


def main(argv: list[str] | None = None) -> int:
    """Draw the automaton of the given text as SVG or DOT."""
    parser = argparse.ArgumentParser(
        prog="samdrawer",
        description="Draw the suffix automaton of one or more strings.",
    )
    parser.add_argument(
        "text",
        help="string to draw; separate several strings with '|' for a generalised automaton",
    )
    parser.add_argument(
        "-f", "--format", choices=("svg", "dot"), default="svg", help="output format"
    )
    parser.add_argument("-o", "--output", help="write to this file instead of standard output")
    args = parser.parse_args(argv)

    result = generate_svg(args.text) if args.format == "svg" else generate_dot(args.text)
    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())