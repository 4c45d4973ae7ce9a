"""Command-line entry point: compile one markup document."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import compile_markup, dump_statements, statement_stats
from .bindings import TypeCatalog
from .writer import SourceWriter


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Markup component compiler")
    parser.add_argument("file", help="Markup document to compile")
    parser.add_argument(
        "--catalog", "-c", required=True, help="Type catalog JSON file"
    )
    parser.add_argument(
        "--owner", default="", help="Owner type (default: root Class attribute)"
    )
    parser.add_argument(
        "--output", "-o", default="", help="Write generated source here"
    )
    parser.add_argument(
        "--statements-only", action="store_true",
        help="Only print the statement listing",
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print statement kind counts as JSON"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    catalog = TypeCatalog.from_json_file(args.catalog)
    with open(args.file) as f:
        source = f.read()

    if args.statements_only:
        print("═══ Statements ═══")
        print(dump_statements(source, catalog, args.owner))
        return 0

    if args.stats:
        print(json.dumps(statement_stats(source, catalog, args.owner), indent=2))
        return 0

    unit = compile_markup(source, catalog, args.owner)
    if unit.is_empty():
        print(f"No output generated for {args.file}", file=sys.stderr)
        return 1

    code = SourceWriter().render(unit)
    if args.output:
        with open(args.output, "w") as f:
            f.write(code)
    else:
        print(code, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
