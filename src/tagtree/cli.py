"""
CLI interface for tagtree.

Reads a document, applies edits in the order they appear on the command line,
and prints the result in the same line format.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .builder import parse
from .config import get_config
from .dom import Tree
from .edits import add_tag, bold_row, remove_tag, replace_tag
from .errors import TagTreeError
from .render import render

logger = logging.getLogger(__name__)


class _EditAction(argparse.Action):
    """Collect edit flags into one ordered list of (edit, values)."""

    def __init__(self, option_strings, dest, edit: str, **kwargs):
        self.edit = edit
        super().__init__(option_strings, dest, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        edits = list(getattr(namespace, self.dest) or [])
        if not isinstance(values, list):
            values = [values]
        edits.append((self.edit, values))
        setattr(namespace, self.dest, edits)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="tagtree",
        description="Edit line-oriented HTML-like documents",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="Input document (reads from stdin if not provided)",
    )

    parser.add_argument(
        "--replace",
        "-r",
        nargs=2,
        metavar=("OLD", "NEW"),
        action=_EditAction,
        edit="replace",
        dest="edits",
        help="Rename every OLD element to NEW",
    )

    parser.add_argument(
        "--bold-row",
        "-b",
        type=int,
        metavar="N",
        action=_EditAction,
        edit="bold-row",
        dest="edits",
        help="Boldface every column of row N (1-based) of the first table",
    )

    parser.add_argument(
        "--remove",
        "-x",
        metavar="TAG",
        action=_EditAction,
        edit="remove",
        dest="edits",
        help="Remove every TAG element, keeping its content (p, em, b, ol, ul)",
    )

    parser.add_argument(
        "--add-tag",
        "-a",
        nargs=2,
        metavar=("WORD", "TAG"),
        action=_EditAction,
        edit="add-tag",
        dest="edits",
        help="Wrap the first occurrence of WORD in each text line with TAG",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Write the result here instead of stdout",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each edit to stderr",
    )

    parser.set_defaults(edits=[])
    return parser.parse_args(args)


def read_input(filepath: str | None) -> str:
    """Read the document from file or stdin."""
    if filepath:
        return Path(filepath).read_text(encoding=get_config().io.encoding)
    return sys.stdin.read()


def apply_edits(tree: Tree, edits: list[tuple[str, list]]) -> None:
    """Apply (edit, values) pairs to the tree in order."""
    for edit, values in edits:
        logger.info("Applying %s %s", edit, " ".join(str(v) for v in values))
        if edit == "replace":
            replace_tag(tree, values[0], values[1])
        elif edit == "bold-row":
            bold_row(tree, values[0])
        elif edit == "remove":
            remove_tag(tree, values[0])
        elif edit == "add-tag":
            add_tag(tree, values[0], values[1])
        else:
            raise ValueError(f"Unknown edit: {edit}")


def setup_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else get_config().logging.level.upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)
    setup_logging(parsed.verbose)

    try:
        content = read_input(parsed.file)
    except FileNotFoundError:
        print(f"Error: File not found: {parsed.file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    try:
        tree = parse(content)
        apply_edits(tree, parsed.edits)
    except TagTreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = render(tree)

    if parsed.output:
        try:
            Path(parsed.output).write_text(output, encoding=get_config().io.encoding)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
        return 0

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
