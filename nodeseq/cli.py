"""
Command line front end for NodeSequence.

Usage:
    nodeseq TEXT [-d DELIM] [--op NAME [ARG ...]]... [--nodes] [-v]

Operations run left to right and use the NodeSequence method names
(hyphens or underscores). For example:

    nodeseq org.myname.project.no1180.zip \\
        --op replace-first com --op merge-at _new -2 --op set-extension tar.gz
    # com.myname.project.no1180_new.tar.gz
"""

import argparse
import logging
import sys

from nodeseq.delimiters import DEFAULT_DELIMITER
from nodeseq.errors import NodeSequenceError
from nodeseq.node_sequence import NodeSequence

# Operation name -> argument kinds, "text" or "index", in call order
OPERATIONS: dict[str, tuple[str, ...]] = {
    "insert_at": ("text", "index"),
    "insert_first": ("text",),
    "insert_last": ("text",),
    "merge_at": ("text", "index"),
    "merge_first": ("text",),
    "merge_last": ("text",),
    "fuse_at": ("text", "index"),
    "fuse_first": ("text",),
    "fuse_last": ("text",),
    "set_extension": ("text",),
    "replace_at": ("text", "index"),
    "replace_first": ("text",),
    "replace_last": ("text",),
    "remove_at": ("index",),
    "remove_range": ("index", "index"),
    "remove_first": (),
    "remove_last": (),
    "prune_empty": (),
}


def parse_operation(raw: list[str]) -> tuple[str, list]:
    """Validate one ``--op`` group and convert its index arguments to int."""
    name = raw[0].replace("-", "_")
    if name not in OPERATIONS:
        raise argparse.ArgumentTypeError(f"unknown operation: {raw[0]}")
    kinds = OPERATIONS[name]
    values = raw[1:]
    if len(values) != len(kinds):
        raise argparse.ArgumentTypeError(f"{raw[0]} takes {len(kinds)} argument(s), got {len(values)}")
    args = []
    for kind, value in zip(kinds, values):
        if kind == "index":
            try:
                value = int(value)
            except ValueError:
                raise argparse.ArgumentTypeError(f"{raw[0]}: index must be an integer, got {value!r}")
        args.append(value)
    return name, args


def apply_operations(seq: NodeSequence, operations: list[tuple[str, list]]) -> NodeSequence:
    for name, args in operations:
        getattr(seq, name)(*args)
    return seq


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nodeseq",
        description="Rebuild a delimited string (usually a filename) from node edits",
    )
    parser.add_argument("text", help="String to split into nodes")
    parser.add_argument(
        "-d",
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"Node delimiter (default: {DEFAULT_DELIMITER!r})",
    )
    parser.add_argument(
        "--op",
        dest="operations",
        nargs="+",
        action="append",
        default=[],
        metavar=("NAME", "ARG"),
        help="Operation to apply, may be repeated: " + ", ".join(n.replace("_", "-") for n in OPERATIONS),
    )
    parser.add_argument(
        "--nodes",
        action="store_true",
        help="Print the node list instead of the joined string",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every edit to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        operations = [parse_operation(raw) for raw in args.operations]
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        seq = apply_operations(NodeSequence(args.text, args.delimiter), operations)
    except NodeSequenceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(seq.to_node_list_string() if args.nodes else seq.serialize())
    return 0


if __name__ == "__main__":
    sys.exit(main())
