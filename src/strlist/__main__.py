"""Demonstration entry point: build a small list and print it."""

import argparse
import logging
from collections.abc import Sequence

from strlist.linkedlist import DoublyLinkedList

logger = logging.getLogger(__name__)

# Inserted one at a time at the front, so the list reads 1, 2
_DEFAULT_FRONT = ("2", "1")
_DEFAULT_BACK = ("3", "4")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strlist",
        description="Build a doubly-linked list and print it head to tail.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--front",
        action="append",
        metavar="VALUE",
        help="value to insert at the front (repeatable, applied in order)",
    )
    parser.add_argument(
        "--back",
        action="append",
        metavar="VALUE",
        help="value to insert at the back (repeatable, applied in order)",
    )
    return parser


def build_list(front: Sequence[str], back: Sequence[str]) -> DoublyLinkedList:
    """Insert every front value at the front, then every back value at the back."""
    lst = DoublyLinkedList()
    for value in front:
        lst.insert_front(value)
    for value in back:
        lst.insert_back(value)
    logger.debug("built list of size %d", lst.get_size())
    return lst


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    front = args.front if args.front is not None else _DEFAULT_FRONT
    back = args.back if args.back is not None else _DEFAULT_BACK
    print(build_list(front, back))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
