"""Command-line options of the notes program."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

PROGRAM_NAME = "uebernotes"
PROGRAM_DESCRIPTION = "Note-taking app for specific purposes"

OPERATIONS = (
    "list-books",
    "print-book",
    "print-note",
    "create-book",
    "create-note",
    "update-book",
    "update-note",
    "remove-book",
    "remove-note",
)

_DEFAULTS = {"database": "db.sqlite3"}


class CommandLineError(Exception):
    """The command line could not be understood."""


def _unsigned(text: str) -> int:
    try:
        number = int(text, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Argument '{text}' failed to parse") from None
    if number < 0 or number >= 2**64:
        raise argparse.ArgumentTypeError(f"Argument '{text}' failed to parse")
    return number


class _Parser(argparse.ArgumentParser):
    def error(self, message):  # type: ignore[override]
        raise CommandLineError(message)


def _build_parser() -> _Parser:
    parser = _Parser(
        prog=PROGRAM_NAME,
        description=PROGRAM_DESCRIPTION,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument("-h", "--help", action="store_true", help="Print help and exit")
    parser.add_argument(
        "-d", "--database", metavar="<path>", help="Database file path (default: db.sqlite3)"
    )

    operation = parser.add_argument_group("Operation")
    operation.add_argument("--list-books", action="store_true", help="List all books")
    operation.add_argument("--print-book", type=_unsigned, metavar="<book_id>",
                           help="Print notes from book")
    operation.add_argument("--print-note", type=_unsigned, metavar="<note_id>", help="Print note")
    operation.add_argument("--create-book", metavar="<name>", help="Create new book")
    operation.add_argument("--create-note", type=_unsigned, metavar="<book_id>",
                           help="Create new note")
    operation.add_argument("--update-book", type=_unsigned, metavar="<book_id>",
                           help="Update book")
    operation.add_argument("--update-note", type=_unsigned, metavar="<note_id>",
                           help="Update note")
    operation.add_argument("--remove-book", type=_unsigned, metavar="<book_id>",
                           help="Remove book")
    operation.add_argument("--remove-note", type=_unsigned, metavar="<note_id>",
                           help="Remove note")

    create_update = parser.add_argument_group("Create/update")
    create_update.add_argument("-n", "--book-name", metavar="<name>", help="Set book name")
    create_update.add_argument("-c", "--note-content", metavar="<string>",
                               help="Set note content")
    return parser


class CommandLineArgs:
    """Parsed command-line options, looked up by their long names."""

    def __init__(self) -> None:
        self._parser = _build_parser()
        self._given: dict[str, Any] = {}

    def parse(self, argv: Sequence[str]) -> None:
        """Parse the arguments (without the program name) and check them."""
        namespace, extra = self._parser.parse_known_args(list(argv))
        unknown = [arg for arg in extra if arg.startswith("-") and arg != "-"]
        if unknown:
            raise CommandLineError(f"Option '{unknown[0]}' does not exist")

        given = {}
        for action in self._parser._actions:
            name = action.option_strings[-1].lstrip("-")
            value = getattr(namespace, action.dest)
            if value is not None and value is not False:
                given[name] = value
        self._given = given
        self._validate()

    def _validate(self) -> None:
        if sum(1 for op in OPERATIONS if self.has(op)) > 1:
            raise CommandLineError("Several operations given")

    def help(self) -> str:
        return self._parser.format_help()

    def has(self, name: str) -> bool:
        """Whether the option was given on the command line."""
        return name in self._given

    def value(self, name: str) -> Any:
        """Return the option's value, or its default when it was not given."""
        if name in self._given:
            return self._given[name]
        if name in _DEFAULTS:
            return _DEFAULTS[name]
        raise CommandLineError(f"Option '{name}' has no value")

    def has_operation(self) -> bool:
        return any(self.has(op) for op in OPERATIONS)