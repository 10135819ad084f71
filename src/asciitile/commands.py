"""Parsing and validation for the interactive command language.

Parsers never raise on bad input. Each returns either the parsed value or a
``CommandError`` describing what was wrong, and the caller checks which one
it got.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from asciitile.charsets import ASCII_PRINTABLE, char_range, is_printable
from asciitile.output import OUTPUTS
from asciitile.rounding import RoundingPolicy
from asciitile.session import ResolutionStep

ALL_ARG = "all"
SPACE_ARG = "space"

# command name -> action named in its format error message
COMMANDS = {
    "chars": "show characters",
    "add": "add",
    "remove": "remove",
    "res": "change resolution",
    "round": "change rounding method",
    "output": "change output method",
    "asciiArt": "render",
    "exit": "exit",
}


class ErrorKind(Enum):
    INVALID_COMMAND_ARGUMENT = "invalid_command_argument"
    UNKNOWN_COMMAND = "unknown_command"


@dataclass(frozen=True)
class CommandError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Command:
    name: str
    arg: str | None = None


UNKNOWN_COMMAND = CommandError(ErrorKind.UNKNOWN_COMMAND, "Did not execute due to incorrect command.")


def incorrect_format(command: str) -> CommandError:
    return CommandError(
        ErrorKind.INVALID_COMMAND_ARGUMENT,
        f"Did not {COMMANDS[command]} due to incorrect format.",
    )


def parse_command(line: str) -> Command | CommandError:
    """Split a command line into its name and first argument. Extra words are ignored."""
    parts = line.split()
    if not parts or parts[0] not in COMMANDS:
        return UNKNOWN_COMMAND
    return Command(parts[0], parts[1] if len(parts) > 1 else None)


def parse_charset_arg(arg: str | None, command: str = "add") -> str | CommandError:
    """Characters named by an add/remove argument.

    Accepts a single printable character, an inclusive range ``a-b`` in
    either order, ``all`` for codes 32-126, or ``space``.
    """
    if arg is None:
        return incorrect_format(command)
    if arg == ALL_ARG:
        return ASCII_PRINTABLE
    if arg == SPACE_ARG:
        return " "
    if len(arg) == 3 and arg[1] == "-" and is_printable(arg[0]) and is_printable(arg[2]):
        return char_range(arg[0], arg[2])
    if is_printable(arg):
        return arg
    return incorrect_format(command)


def parse_rounding_policy(arg: str | None) -> RoundingPolicy | CommandError:
    try:
        return RoundingPolicy(arg)
    except ValueError:
        return incorrect_format("round")


def parse_resolution_step(arg: str | None) -> ResolutionStep | CommandError:
    try:
        return ResolutionStep(arg)
    except ValueError:
        return incorrect_format("res")


def parse_output(arg: str | None) -> str | CommandError:
    if arg in OUTPUTS:
        return arg
    return incorrect_format("output")
