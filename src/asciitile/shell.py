from __future__ import annotations

import logging
from collections.abc import Callable

from asciitile.commands import (
    Command,
    CommandError,
    parse_charset_arg,
    parse_command,
    parse_output,
    parse_resolution_step,
    parse_rounding_policy,
)
from asciitile.errors import BoundaryExceeded, EmptyIndex
from asciitile.output import Output, build_output
from asciitile.session import Session

logger = logging.getLogger(__name__)

PROMPT = ">>> "
EXIT = "exit"


class Shell:
    """Line-oriented command loop over a Session.

    `execute` runs one command line and returns the message to show the
    user, if any. Rendered art goes to the current output instead.
    """

    def __init__(self, session: Session, output: Output | None = None):
        self.session = session
        settings = session.settings
        self.output = output if output is not None else build_output(settings.output, settings.html_path, settings.html_font)
        self._handlers: dict[str, Callable[[str | None], str | None]] = {
            "chars": self._chars,
            "add": self._add,
            "remove": self._remove,
            "res": self._res,
            "round": self._round,
            "output": self._output,
            "asciiArt": self._ascii_art,
        }

    def execute(self, line: str) -> str | None:
        return self._dispatch(line, parse_command(line))

    def _dispatch(self, line: str, command: Command | CommandError) -> str | None:
        if isinstance(command, CommandError):
            logger.debug("Rejected %r: %s", line, command.kind.value)
            return command.message
        if command.name == EXIT:
            return None
        return self._handlers[command.name](command.arg)

    def run(
        self,
        read_line: Callable[[str], str] | None = None,
        write: Callable[[str], None] | None = None,
    ) -> None:
        read_line = read_line or input
        write = write or print
        while True:
            try:
                line = read_line(PROMPT)
            except EOFError:
                break
            command = parse_command(line)
            if isinstance(command, Command) and command.name == EXIT:
                break
            message = self._dispatch(line, command)
            if message is not None:
                write(message)

    def _chars(self, arg: str | None) -> str:
        return " ".join(self.session.list_chars())

    def _add(self, arg: str | None) -> str | None:
        chars = parse_charset_arg(arg, "add")
        if isinstance(chars, CommandError):
            return chars.message
        self.session.add_chars(chars)
        return None

    def _remove(self, arg: str | None) -> str | None:
        chars = parse_charset_arg(arg, "remove")
        if isinstance(chars, CommandError):
            return chars.message
        self.session.remove_chars(chars)
        return None

    def _res(self, arg: str | None) -> str:
        if arg is not None:
            step = parse_resolution_step(arg)
            if isinstance(step, CommandError):
                return step.message
            try:
                self.session.set_resolution(step)
            except BoundaryExceeded as e:
                return str(e)
        return f"Resolution set to {self.session.resolution}"

    def _round(self, arg: str | None) -> str | None:
        policy = parse_rounding_policy(arg)
        if isinstance(policy, CommandError):
            return policy.message
        self.session.set_rounding_policy(policy)
        return None

    def _output(self, arg: str | None) -> str | None:
        name = parse_output(arg)
        if isinstance(name, CommandError):
            return name.message
        settings = self.session.settings
        self.output = build_output(name, settings.html_path, settings.html_font)
        return None

    def _ascii_art(self, arg: str | None) -> str | None:
        try:
            grid = self.session.render()
        except EmptyIndex as e:
            return str(e)
        self.output.out(grid)
        return None

