""" Implement the core of the shell. """
import sys

from loguru import logger

from command import ParseError, ParseErrorKind
from config import Settings
from constants import EXIT_INTERRUPTED, EXIT_MISUSE, SHELL_NAME
from exceptions import ShellExit
from lexer import TokenKind, continues_line
from parser import parse_line
from runner import execute_command
from shell_state import ShellState


def read_command(prompt="$ "):
    """
    Read a command with support for line continuation.

    An unquoted trailing backslash joins the next line on; inside double
    quotes the backslash and newline are kept for the lexer to remove.
    Input ending mid-continuation returns what was read, backslash and all.
    """
    text = ""
    pending = None
    while True:
        try:
            line = input(prompt)
        except EOFError:
            if pending is None:
                raise
            return pending

        text += line
        context = continues_line(text)
        if context is None:
            return text
        pending = text
        if context is TokenKind.UNQUOTED:
            text = text[:-1]
        else:
            text += "\n"
        prompt = "> "


class Shell:
    def __init__(self, settings: Settings | None = None, state: ShellState | None = None):
        self.settings = settings or Settings()
        self.state = state or ShellState(path=self.settings.path)
        self._status_shown = True

    def prompt(self) -> str:
        status = self.state.last_status
        if self.settings.show_status and status != 0 and not self._status_shown:
            self._status_shown = True
            return f"[{status}]{self.settings.prompt}"
        return self.settings.prompt

    def execute_line(self, line: str) -> int | None:
        """
        Parse and run one line. Returns the command status, or None when the
        line held no command. ShellExit from the exit builtin propagates.
        """
        if not line.strip():
            return None

        outcome = parse_line(line)
        if isinstance(outcome, ParseError):
            if outcome.kind is ParseErrorKind.NO_COMMAND:
                return None
            print(f"{SHELL_NAME}: {outcome.message}", file=sys.stderr)
            status = EXIT_MISUSE
        else:
            status = execute_command(outcome, self.state)

        logger.debug("status {} for {!r}", status, line)
        self.state.set_status(status)
        self._status_shown = False
        return status

    def run_command(self, line: str) -> int:
        """ Run a single line, as for `nyxsh -c`. """
        try:
            self.execute_line(line)
        except ShellExit as e:
            return e.status
        return self.state.last_status

    def run(self):
        while True:
            try:
                line = read_command(self.prompt())
                self.execute_line(line)
            except ShellExit as e:
                return e.status

            except EOFError:
                print()
                return 0

            except KeyboardInterrupt:
                print()
                self.state.set_status(EXIT_INTERRUPTED)
                self._status_shown = False
