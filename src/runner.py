""" Execute a shell command. """
import contextlib
import os
import subprocess
import sys

from loguru import logger

from command import ParsedCommand
from constants import (
    EXIT_CANNOT_EXECUTE,
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_NOT_FOUND,
    SHELL_NAME,
)
from exceptions import RedirectionError
from path_search import find_executable
from shell_builtins import lookup_builtin
from shell_state import ShellState


def open_target(filename, append, state: ShellState):
    """ Open a redirect target for writing, creating missing directories. """
    path = state.resolve(filename)
    mode = "a" if append else "w"
    try:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return open(path, mode, encoding="utf-8")
    except OSError as e:
        raise RedirectionError(filename, e.strerror or str(e)) from e


@contextlib.contextmanager
def redirect_stdout(filename, append, state: ShellState):
    if filename is None:
        yield
        return

    with open_target(filename, append, state) as f:
        old_stdout = sys.stdout
        sys.stdout = f
        try:
            yield
        finally:
            sys.stdout = old_stdout


@contextlib.contextmanager
def redirect_stderr(filename, append, state: ShellState):
    if filename is None:
        yield
        return

    with open_target(filename, append, state) as f:
        old = sys.stderr
        sys.stderr = f
        try:
            yield
        finally:
            sys.stderr = old


def run_builtin(handler, cmd: ParsedCommand, state: ShellState) -> int:
    # Builtins: Python-level redirection of sys.stdout/sys.stderr
    with redirect_stdout(cmd.stdout, cmd.stdout_append, state):
        with redirect_stderr(cmd.stderr, cmd.stderr_append, state):
            return handler(list(cmd.args), state) or 0


def run_external(cmd: ParsedCommand, state: ShellState) -> int:
    executable = find_executable(cmd.name, path=state.search_path(), cwd=state.cwd)
    if executable is None:
        print(f"{cmd.name}: command not found", file=sys.stderr)
        return EXIT_NOT_FOUND

    stdout_handle = None
    stderr_handle = None
    try:
        if cmd.stdout is not None:
            stdout_handle = open_target(cmd.stdout, cmd.stdout_append, state)
        if cmd.stderr is not None:
            stderr_handle = open_target(cmd.stderr, cmd.stderr_append, state)

        logger.debug("spawning {} as {}", executable, [cmd.name, *cmd.args])
        # argv[0] stays as typed; the resolved path is what gets run
        completed = subprocess.run(
            [cmd.name, *cmd.args],
            executable=executable,
            cwd=state.cwd,
            stdout=stdout_handle,
            stderr=stderr_handle,
        )
        return completed.returncode
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    except OSError as e:
        logger.warning("failed to execute {}: {}", executable, e)
        print(f"{cmd.name}: {e.strerror or e}", file=sys.stderr)
        return EXIT_CANNOT_EXECUTE
    finally:
        for h in (stdout_handle, stderr_handle):
            if h:
                h.close()


def execute_command(cmd: ParsedCommand, shell_state: ShellState) -> int:
    """ Run cmd as a builtin if there is one, otherwise as a program. """
    try:
        handler = lookup_builtin(cmd.name)
        if handler is not None:
            logger.debug("running builtin {}", cmd.name)
            return run_builtin(handler, cmd, shell_state)
        return run_external(cmd, shell_state)
    except RedirectionError as e:
        logger.warning("redirection failed: {}", e)
        print(f"{SHELL_NAME}: {e}", file=sys.stderr)
        return EXIT_FAILURE
