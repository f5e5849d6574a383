""" Registry of builtin commands. """
import inspect
import os
import sys

from exceptions import ShellExit
from constants import EXIT_FAILURE, EXIT_MISUSE, SHELL_NAME
from path_search import find_executable

BUILTINS = {}
SUMMARIES = {}


def builtin(name, summary=""):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        SUMMARIES[name] = summary
        return func
    return wrapper


def lookup_builtin(name: str):
    """ Return the handler for name, ignoring case, or None. """
    return BUILTINS.get(name.lower())


@builtin("echo", "Write arguments to standard output.")
def builtin_echo(args, state) -> int:
    """
    Usage: echo [arg ...]
    Write the arguments, separated by single spaces, followed by a newline.
    """
    print(" ".join(args))
    return 0


@builtin("pwd", "Print the current working directory.")
def builtin_pwd(args, state):
    """
    Usage: pwd
    Print the absolute path of the current working directory.
    """
    print(state.cwd)
    return 0


@builtin("cd", "Change the current directory.")
def builtin_cd(args, state):
    """
    Usage: cd [dir]
    Change the current directory to DIR. Without DIR, go to the home
    directory.

    Special paths:
      ~      Home directory
      -      Previous directory
      .      Current directory
      ..     Parent directory
    """
    if len(args) > 1:
        print("cd: too many arguments", file=sys.stderr)
        return EXIT_FAILURE

    home = os.path.expanduser("~")
    if not args or args[0] == "~":
        target = home
    elif args[0] == "-":
        if state.previous_dir is None:
            print("cd: OLDPWD not set", file=sys.stderr)
            return EXIT_FAILURE
        target = state.previous_dir
        print(target)
    else:
        target = args[0]

    if target.startswith("~" + os.sep) or (os.altsep and target.startswith("~" + os.altsep)):
        path = state.resolve(os.path.join(home, target[2:]))
    else:
        path = state.resolve(target)
    if not os.path.exists(path):
        print(f"cd: {target}: No such file or directory", file=sys.stderr)
        return EXIT_FAILURE
    if not os.path.isdir(path):
        print(f"cd: {target}: Not a directory", file=sys.stderr)
        return EXIT_FAILURE
    if not os.access(path, os.X_OK):
        print(f"cd: {target}: Permission denied", file=sys.stderr)
        return EXIT_FAILURE

    state.change_dir(path)
    return 0


@builtin("exit", "Exit the shell.")
def builtin_exit(args, state):
    """
    Usage: exit [n]
    Exit the shell with status N. Without N, the status is 0.
    """
    if not args:
        raise ShellExit(0)
    try:
        status = int(args[0]) % 256
    except ValueError:
        print(f"exit: {args[0]}: numeric argument required", file=sys.stderr)
        status = EXIT_MISUSE
    raise ShellExit(status)


@builtin("type", "Describe how a name would be run.")
def builtin_type(args, state):
    """
    Usage: type name [name ...]
    For each NAME, tell whether it is a shell builtin or an executable on
    the search path.
    """
    rc = 0
    for name in args:
        if lookup_builtin(name) is not None:
            print(f"{name} is a shell builtin")
            continue
        path = find_executable(name, path=state.search_path(), cwd=state.cwd)
        if path:
            print(f"{name} is {path}")
        else:
            print(f"{name}: not found", file=sys.stderr)
            rc = EXIT_FAILURE
    return rc


@builtin("help", "Display information about builtin commands.")
def builtin_help(args, state):
    """
    Usage: help [command]
    Display information about builtin commands. With COMMAND, show detailed
    help for that command; otherwise list the available commands.
    """
    if len(args) > 1:
        print("help: too many arguments", file=sys.stderr)
        return EXIT_MISUSE

    if not args:
        print(f"{SHELL_NAME}, these shell commands are defined internally.")
        print()
        for name in sorted(BUILTINS):
            print(f"  {name:<15} {SUMMARIES[name] or '(no description available)'}")
        print()
        print("Type 'help command' for more information about a command.")
        return 0

    name = args[0]
    handler = lookup_builtin(name)
    if handler is None:
        print(f"help: no help topics match '{name}'", file=sys.stderr)
        return EXIT_FAILURE
    print(inspect.cleandoc(handler.__doc__ or SUMMARIES[name.lower()]))
    return 0
