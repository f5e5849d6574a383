""" Parse shell command lines. """
from loguru import logger

from assembler import assemble
from command import ParsedCommand, ParseError, ParseErrorKind, ParseOutcome
from constants import REDIRECT_OPERATORS
from lexer import lex


def tokenize(line: str) -> list[str] | ParseError:
    """ Split a line into shell words. """
    raw = lex(line)
    if isinstance(raw, ParseError):
        return raw
    return assemble(raw)


def extract_redirections(tokens: list[str]) -> ParseOutcome:
    """
    Pull redirection operators and their targets out of tokens.

    Operators are whole words (>, >>, 1>, 1>>, 2>, 2>>); the word after each
    one is its target. Everything else, '|' included, is kept in order and
    becomes the command name and arguments.
    """
    targets = {"stdout": None, "stderr": None}
    appends = {"stdout": False, "stderr": False}
    words = []

    it = iter(tokens)
    for tok in it:
        if tok not in REDIRECT_OPERATORS:
            words.append(tok)
            continue

        stream, append = REDIRECT_OPERATORS[tok]
        if targets[stream] is not None:
            return ParseError(
                ParseErrorKind.DUPLICATE_REDIRECTION,
                f"syntax error: {stream} redirected more than once ('{tok}')",
                operator=tok,
                stream=stream,
            )

        target = next(it, None)
        if target is None:
            return ParseError(
                ParseErrorKind.MISSING_REDIRECT_TARGET,
                f"syntax error: expected filename after '{tok}'",
                operator=tok,
                stream=stream,
            )
        targets[stream] = target
        appends[stream] = append

    if not words or not words[0].strip():
        return ParseError(ParseErrorKind.NO_COMMAND, "no command")

    return ParsedCommand(
        words[0],
        tuple(words[1:]),
        stdout=targets["stdout"],
        stdout_append=appends["stdout"],
        stderr=targets["stderr"],
        stderr_append=appends["stderr"],
    )


def parse_line(line: str) -> ParseOutcome:
    """ Turn one line of input into a command or a parse error. """
    tokens = tokenize(line)
    if isinstance(tokens, ParseError):
        return tokens

    outcome = extract_redirections(tokens)
    logger.debug("parsed {!r} -> {!r}", line, outcome)
    return outcome
