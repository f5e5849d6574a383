""" Lexical analysis for shell commands.

The lexer splits a line into raw tokens, one per quoted or unquoted span.
Quotes are removed and escapes resolved, but adjacent spans are not joined
here: every token records where it came from so the assembler can tell
``'foo'bar`` (one word) from ``'foo' bar`` (two words).
"""
import enum
from dataclasses import dataclass

from loguru import logger

from command import ParseError, ParseErrorKind
from constants import DQ_ESCAPABLE, LINE_TERMINATORS, WHITESPACE, WORD_BREAKS


class TokenKind(enum.Enum):
    SINGLE_QUOTED = "single"
    DOUBLE_QUOTED = "double"
    UNQUOTED = "unquoted"


@dataclass(frozen=True)
class RawToken:
    text: str
    kind: TokenKind
    start: int
    end: int  # inclusive


class UnterminatedQuote(Exception):
    """ Internal signal; lex() turns it into a ParseError. """
    def __init__(self, kind: TokenKind, offset: int):
        super().__init__(kind, offset)
        self.kind = kind
        self.offset = offset


def _line_terminator_length(line: str, i: int) -> int:
    """ Length of the line terminator starting at i, 0 if there is none. """
    if line.startswith("\r\n", i):
        return 2
    if i < len(line) and line[i] in LINE_TERMINATORS:
        return 1
    return 0


def _scan_single_quoted(line: str, start: int) -> RawToken:
    close = line.find("'", start + 1)
    if close == -1:
        raise UnterminatedQuote(TokenKind.SINGLE_QUOTED, start)
    return RawToken(line[start + 1:close], TokenKind.SINGLE_QUOTED, start, close)


def _scan_double_quoted(line: str, start: int) -> RawToken:
    """
    Inside double quotes a backslash only escapes \\, ", $ and a line
    terminator. An escaped line terminator disappears along with the
    backslash; any other backslash is kept as is.
    """
    out = []
    i = start + 1
    n = len(line)
    while i < n:
        ch = line[i]
        if ch == '"':
            return RawToken("".join(out), TokenKind.DOUBLE_QUOTED, start, i)
        if ch == "\\" and i + 1 < n:
            nxt = line[i + 1]
            if nxt in DQ_ESCAPABLE:
                out.append(nxt)
                i += 2
                continue
            skip = _line_terminator_length(line, i + 1)
            if skip:
                i += 1 + skip
                continue
        out.append(ch)
        i += 1
    raise UnterminatedQuote(TokenKind.DOUBLE_QUOTED, start)


def _scan_word(line: str, start: int) -> RawToken:
    """
    Unquoted text up to the next whitespace, quote or '#'. A backslash
    escapes whatever follows it; a lone backslash at the very end is kept.
    """
    out = []
    i = start
    n = len(line)
    while i < n and line[i] not in WORD_BREAKS:
        if line[i] == "\\":
            if i + 1 < n:
                out.append(line[i + 1])
                i += 2
                continue
            out.append("\\")
            i += 1
            break
        out.append(line[i])
        i += 1
    return RawToken("".join(out), TokenKind.UNQUOTED, start, i - 1)


def _skip_comment(line: str, start: int) -> int:
    i = start
    while i < len(line) and line[i] not in LINE_TERMINATORS:
        i += 1
    return i


def scan(line: str) -> list[RawToken]:
    """ Split line into raw tokens. Raises UnterminatedQuote. """
    tokens = []
    i = 0
    n = len(line)
    while i < n:
        ch = line[i]
        if ch in WHITESPACE:
            i += 1
            continue
        if ch == "#":
            i = _skip_comment(line, i)
            continue

        if ch == "'":
            tok = _scan_single_quoted(line, i)
        elif ch == '"':
            tok = _scan_double_quoted(line, i)
        else:
            tok = _scan_word(line, i)
        tokens.append(tok)
        i = tok.end + 1
    return tokens


def lex(line: str) -> list[RawToken] | ParseError:
    """ Split line into raw tokens, or describe why it can't be split. """
    try:
        return scan(line)
    except UnterminatedQuote as e:
        logger.debug("unterminated {} quote at offset {}", e.kind.value, e.offset)
        return ParseError(
            ParseErrorKind.UNTERMINATED_QUOTE,
            f"unterminated {e.kind.value} quote at offset {e.offset}",
            offset=e.offset,
        )


def _ends_with_lone_backslash(text: str) -> bool:
    # backslashes pair up as escapes; an odd run leaves one dangling
    run = len(text) - len(text.rstrip("\\"))
    return run % 2 == 1


def continues_line(text: str) -> TokenKind | None:
    """
    If text ends with a backslash that asks for another line, return the
    quoting context it sits in (UNQUOTED or DOUBLE_QUOTED), else None.
    A backslash inside single quotes or a comment is literal.
    """
    if not text.endswith("\\"):
        return None
    try:
        tokens = scan(text)
    except UnterminatedQuote as e:
        if e.kind is TokenKind.DOUBLE_QUOTED and _ends_with_lone_backslash(text[e.offset + 1:]):
            return TokenKind.DOUBLE_QUOTED
        return None
    if not tokens:
        return None
    last = tokens[-1]
    if last.kind is TokenKind.UNQUOTED and last.end == len(text) - 1 \
            and _ends_with_lone_backslash(text[last.start:]):
        return TokenKind.UNQUOTED
    return None
