""" Parsed commands and parse errors. """
import enum
from dataclasses import dataclass, field


class ParseErrorKind(enum.Enum):
    UNTERMINATED_QUOTE = "unterminated quote"
    NO_COMMAND = "no command"
    MISSING_REDIRECT_TARGET = "missing redirect target"
    DUPLICATE_REDIRECTION = "duplicate redirection"


@dataclass(frozen=True)
class ParseError:
    """ A line that could not be turned into a command. """
    kind: ParseErrorKind
    message: str
    offset: int | None = None     # position of the opening quote
    operator: str | None = None   # redirection operator involved
    stream: str | None = None     # "stdout" or "stderr"

    def __str__(self):
        return self.message


@dataclass(frozen=True)
class ParsedCommand:
    """ A command name, its arguments and where its output goes. """
    name: str
    args: tuple[str, ...] = field(default_factory=tuple)
    stdout: str | None = None     # filename or None
    stdout_append: bool = False   # True for >>
    stderr: str | None = None     # filename or None
    stderr_append: bool = False   # True for 2>>

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("command name cannot be empty")
        # lists are accepted; keep a tuple
        object.__setattr__(self, "args", tuple(self.args))

    @property
    def has_redirection(self) -> bool:
        return self.stdout is not None or self.stderr is not None

    def __str__(self):
        parts = [self.name, *self.args]
        if self.stdout is not None:
            parts += [">>" if self.stdout_append else ">", self.stdout]
        if self.stderr is not None:
            parts += ["2>>" if self.stderr_append else "2>", self.stderr]
        return " ".join(parts)


# Either a command or the reason there isn't one.
ParseOutcome = ParsedCommand | ParseError
