SHELL_NAME = "nyxsh"
DEFAULT_PROMPT = "$ "

# operator -> (stream, append)
REDIRECT_OPERATORS = {
    ">": ("stdout", False),
    "1>": ("stdout", False),
    ">>": ("stdout", True),
    "1>>": ("stdout", True),
    "2>": ("stderr", False),
    "2>>": ("stderr", True),
}

WHITESPACE = frozenset(" \t\n\r\f\v")
LINE_TERMINATORS = frozenset("\n\r")
# characters that end an unquoted word
WORD_BREAKS = WHITESPACE | frozenset("'\"#")
# characters a backslash may escape inside double quotes
DQ_ESCAPABLE = frozenset('\\"$')

# exit statuses
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_MISUSE = 2
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127
EXIT_INTERRUPTED = 130
