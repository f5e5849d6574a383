""" Exceptions raised while running commands. """


class ShellError(Exception):
    """ Base class for shell errors. """


class ShellExit(ShellError):
    """ Raised by the exit builtin to stop the read loop. """
    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status


class RedirectionError(ShellError):
    """ A redirect target could not be opened. """
    def __init__(self, target: str, reason: str):
        super().__init__(f"{target}: {reason}")
        self.target = target
        self.reason = reason
