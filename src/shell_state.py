""" Current state of the shell. """
import os


class ShellState:
    def __init__(self, cwd=None, path=None):
        self.cwd = os.path.abspath(cwd or os.getcwd())
        self.previous_dir = None
        self.last_status = 0
        self.path = path  # search path override; None means $PATH

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0

    def resolve(self, path: str) -> str:
        """ Absolute form of path, relative to the session directory. """
        return os.path.normpath(os.path.join(self.cwd, path))

    def change_dir(self, target: str):
        """ Make target the session directory, remembering the old one. """
        if target != self.cwd:
            self.previous_dir = self.cwd
        self.cwd = target

    def search_path(self) -> str:
        if self.path is not None:
            return self.path
        return os.environ.get("PATH", "")
