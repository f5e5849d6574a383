""" Locate executables on the search path. """
import os
import shutil

from loguru import logger


def find_executable(name: str, path=None, cwd=None) -> str | None:
    """
    Return the absolute path of the program `name` would run, or None.

    A name containing a directory separator is taken as a path (relative to
    cwd) and is not looked up on the search path. On Windows shutil.which
    also tries each PATHEXT suffix.
    """
    if not name:
        return None

    if os.sep in name or (os.altsep and os.altsep in name):
        directory, base = os.path.split(os.path.join(cwd or os.getcwd(), name))
        found = shutil.which(base, path=directory) if base else None
    else:
        if path is None:
            path = os.environ.get("PATH", "")
        found = shutil.which(name, path=path)

    if found is None:
        return None
    found = os.path.abspath(found)
    logger.debug("resolved {} -> {}", name, found)
    return found
