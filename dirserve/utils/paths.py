import errno
import os
import stat
from dataclasses import dataclass
from typing import Optional

from dirserve.errors import DirServeError


class PathError(DirServeError):
    """Raised when the path given on the command line can't be served."""

    def __init__(self, path, message):
        super().__init__(f"{path}: {message}")
        self.path = path


class PathNotFound(PathError):
    pass


class PathUnreadable(PathError):
    pass


class NoParentError(PathError):
    pass


class NoFileNameError(PathError):
    pass


class UnsupportedPathType(PathError):
    pass


@dataclass(frozen=True)
class ResolvedTarget:
    root_directory: str
    initial_file: Optional[str] = None


def resolve_target(input_path):
    """Work out which directory to serve for `input_path`.

    A directory is served as-is. A regular file is served from its parent
    directory and its name becomes the page to open first.
    """
    path = os.path.abspath(input_path)

    try:
        st = os.stat(path)
    except FileNotFoundError:
        raise PathNotFound(input_path, "no such file or directory")
    except OSError as e:
        if e.errno == errno.ENOTDIR:
            raise PathNotFound(input_path, "no such file or directory")
        if e.errno == errno.ELOOP:
            raise UnsupportedPathType(input_path, "too many levels of symbolic links")
        raise PathUnreadable(input_path, e.strerror or str(e))

    if stat.S_ISDIR(st.st_mode):
        return ResolvedTarget(path)

    if stat.S_ISREG(st.st_mode):
        parent, name = os.path.split(path)
        if not parent or parent == path:
            raise NoParentError(input_path, "failed to get parent directory")
        if not name:
            raise NoFileNameError(input_path, "failed to get file name")
        return ResolvedTarget(parent, name)

    raise UnsupportedPathType(input_path, "path must either be a file or a directory")
