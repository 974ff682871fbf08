"""Turning a command string into an executable path and an argument vector."""

from __future__ import annotations

import errno
import os
from typing import List, Mapping, Optional, Tuple

from pipex.errors import CommandError
from pipex.transform import split


def search_paths(environ: Mapping[str, str]) -> List[str]:
    """Return the directories listed in ``PATH``; empty when it is not set."""
    value = environ.get("PATH")
    if value is None:
        return []
    return split(value, ":")


def find_executable(name: str, environ: Mapping[str, str]) -> Optional[str]:
    """Return the first ``<dir>/<name>`` on ``PATH`` that is executable, or None."""
    for directory in search_paths(environ):
        candidate = directory + "/" + name
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def parse_command(cmd: str) -> List[str]:
    """Split ``cmd`` on spaces into an argument vector.

    An empty command, or one that starts with a space, is rejected.
    """
    if not cmd or cmd.startswith(" "):
        raise CommandError(os.strerror(errno.EINVAL), errno.EINVAL)
    return split(cmd, " ")


def resolve_command(cmd: str, environ: Mapping[str, str]) -> Tuple[str, List[str]]:
    """Return the program path and argument vector for ``cmd``.

    A command starting with ``/`` is taken as a path as it stands and must
    be executable; any other is looked up by its first word on ``PATH``.
    """
    argv = parse_command(cmd)
    if cmd.startswith("/"):
        if not os.access(cmd, os.X_OK):
            raise CommandError(f"{cmd}: {os.strerror(errno.ENOENT)}", errno.ENOENT)
        return cmd, argv
    path = find_executable(argv[0], environ)
    if path is None:
        raise CommandError(f"{argv[0]}: command not found", errno.ENOENT)
    return path, argv