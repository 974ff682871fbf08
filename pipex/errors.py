"""Error types for the pipeline and the messages shown for them."""

from __future__ import annotations

from typing import Optional, TextIO

ERROR_TAG = "\033[0;31mERROR\033[0m"
USAGE = "./pipex file1 cmd1 cmd2 file2"
EXPECTED_ARGC = 5


class PipexError(Exception):
    """Base class for errors raised by the pipeline."""


class UsageError(PipexError):
    """The program was given the wrong number of arguments."""

    def __init__(self, argc: int) -> None:
        self.argc = argc
        super().__init__(usage_message(argc))


class CommandError(PipexError):
    """A command string was invalid or named no executable program."""

    def __init__(self, message: str, errno: Optional[int] = None) -> None:
        self.errno = errno
        super().__init__(message)


def usage_message(argc: int) -> str:
    """Describe a wrong argument count (program name included) and show the usage."""
    if argc > EXPECTED_ARGC:
        head = f"{ERROR_TAG}: too many arguments\n"
    elif argc < EXPECTED_ARGC:
        head = f"{ERROR_TAG}: too few arguments\n"
    else:
        head = ""
    return head + USAGE


def report(error: BaseException, stream: TextIO) -> None:
    """Write a message for ``error`` to ``stream``."""
    if isinstance(error, UsageError):
        stream.write(str(error))
        return
    if isinstance(error, OSError) and error.strerror:
        message = error.strerror
    else:
        message = str(error)
    stream.write(f"{ERROR_TAG}: {message}\n")