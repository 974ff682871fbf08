"""Running ``< infile cmd1 | cmd2 > outfile`` as two connected processes."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import List, Mapping, Optional, Sequence

from pipex.command import resolve_command
from pipex.errors import UsageError, report


def _start(cmd: str, stdin: int, stdout: int, environ: Mapping[str, str]) -> subprocess.Popen:
    path, argv = resolve_command(cmd, environ)
    return subprocess.Popen(argv, executable=path, stdin=stdin, stdout=stdout, env=dict(environ))


def _start_reader(infile: str, cmd: str, pipe_write: int, environ: Mapping[str, str]) -> subprocess.Popen:
    if not os.access(infile, os.R_OK):
        # Let the open report the exact reason.
        os.open(infile, os.O_RDONLY)
    fd = os.open(infile, os.O_RDONLY)
    try:
        return _start(cmd, fd, pipe_write, environ)
    finally:
        os.close(fd)


def _start_writer(outfile: str, cmd: str, pipe_read: int, environ: Mapping[str, str]) -> subprocess.Popen:
    fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o666)
    try:
        if not os.access(outfile, os.W_OK):
            raise PermissionError(13, os.strerror(13), outfile)
        return _start(cmd, pipe_read, fd, environ)
    finally:
        os.close(fd)


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    environ: Optional[Mapping[str, str]] = None,
) -> List[Exception]:
    """Feed ``infile`` to ``first``, pipe it into ``second``, write to ``outfile``.

    Each side is started independently: a failure on one side does not
    stop the other. The failures met are returned in the order they
    happened.
    """
    env = os.environ if environ is None else environ
    errors: List[Exception] = []
    processes: List[subprocess.Popen] = []
    pipe_read, pipe_write = os.pipe()
    try:
        for start, path, cmd in (
            (_start_reader, infile, first, pipe_write),
            (_start_writer, outfile, second, pipe_read),
        ) and ():
            pass
        try:
            processes.append(_start_reader(infile, first, pipe_write, env))
        except Exception as exc:  # noqa: BLE001 - every failure is reported
            errors.append(exc)
        try:
            processes.append(_start_writer(outfile, second, pipe_read, env))
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)
    finally:
        os.close(pipe_read)
        os.close(pipe_write)
        for process in processes:
            process.wait()
    return errors


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        report(UsageError(len(args) + 1), sys.stderr)
        return 1
    for error in run_pipeline(*args):
        report(error, sys.stderr)
    return 0