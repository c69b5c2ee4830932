"""Running a chain of commands connected by pipes, between an input and an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import IO, Any, Optional, TextIO, Union

from pipex.libft.words import split
from pipex.paths import PathLookupError, create_paths, get_correct_path

EXIT_FAILURE = 1
EXIT_ABORT = 100
OUTFILE_MODE = 0o777

PathLike = Union[str, "os.PathLike[str]"]


class PipelineError(Exception):
    """A pipeline or one of its commands is malformed."""


def resolve_command(cmd: str, paths: Sequence[str]) -> tuple[str, list[str]]:
    """The executable to run for ``cmd`` and its argument list.

    ``cmd`` is split on spaces. A first word starting with ``/`` or ``.``
    names the file directly; any other is looked up in ``paths``.
    Raises PipelineError for an empty command and PathLookupError when
    the program is not found.
    """
    argv = split(cmd, " ")
    if not argv:
        raise PipelineError(f"empty command: {cmd!r}")
    is_path = argv[0].startswith(("/", "."))
    return get_correct_path(paths, argv[0], is_path), argv


@dataclass
class Pipeline:
    """Commands joined by pipes, reading ``infile`` or here-document data.

    The output file is truncated, or appended to when the input is a
    here-document. Each command is resolved on its own; one that fails
    reports to ``stderr`` and the commands after it read an empty input.
    """

    commands: Sequence[str]
    outfile: PathLike
    infile: Optional[PathLike] = None
    heredoc: Optional[bytes] = None
    env: Optional[Mapping[str, str]] = None
    stderr: Optional[TextIO] = None
    _environment: dict = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.commands = list(self.commands)
        if len(self.commands) < 2:
            raise PipelineError("a pipeline needs at least two commands")
        if (self.infile is None) == (self.heredoc is None):
            raise PipelineError("give exactly one of an input file or here-document data")
        self._environment = dict(os.environ if self.env is None else self.env)

    def _report(self, message: str, exc: BaseException) -> None:
        stream = sys.stderr if self.stderr is None else self.stderr
        stream.write(f"{message}: {exc}\n")
        stream.flush()

    def _outfile_flags(self) -> int:
        mode = os.O_APPEND if self.heredoc is not None else os.O_TRUNC
        return os.O_RDWR | os.O_CREAT | mode

    def _start(
        self, index: int, command: str, upstream: Optional[IO[bytes]], last: bool
    ) -> tuple[Optional[subprocess.Popen], int]:
        env = self._environment
        try:
            paths = create_paths(env)
        except PathLookupError as exc:
            self._report("paths fail", exc)
            return None, EXIT_FAILURE
        try:
            program, argv = resolve_command(command, paths)
        except (PathLookupError, PipelineError) as exc:
            self._report("correct path fail", exc)
            return None, EXIT_FAILURE
        with ExitStack() as stack:
            stdin: Any
            if index == 0:
                if self.heredoc is not None:
                    stdin = subprocess.PIPE
                else:
                    try:
                        stdin = stack.enter_context(open(self.infile, "rb"))
                    except OSError as exc:
                        self._report("open infile fail", exc)
                        return None, EXIT_ABORT
            else:
                stdin = upstream if upstream is not None else subprocess.DEVNULL
            stdout: Any
            if last:
                try:
                    fd = os.open(self.outfile, self._outfile_flags(), OUTFILE_MODE)
                except OSError as exc:
                    self._report("open outfile fail", exc)
                    return None, EXIT_ABORT
                stack.callback(os.close, fd)
                stdout = fd
            else:
                stdout = subprocess.PIPE
            try:
                proc = subprocess.Popen(
                    argv, executable=program, stdin=stdin, stdout=stdout, env=env
                )
            except OSError as exc:
                self._report("execve fail", exc)
                return None, EXIT_ABORT
        return proc, 0

    def _feed(self, proc: subprocess.Popen) -> None:
        assert proc.stdin is not None
        try:
            proc.stdin.write(self.heredoc or b"")
        except BrokenPipeError:
            pass
        finally:
            try:
                proc.stdin.close()
            except BrokenPipeError:
                pass

    def run(self) -> list[int]:
        """Run every command and wait for all of them.

        Returns one exit status per command: the process's own, or 1 when
        PATH or the program could not be found and 100 when a file could
        not be opened or the program could not be started.
        """
        statuses: list[int] = []
        procs: list[Optional[subprocess.Popen]] = []
        upstream: Optional[IO[bytes]] = None
        feed: Optional[subprocess.Popen] = None
        last_index = len(self.commands) - 1
        try:
            for index, command in enumerate(self.commands):
                proc, status = self._start(index, command, upstream, index == last_index)
                if upstream is not None:
                    upstream.close()
                    upstream = None
                statuses.append(status)
                procs.append(proc)
                if proc is None:
                    continue
                if index == 0 and self.heredoc is not None:
                    feed = proc
                if index != last_index:
                    upstream = proc.stdout
        finally:
            if upstream is not None:
                upstream.close()
        if feed is not None:
            self._feed(feed)
        for index, proc in enumerate(procs):
            if proc is not None:
                statuses[index] = proc.wait()
        return statuses