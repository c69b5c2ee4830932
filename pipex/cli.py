"""Command-line entry point: ``infile cmd1 ... cmdN outfile`` or a here-document form."""

from __future__ import annotations

import sys
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from pipex.heredoc import read_heredoc
from pipex.pipeline import Pipeline, PipelineError

HEREDOC_KEYWORD = "here_doc"
USAGE = "infile cmd1 cmd2 ... cmdN outfile"
HEREDOC_USAGE = "here_doc LIMITER cmd1 cmd2 ... cmdN outfile"

# Argument counts, not counting the program name.
_MIN_ARGS = 4
_MIN_HEREDOC_ARGS = 5


class UsageError(PipelineError):
    """The command line does not describe a pipeline."""


def _is_heredoc(argv: Sequence[str]) -> bool:
    return bool(argv) and argv[0][: len(HEREDOC_KEYWORD)] == HEREDOC_KEYWORD


def parse_args(
    argv: Sequence[str],
    env: Optional[Mapping[str, str]] = None,
    stdin: Optional[Union[int, Any]] = None,
) -> Pipeline:
    """Build the pipeline that ``argv`` describes.

    ``argv`` excludes the program name. When its first word starts with
    ``here_doc``, the second is the limiter and the here-document is read
    from ``stdin`` (standard input by default) straight away. Raises
    UsageError when there are too few arguments.
    """
    args = list(argv)
    if _is_heredoc(args):
        if len(args) < _MIN_HEREDOC_ARGS:
            raise UsageError(HEREDOC_USAGE)
        data = read_heredoc(args[1], stdin)
        return Pipeline(
            commands=args[2:-1], outfile=args[-1], heredoc=data, env=env
        )
    if len(args) < _MIN_ARGS:
        raise UsageError(USAGE)
    return Pipeline(commands=args[1:-1], outfile=args[-1], infile=args[0], env=env)


def main(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run the pipeline given on the command line; 1 on a usage error, else 0."""
    args = sys.argv[1:] if argv is None else argv
    try:
        pipeline = parse_args(args, env)
    except UsageError as exc:
        sys.stderr.write(f"{exc}\n")
        sys.stderr.flush()
        return 1
    pipeline.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())