"""Finding PATH in an environment and resolving command names against it."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from typing import Optional, Union

from pipex.libft.words import split

Environment = Union[Mapping[str, str], Iterable[str]]

_PATH_PREFIX = "PATH="


class PathLookupError(LookupError):
    """PATH is missing, or a command is not found in any of its directories."""


def get_path(env: Environment) -> Optional[str]:
    """The value of PATH in ``env``, or None when it is not set.

    ``env`` is either a mapping of names to values or a sequence of
    ``NAME=value`` entries, in which case the first PATH entry wins.
    """
    if isinstance(env, Mapping):
        return env.get("PATH")
    for entry in env:
        if entry.startswith(_PATH_PREFIX):
            return entry[len(_PATH_PREFIX):]
    return None


def create_paths(env: Environment) -> list[str]:
    """The non-empty directories listed in PATH, in order.

    Raises PathLookupError when PATH is not set.
    """
    value = get_path(env)
    if value is None:
        raise PathLookupError("PATH is not set")
    return split(value, ":")


def complete_path(directory: str, cmd: str) -> str:
    """``directory`` and ``cmd`` joined with a slash."""
    return f"{directory}/{cmd}"


def get_correct_path(paths: Sequence[str], cmd: str, is_path: bool = False) -> str:
    """The first ``directory/cmd`` in ``paths`` that is executable.

    When ``is_path`` is true the command already names a file and is
    returned as it is. Raises PathLookupError when nothing matches.
    """
    if is_path:
        return cmd
    for directory in paths:
        candidate = complete_path(directory, cmd)
        if os.access(candidate, os.X_OK):
            return candidate
    raise PathLookupError(f"{cmd}: command not found")