"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Mapping, Sequence
from typing import TextIO

Builtin = Callable[[Sequence[str]], int]


def _target(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def echo(args: Sequence[str] | None, out: TextIO | None = None) -> int:
    """Print the arguments after the command name, space separated.

    Returns 0, or 1 when no argument list is given.
    """
    if args is None:
        return 1
    stream = _target(out)
    stream.write(" ".join(args[1:]))
    stream.write("\n")
    return 0


def env(args: Sequence[str] | None,
        environ: Mapping[str, str] | None = None,
        out: TextIO | None = None) -> int:
    """Print every environment variable as NAME=VALUE, one per line.

    Uses the process environment unless ``environ`` is given.
    """
    variables = os.environ if environ is None else environ
    stream = _target(out)
    for name, value in variables.items():
        stream.write(f"{name}={value}\n")
    return 0


def exit_shell(args: Sequence[str] | None) -> int:
    """Leave the shell with a success status."""
    raise SystemExit(0)


_BUILTINS: dict[str, Builtin] = {
    "echo": echo,
    "env": env,
    "exit": exit_shell,
}


def find_builtin(name: str) -> Builtin | None:
    """The builtin command called ``name``, or None if there is none."""
    return _BUILTINS.get(name)