"""The interactive read, split and execute loop."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from cellshell.builtins import find_builtin

DELIMITER = " "


def make_prompt(cwd: str) -> str:
    """The prompt shown before each command line."""
    return f"{cwd} $> "


def _current_dir() -> str:
    try:
        return os.getcwd()
    except OSError as exc:
        print(f"getcwd failed: {exc.strerror}", file=sys.stderr)
        return ""


def read_line(input_fn: Callable[[str], str] | None = None) -> str | None:
    """Show the prompt and read one command line.

    Returns None at end of input, after printing ``[EOF]``.
    """
    reader = input if input_fn is None else input_fn
    try:
        return reader(make_prompt(_current_dir()))
    except EOFError:
        print("[EOF]")
        return None


def split_line(line: str, out: TextIO | None = None) -> list[str]:
    """Split a line on spaces, dropping empty pieces, and list the tokens."""
    tokens = [piece for piece in line.split(DELIMITER) if piece]
    stream = sys.stdout if out is None else out
    for position, token in enumerate(tokens):
        stream.write(f"Token[{position}]: {token}\n")
    return tokens


def launch(args: Sequence[str]) -> int:
    """Run an external program, wait for it and return its exit status.

    A program that cannot be started reports the error and gives status 1.
    """
    if not args:
        raise ValueError("execvp: invalid arguments")
    try:
        completed = subprocess.run(list(args), check=False)
    except OSError as exc:
        print(f"child processus failed: {exc.strerror}", file=sys.stderr)
        return 1
    code = completed.returncode
    return code if code >= 0 else -code


def execute(args: Sequence[str]) -> int:
    """Run a builtin when one matches the command name, else a program."""
    if not args:
        return 0
    builtin = find_builtin(args[0])
    if builtin is not None:
        return builtin(args)
    return launch(args)


def _enable_history() -> None:
    if not sys.stdin.isatty():
        return
    try:
        import readline  # noqa: F401  (gives input() line editing and history)
    except ImportError:
        pass


def main(argv: Sequence[str] | None = None) -> int:
    """Run the shell until end of input."""
    arguments = sys.argv[1:] if argv is None else list(argv)
    if arguments:
        print("This program does not accept arguments")
        return 0
    _enable_history()
    while (line := read_line()) is not None:
        execute(split_line(line))
    return 0


if __name__ == "__main__":
    sys.exit(main())