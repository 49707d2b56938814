"""Running a shell command and collecting its output line by line."""

from __future__ import annotations

import argparse
import os
import subprocess
from typing import Iterator, Optional, Sequence

from .utilities import cmdclean, file_exists

DEFAULT_SCRIPT = "/usr/bin/script"
SEPARATOR = "----"


def wrap_command(cmd: str, script_path: str = DEFAULT_SCRIPT) -> str:
    """Shell line that runs ``cmd`` (under ``script`` when available) with stderr merged."""
    if file_exists(script_path):
        return f"{script_path} -q -c {cmdclean(cmd)} /dev/null 2>&1"
    return f"/bin/sh -c {cmdclean(cmd)} 2>&1"


def run_lines(cmd: str, script_path: str = DEFAULT_SCRIPT) -> Iterator[str]:
    """Run ``cmd`` and yield each line of its output without line endings."""
    with subprocess.Popen(wrap_command(cmd, script_path), shell=True,
                          stdout=subprocess.PIPE, text=True, errors="replace",
                          newline="") as process:
        assert process.stdout is not None
        pending = ""
        for chunk in process.stdout:
            pending += chunk
            *complete, pending = pending.splitlines(keepends=True) + [""] \
                if pending.endswith(("\n", "\r")) else [*pending.splitlines(keepends=True)]
            for line in complete:
                stripped = line.rstrip("\r\n")
                if stripped or line.strip("\r\n") == "" and line != "\r":
                    yield stripped
        if pending:
            yield pending.rstrip("\r\n")


def _sync() -> None:
    if hasattr(os, "sync"):
        os.sync()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a command, print its output, then a separator and ``Done``."""
    parser = argparse.ArgumentParser(description="Run a command and show its output.")
    parser.add_argument("--script", default=DEFAULT_SCRIPT,
                        help="path of the 'script' utility used to get a terminal")
    parser.add_argument("command", nargs="+", help="command line to run")
    args = parser.parse_args(argv)

    for line in run_lines(" ".join(args.command), args.script):
        print(line)
    _sync()
    print(SEPARATOR)
    print("Done")
    return 0