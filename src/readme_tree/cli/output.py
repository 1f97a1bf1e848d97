"""Output sinks for the rendered tree.

The rendered text is written verbatim either to stdout or to a file. A closed
stdout pipe (e.g., when piping to ``head``) surfaces as BrokenPipeError so the
caller can exit with the conventional status.
"""

import os
import sys
from pathlib import Path
from typing import Optional


def write_output(text: str, destination: Optional[Path] = None) -> None:
    """Write ``text`` to ``destination``, or to stdout when it is None.

    Files are written as UTF-8 and overwritten if they exist.

    Raises:
        BrokenPipeError: If stdout is a pipe whose reader has gone away.
        OSError: If the destination file cannot be written.
    """
    if destination is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    with Path(destination).open("w", encoding="utf-8") as f:
        f.write(text)


def silence_stdout() -> None:
    """Point stdout at the null device.

    Used after a broken pipe so the interpreter's final flush of stdout during
    shutdown does not print another error.
    """
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
