# inout/reader.py
import sys
from typing import Optional, TextIO


def read_text(path: Optional[str] = None, stdin: Optional[TextIO] = None) -> str:
    """
    Read the whole formula input as one string.

    :param path: Input file; None or '-' reads from `stdin`.
    :param stdin: Stream used instead of sys.stdin.
    :raises OSError: If the file cannot be read.
    """
    if path is None or path == "-":
        return (stdin or sys.stdin).read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()
