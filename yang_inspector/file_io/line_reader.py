"""Line splitting shared by the build and validate paths."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

COMMENT_PREFIX = "//"


def iter_significant_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str, str]]:
    """Yield (line_number, raw_line, trimmed_line) for lines worth inspecting.

    Blank lines and lines whose trimmed form starts with ``//`` are skipped.
    Line numbers are 1-based and count every physical line.
    """
    for line_number, line in enumerate(lines, start=1):
        raw = line.rstrip("\r\n")
        stripped = raw.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        yield line_number, raw, stripped


def split_lines(content: str) -> List[str]:
    """Split text the way a file opened in text mode is split.

    Only ``\\n``, ``\\r`` and ``\\r\\n`` end a line; form feeds and other
    characters that ``str.splitlines`` treats as breaks stay in the line.
    """
    return [line.rstrip("\n") for line in io.StringIO(content, newline=None)]


def read_lines(file_path: Union[str, Path], encoding: Optional[str] = None) -> List[str]:
    """Read all lines of a text file, closing it before returning.

    OSError (missing file, permission denied, ...) propagates unchanged.
    """
    with open(file_path, "r", encoding=encoding) as stream:
        return [line.rstrip("\n") for line in stream]
