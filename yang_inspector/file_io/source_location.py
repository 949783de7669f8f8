from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def _infer_workspace_root(path: Path) -> Optional[Path]:
    """Infer a root directory to make reported paths relative."""

    env_root = os.environ.get("YANG_INSPECTOR_SOURCE_ROOT")
    if env_root:
        return Path(env_root)

    return None


def _format_file_path(path: Path) -> str:
    root = _infer_workspace_root(path)
    if not root:
        return str(path)

    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc or loc.file_path is None:
        return ""

    file_path = _format_file_path(Path(loc.file_path))
    if loc.line is not None and loc.column is not None:
        return f" (source= {file_path}:{loc.line}:{loc.column})"
    if loc.line is not None:
        return f" (source= {file_path}:{loc.line})"
    return f" (source= {file_path})"
