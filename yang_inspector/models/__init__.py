"""Data model for parsed YANG modules."""

from .yang_model import NodeKind, YangModule, YangNode

__all__ = ["NodeKind", "YangModule", "YangNode"]
