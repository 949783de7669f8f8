"""Statement recognition and tree building for YANG files."""

from .statement_matcher import Keyword, Statement, match_statement, tokenize, MODULE_PATTERN
from .tree_builder import TreeBuilder, build_module, parse_yang_file, parse_yang_string

__all__ = [
    "Keyword",
    "Statement",
    "match_statement",
    "tokenize",
    "MODULE_PATTERN",
    "TreeBuilder",
    "build_module",
    "parse_yang_file",
    "parse_yang_string",
]
