"""File I/O related utilities.

This package groups small modules that primarily deal with reading/writing files and
formatting file-backed diagnostics.
"""

from .line_reader import iter_significant_lines, read_lines, split_lines
from .source_location import SourceLocation, format_source
from .template_renderer import TemplateRenderer, node_label
from .module_json import (
    SCHEMA_VERSION,
    module_to_dict,
    node_to_dict,
    dump_module,
    save_module,
)

__all__ = [
    "iter_significant_lines",
    "read_lines",
    "split_lines",
    "SourceLocation",
    "format_source",
    "TemplateRenderer",
    "node_label",
    "SCHEMA_VERSION",
    "module_to_dict",
    "node_to_dict",
    "dump_module",
    "save_module",
]
