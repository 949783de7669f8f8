# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Structural reader and heuristic syntax checker for a subset of YANG.

Two independent entry points work on the same file:

* :func:`parse_yang_file` builds a :class:`YangModule` tree and never
  validates anything.
* :func:`validate_syntax` lints the file, prints its findings and raises
  :class:`SyntaxValidationError` when any of them is an error.
"""

__version__ = "0.3.0"

from .config import InspectorConfig, load_config
from .exceptions import (
    ConfigurationError,
    SyntaxValidationError,
    ValidationError,
    YangInspectorError,
)
from .linter import LintResult, check_syntax, lint_files, validate_syntax
from .models import NodeKind, YangModule, YangNode
from .parsing import parse_yang_file, parse_yang_string

__all__ = [
    "InspectorConfig",
    "load_config",
    "ConfigurationError",
    "SyntaxValidationError",
    "ValidationError",
    "YangInspectorError",
    "LintResult",
    "check_syntax",
    "lint_files",
    "validate_syntax",
    "NodeKind",
    "YangModule",
    "YangNode",
    "parse_yang_file",
    "parse_yang_string",
]
