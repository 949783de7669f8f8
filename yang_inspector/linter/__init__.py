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

"""Linter package for YANG syntax validation."""

import logging
from pathlib import Path
from typing import List, Optional

from ..config import InspectorConfig
from .report import Diagnostic, LintResult, Severity
from .syntax_validator import SyntaxValidator, check_syntax, validate_syntax, write_report

__all__ = [
    'lint_files',
    'check_syntax',
    'validate_syntax',
    'write_report',
    'SyntaxValidator',
    'Diagnostic',
    'LintResult',
    'Severity',
]

logger = logging.getLogger(__name__)


def lint_files(file_paths: List[Path], config: Optional[InspectorConfig] = None) -> List[LintResult]:
    """Lint a list of YANG files.

    Args:
        file_paths: List of file paths to lint
        config: Inspector configuration; all rules enabled when None

    Returns:
        List of LintResult objects, one per file
    """
    results = []

    validator = SyntaxValidator(config)

    for file_path in file_paths:
        result = LintResult(file_path)

        try:
            validator.lint(file_path, result)
        except OSError as e:
            logger.warning(f"Could not read {file_path}: {e}")
            result.add_error(f"Failed to read file: {e}")

        results.append(result)

    return results
