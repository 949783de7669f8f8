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

"""Error reporting for the linter."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional


class Severity:
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    severity: str
    message: str
    line: Optional[int] = None  # 1-based
    rule: Optional[str] = None

    def format(self) -> str:
        """Message text as printed, prefixed with its line when known."""
        if self.line is None:
            return self.message
        return f"Line {self.line}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'message': self.message}
        if self.line is not None:
            data['line'] = self.line
        if self.rule is not None:
            data['rule'] = self.rule
        return data


class LintResult:
    """Container for linting results for a single file."""

    def __init__(self, file_path: Optional[Path] = None):
        """Initialize lint result.

        Args:
            file_path: Path to the file being linted, if it came from disk
        """
        self.file_path = file_path
        self.errors: List[Diagnostic] = []
        self.warnings: List[Diagnostic] = []

    def add_error(self, message: str, line: Optional[int] = None, rule: Optional[str] = None):
        """Add an error message.

        Args:
            message: Error message
            line: Optional line number where error occurred
            rule: Optional id of the rule that produced it
        """
        self.errors.append(Diagnostic(Severity.ERROR, message, line, rule))

    def add_warning(self, message: str, line: Optional[int] = None, rule: Optional[str] = None):
        """Add a warning message.

        Args:
            message: Warning message
            line: Optional line number where warning occurred
            rule: Optional id of the rule that produced it
        """
        self.warnings.append(Diagnostic(Severity.WARNING, message, line, rule))

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Warnings first, then errors, each in the order they were found."""
        return self.warnings + self.errors
