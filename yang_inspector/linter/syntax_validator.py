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

"""Heuristic syntax checks for YANG files.

This is a lint pass, not a parser. It counts braces, tracks whether a double
quote is left open, checks that a module header exists, and flags a handful
of suspicious semicolon patterns using plain substring tests. Findings can be
both incomplete and wrong on unusual but legal input.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO, Union

from ..config import InspectorConfig
from ..exceptions import SyntaxValidationError
from ..file_io.line_reader import iter_significant_lines, read_lines
from ..file_io.source_location import SourceLocation, format_source
from ..parsing.statement_matcher import MODULE_PATTERN
from ..rules import SyntaxRule
from .report import LintResult

logger = logging.getLogger(__name__)

WARNING_GLYPH = "⚠"
ERROR_GLYPH = "✗"
SUCCESS_GLYPH = "✓"


def _toggles_quote(raw_line: str, in_quotes: bool) -> bool:
    """Flip the open-quote state once per unescaped double quote."""
    for i, char in enumerate(raw_line):
        if char == '"' and (i == 0 or raw_line[i - 1] != '\\'):
            in_quotes = not in_quotes
    return in_quotes


class SyntaxValidator:
    """Line-by-line syntax linter."""

    def __init__(self, config: Optional[InspectorConfig] = None):
        self.config = config if config is not None else InspectorConfig()
        self._disabled = frozenset(self.config.disabled_rules)

    def _enabled(self, rule: str) -> bool:
        return rule not in self._disabled

    def check(self, lines: Iterable[str], result: Optional[LintResult] = None) -> LintResult:
        """Run every enabled rule over the given lines.

        Args:
            lines: Raw file lines
            result: LintResult to add errors/warnings to; a new one if None

        Returns:
            The LintResult holding the findings
        """
        if result is None:
            result = LintResult()

        brace_count = 0
        in_quotes = False
        module_seen = False

        for line_number, raw, line in iter_significant_lines(lines):
            in_quotes = _toggles_quote(raw, in_quotes)
            brace_count += line.count("{") - line.count("}")

            if MODULE_PATTERN.match(line):
                module_seen = True

            self._check_line(line, line_number, result)

        if not module_seen and self._enabled(SyntaxRule.MISSING_MODULE):
            result.add_error("No module declaration found in the file", rule=SyntaxRule.MISSING_MODULE)

        if brace_count != 0 and self._enabled(SyntaxRule.UNBALANCED_BRACES):
            if brace_count > 0:
                detail = f"{brace_count} more opening brace(s)"
            else:
                detail = f"{abs(brace_count)} more closing brace(s)"
            result.add_error(f"Unbalanced braces in YANG file - {detail}", rule=SyntaxRule.UNBALANCED_BRACES)

        if in_quotes and self._enabled(SyntaxRule.UNCLOSED_QUOTES):
            result.add_error("Unclosed quotes in the file", rule=SyntaxRule.UNCLOSED_QUOTES)

        return result

    def _check_line(self, line: str, line_number: int, result: LintResult) -> None:
        terminated = line.endswith(";")
        opens_block = "{" in line
        has_quote = '"' in line

        def error(rule: str, message: str) -> None:
            if self._enabled(rule):
                result.add_error(message, line=line_number, rule=rule)

        def warning(rule: str, message: str) -> None:
            if self._enabled(rule):
                result.add_warning(message, line=line_number, rule=rule)

        if "namespace" in line and not terminated and not opens_block:
            error(SyntaxRule.NAMESPACE_SEMICOLON, "Missing semicolon after namespace declaration")

        if "prefix" in line and not terminated and not opens_block:
            error(SyntaxRule.PREFIX_SEMICOLON, "Missing semicolon after prefix declaration")

        if "description" in line and has_quote and not terminated and not opens_block:
            error(SyntaxRule.DESCRIPTION_SEMICOLON, "Missing semicolon after description")

        if "type" in line and not terminated and not opens_block:
            error(SyntaxRule.TYPE_SEMICOLON, "Missing semicolon after type declaration")

        if "description" in line and not has_quote:
            warning(SyntaxRule.DESCRIPTION_QUOTES, "Description might be missing quotes")

        if ";;" in line:
            warning(SyntaxRule.DOUBLE_SEMICOLON, "Double semicolon detected")

        if ";" in line and not terminated and not opens_block:
            warning(SyntaxRule.MISPLACED_SEMICOLON, "Semicolon might be misplaced")

    def lint(self, file_path: Path, result: LintResult) -> LintResult:
        """Lint a file on disk, adding findings to ``result``.

        Raises:
            OSError: If the file cannot be read
        """
        return self.check(read_lines(file_path, encoding=self.config.encoding), result)


def check_syntax(lines: Iterable[str], config: Optional[InspectorConfig] = None) -> LintResult:
    """Check raw lines without printing anything."""
    return SyntaxValidator(config).check(lines)


def write_report(result: LintResult, stream: Optional[TextIO] = None) -> None:
    """Print findings, warnings before errors.

    Raises:
        SyntaxValidationError: If the result holds any error, after printing
    """
    if stream is None:
        stream = sys.stdout

    if result.warnings:
        print("Warnings:", file=stream)
        for warning in result.warnings:
            print(f"  {WARNING_GLYPH} {warning.format()}", file=stream)

    if result.errors:
        print("Errors found:", file=stream)
        for error in result.errors:
            print(f"  {ERROR_GLYPH} {error.format()}", file=stream)
        raise SyntaxValidationError(len(result.errors))

    print(f"{SUCCESS_GLYPH} Basic syntax validation passed", file=stream)
    print(f"{SUCCESS_GLYPH} YANG file syntax is valid", file=stream)


def validate_syntax(
    file_path: Union[str, Path],
    stream: Optional[TextIO] = None,
    config: Optional[InspectorConfig] = None,
) -> LintResult:
    """Validate a YANG file and print the findings.

    Args:
        file_path: Path to the file
        stream: Where findings are written; sys.stdout when None
        config: Inspector configuration; all rules enabled when None

    Returns:
        The LintResult of a passing file (it may still hold warnings)

    Raises:
        OSError: If the file cannot be read; not wrapped
        SyntaxValidationError: If one or more errors were found
    """
    path = Path(file_path)
    validator = SyntaxValidator(config)
    try:
        result = validator.lint(path, LintResult(path))
    except OSError as e:
        logger.error(f"Validation failed: {e}{format_source(SourceLocation(file_path=path))}")
        raise

    logger.debug(
        f"Checked {path}: {len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    )
    write_report(result, stream)
    return result
