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

"""Line-level statement recognition.

Each significant line (trimmed, not blank, not a ``//`` comment) is matched
against an ordered table of precompiled patterns; the first rule that matches
wins. Statements never span lines.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Pattern, Tuple

from ..file_io.line_reader import iter_significant_lines


class Keyword:
    """Statement kinds the matcher can emit."""
    MODULE = "module"
    NAMESPACE = "namespace"
    PREFIX = "prefix"
    IMPORT = "import"
    CONTAINER = "container"
    LEAF = "leaf"
    LEAF_LIST = "leaf-list"
    LIST = "list"
    TYPE = "type"
    MANDATORY = "mandatory"
    DESCRIPTION = "description"
    CLOSE = "}"

    # statements that apply to the innermost open node
    NODE_PROPERTIES = (TYPE, MANDATORY, DESCRIPTION)


@dataclass(frozen=True)
class Statement:
    keyword: str
    argument: Optional[str] = None
    line: Optional[int] = None  # 1-based


@dataclass(frozen=True)
class StatementRule:
    keyword: str
    pattern: Pattern[str]

    def match(self, line: str) -> Optional[str]:
        found = self.pattern.match(line)
        if found is None:
            return None
        return found.group(1)


MODULE_PATTERN = re.compile(r"^\s*module\s+(\S+)\s*\{")

# Evaluation order is significant: `leaf` must never shadow `leaf-list`,
# and node properties come after every scope-opening statement.
STATEMENT_RULES: Tuple[StatementRule, ...] = (
    StatementRule(Keyword.MODULE, MODULE_PATTERN),
    StatementRule(Keyword.NAMESPACE, re.compile(r'^\s*namespace\s+"([^"]+)"\s*;')),
    StatementRule(Keyword.PREFIX, re.compile(r"^\s*prefix\s+(\S+)\s*;")),
    StatementRule(Keyword.IMPORT, re.compile(r"^\s*import\s+(\S+)\s*\{")),
    StatementRule(Keyword.CONTAINER, re.compile(r"^\s*container\s+(\S+)\s*\{")),
    StatementRule(Keyword.LEAF, re.compile(r"^\s*leaf\s+(\S+)\s*\{")),
    StatementRule(Keyword.LEAF_LIST, re.compile(r"^\s*leaf-list\s+(\S+)\s*\{")),
    StatementRule(Keyword.LIST, re.compile(r"^\s*list\s+(\S+)\s*\{")),
    StatementRule(Keyword.TYPE, re.compile(r"^\s*type\s+(\S+)\s*;")),
    StatementRule(Keyword.MANDATORY, re.compile(r"^\s*mandatory\s+(true|false)\s*;")),
    StatementRule(Keyword.DESCRIPTION, re.compile(r'^\s*description\s+"([^"]+)"\s*;')),
)


def match_statement(
    line: str,
    *,
    allow_module_header: bool = True,
    line_number: Optional[int] = None,
) -> Optional[Statement]:
    """Match one trimmed line against the statement rules.

    Args:
        line: Trimmed, non-blank, non-comment line
        allow_module_header: False once a module header has already been seen
        line_number: Optional 1-based line number recorded on the statement

    Returns:
        The first matching Statement, or None if nothing matched
    """
    for rule in STATEMENT_RULES:
        if rule.keyword == Keyword.MODULE and not allow_module_header:
            continue
        argument = rule.match(line)
        if argument is not None:
            return Statement(rule.keyword, argument, line_number)

    if line == "}":
        return Statement(Keyword.CLOSE, None, line_number)

    return None


def tokenize(lines: Iterable[str]) -> Iterator[Statement]:
    """Turn raw lines into a stream of recognized statements.

    Unrecognized lines are dropped silently. Only the first module header is
    reported; later ``module x {`` lines match nothing.
    """
    module_seen = False
    for line_number, _raw, stripped in iter_significant_lines(lines):
        statement = match_statement(
            stripped,
            allow_module_header=not module_seen,
            line_number=line_number,
        )
        if statement is None:
            continue
        if statement.keyword == Keyword.MODULE:
            module_seen = True
        yield statement
