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

"""Builds a YangModule from a stream of statements.

The builder is a single forward pass. Every brace-opening statement pushes a
scope frame tagged with its construct kind (``module``, ``import`` or one of
the node kinds); structural frames also carry the node they opened. A ``}``
line pops one frame, whatever it was. Nothing here validates the input:
malformed files simply produce an odd or empty tree.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..file_io.line_reader import read_lines, split_lines
from ..models import NodeKind, YangModule, YangNode
from .statement_matcher import Keyword, Statement, tokenize

logger = logging.getLogger(__name__)

_NODE_KEYWORDS = {
    Keyword.CONTAINER: NodeKind.CONTAINER,
    Keyword.LEAF: NodeKind.LEAF,
    Keyword.LEAF_LIST: NodeKind.LEAF_LIST,
    Keyword.LIST: NodeKind.LIST,
}


@dataclass
class ScopeFrame:
    tag: str
    node: Optional[YangNode] = None


class TreeBuilder:
    """Reduces statements into a module tree, one statement at a time."""

    def __init__(self):
        self.module: Optional[YangModule] = None
        self._frames: List[ScopeFrame] = []

    @property
    def depth(self) -> int:
        return len(self._frames)

    @property
    def open_tags(self) -> List[str]:
        return [frame.tag for frame in self._frames]

    @property
    def current_node(self) -> Optional[YangNode]:
        """Innermost open node, skipping module/import frames."""
        for frame in reversed(self._frames):
            if frame.node is not None:
                return frame.node
        return None

    def feed(self, statement: Statement) -> None:
        keyword = statement.keyword

        if self.module is None:
            if keyword == Keyword.MODULE:
                self.module = YangModule(statement.argument)
                self._frames.append(ScopeFrame(Keyword.MODULE))
                logger.debug(f"Found module '{statement.argument}' at line {statement.line}")
            return

        if keyword == Keyword.NAMESPACE:
            self.module.namespace = statement.argument
        elif keyword == Keyword.PREFIX:
            self.module.prefix = statement.argument
        elif keyword == Keyword.IMPORT:
            self.module.add_import(statement.argument)
            self._frames.append(ScopeFrame(Keyword.IMPORT))
        elif keyword in _NODE_KEYWORDS:
            self._open_node(statement.argument, _NODE_KEYWORDS[keyword])
        elif keyword in Keyword.NODE_PROPERTIES:
            self._set_property(statement)
        elif keyword == Keyword.CLOSE:
            self._close_scope(statement)

    def _open_node(self, name: str, kind: str) -> None:
        node = YangNode(name, kind)
        parent = self.current_node
        if parent is None:
            self.module.add_node(node)
        else:
            parent.add_child(node)
        self._frames.append(ScopeFrame(kind, node))
        logger.debug(f"Opened {kind} '{name}' at depth {len(self._frames)}")

    def _set_property(self, statement: Statement) -> None:
        node = self.current_node
        if node is None:
            logger.debug(f"Ignoring '{statement.keyword}' outside of any node at line {statement.line}")
            return

        if statement.keyword == Keyword.TYPE:
            node.data_type = statement.argument
        elif statement.keyword == Keyword.MANDATORY:
            node.mandatory = statement.argument == "true"
        elif statement.keyword == Keyword.DESCRIPTION:
            node.description = statement.argument

    def _close_scope(self, statement: Statement) -> None:
        if not self._frames:
            logger.debug(f"Ignoring unmatched closing brace at line {statement.line}")
            return
        frame = self._frames.pop()
        if frame.node is not None:
            logger.debug(f"Closed {frame.tag} '{frame.node.name}' at line {statement.line}")
        else:
            logger.debug(f"Closed {frame.tag} scope at line {statement.line}")

    def build(self, statements: Iterable[Statement]) -> Optional[YangModule]:
        for statement in statements:
            self.feed(statement)
        if self._frames:
            logger.debug(f"Reached end of input with {len(self._frames)} open scope(s)")
        return self.module


def build_module(lines: Iterable[str]) -> Optional[YangModule]:
    """Build a module tree from raw lines; None if no module header was found."""
    return TreeBuilder().build(tokenize(lines))


def parse_yang_string(content: str) -> Optional[YangModule]:
    return build_module(split_lines(content))


def parse_yang_file(file_path: Union[str, Path], encoding: Optional[str] = None) -> Optional[YangModule]:
    """Parse a YANG file into a module tree.

    Args:
        file_path: Path to the file
        encoding: Text encoding; the platform default when None

    Returns:
        The parsed YangModule, or None if the file has no module header

    Raises:
        OSError: If the file cannot be read
    """
    logger.debug(f"Parsing YANG file: {file_path}")
    return build_module(read_lines(file_path, encoding=encoding))
