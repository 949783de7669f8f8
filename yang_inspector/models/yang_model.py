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

"""Entity types produced by parsing a YANG file."""

from typing import List, Optional, Tuple


class NodeKind:
    """Kinds of schema node that open their own scope."""
    CONTAINER = "container"
    LEAF = "leaf"
    LEAF_LIST = "leaf-list"
    LIST = "list"

    ALL = (CONTAINER, LEAF, LEAF_LIST, LIST)


class YangNode:
    """A declared schema element (container, leaf, leaf-list or list).

    ``name`` and ``kind`` are fixed at creation. ``data_type``, ``mandatory``
    and ``description`` start unset and are filled in by sub-statements while
    the node is the innermost open scope. Children can only be appended.
    """

    def __init__(self, name: str, kind: str):
        if kind not in NodeKind.ALL:
            raise ValueError(f"Unknown node kind: {kind}")
        self._name = name
        self._kind = kind
        self.data_type: Optional[str] = None
        self.mandatory: Optional[bool] = None
        self.description: Optional[str] = None
        self._children: List["YangNode"] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def children(self) -> Tuple["YangNode", ...]:
        return tuple(self._children)

    def add_child(self, child: "YangNode") -> None:
        self._children.append(child)

    def iter_tree(self, depth: int = 0):
        """Yield (depth, node) pairs for this node and its descendants, pre-order."""
        yield depth, self
        for child in self._children:
            yield from child.iter_tree(depth + 1)

    def __repr__(self) -> str:
        return f"YangNode(name={self._name!r}, kind={self._kind!r}, children={len(self._children)})"


class YangModule:
    """The parsed top-level schema unit."""

    def __init__(self, name: str):
        self._name = name
        # last write wins for both
        self.namespace: Optional[str] = None
        self.prefix: Optional[str] = None
        self._imports: List[str] = []
        self._nodes: List[YangNode] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def imports(self) -> Tuple[str, ...]:
        return tuple(self._imports)

    @property
    def nodes(self) -> Tuple[YangNode, ...]:
        return tuple(self._nodes)

    def add_import(self, module_name: str) -> None:
        self._imports.append(module_name)

    def add_node(self, node: YangNode) -> None:
        self._nodes.append(node)

    def iter_nodes(self):
        """Yield (depth, node) for every node in the module, pre-order."""
        for node in self._nodes:
            yield from node.iter_tree()

    def __repr__(self) -> str:
        return f"YangModule(name={self._name!r}, nodes={len(self._nodes)})"
