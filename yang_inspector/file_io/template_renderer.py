"""Template rendering utilities for module tree output."""

from __future__ import annotations

import os

from jinja2 import Environment, FileSystemLoader

from ..models import NodeKind, YangModule, YangNode

# Suffixes used by the tree view, after pyang's tree format.
_KIND_MARKERS = {
    NodeKind.CONTAINER: "",
    NodeKind.LEAF: "",
    NodeKind.LEAF_LIST: "*",
    NodeKind.LIST: "*",
}


def _get_template_directories() -> list[str]:
    base_dir = os.path.dirname(os.path.abspath(__file__))
    template_dir = os.path.abspath(os.path.join(base_dir, "../template"))
    return [template_dir] if os.path.exists(template_dir) else []


def node_label(node: YangNode) -> str:
    """One-line label for a node, e.g. ``name?  string`` or ``items*``."""

    label = f"{node.name}{_KIND_MARKERS[node.kind]}"
    if node.kind == NodeKind.LEAF and node.mandatory is not True:
        label += "?"
    if node.data_type:
        label += f"  {node.data_type}"
    return label


class TemplateRenderer:
    """Unified template rendering utility."""

    def __init__(self, template_dir: str | list[str] | None = None):
        if template_dir is None:
            template_dirs = _get_template_directories()
        elif isinstance(template_dir, str):
            template_dirs = [template_dir]
        else:
            template_dirs = list(template_dir)

        self.template_dirs = template_dirs
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
        )
        self.env.filters["node_label"] = node_label

    def render_template(self, template_name: str, **kwargs) -> str:
        template = self.env.get_template(template_name)
        return template.render(**kwargs)

    def render_module_tree(self, module: YangModule) -> str:
        return self.render_template(
            "module_tree.txt.jinja2",
            module=module,
            entries=list(module.iter_nodes()),
        )
