"""JSON export of parsed module trees."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from ..models import YangModule, YangNode
from .source_location import SourceLocation, format_source

logger = logging.getLogger(__name__)

# Version of the JSON payload layout produced by module_to_dict.
SCHEMA_VERSION = "1.0"


def node_to_dict(node: YangNode) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "name": node.name,
        "kind": node.kind,
    }
    if node.data_type is not None:
        data["type"] = node.data_type
    if node.mandatory is not None:
        data["mandatory"] = node.mandatory
    if node.description is not None:
        data["description"] = node.description
    data["children"] = [node_to_dict(child) for child in node.children]
    return data


def module_to_dict(module: YangModule) -> Dict[str, Any]:
    """Build a schema-versioned payload describing a module tree."""

    return {
        "schema_version": SCHEMA_VERSION,
        "module": {
            "name": module.name,
            "namespace": module.namespace,
            "prefix": module.prefix,
            "imports": list(module.imports),
            "nodes": [node_to_dict(node) for node in module.nodes],
        },
    }


def dump_module(module: YangModule, indent: Optional[int] = 2) -> str:
    return json.dumps(module_to_dict(module), indent=indent, ensure_ascii=False)


def save_module(output_path: str, module: YangModule) -> None:
    """Save a module tree payload to JSON."""

    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(dump_module(module))
            f.write("\n")
        logger.info(f"Saved module JSON: {output_path}")
    except OSError as e:
        src = SourceLocation(file_path=Path(output_path))
        logger.error(f"Failed to save module JSON: {output_path}: {e}{format_source(src)}")
        raise
