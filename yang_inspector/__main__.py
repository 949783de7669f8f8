#!/usr/bin/env python3
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

"""Command line entry point: ``python -m yang_inspector {build,validate} FILE``."""

import argparse
import sys
from typing import List

from .config import load_config
from .exceptions import ConfigurationError, SyntaxValidationError
from .file_io.module_json import dump_module
from .file_io.template_renderer import TemplateRenderer
from .linter.syntax_validator import validate_syntax
from .parsing.tree_builder import parse_yang_file


def _run_build(args, config) -> int:
    try:
        module = parse_yang_file(args.file, encoding=config.encoding)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        return 2

    if module is None:
        print(f"Error: no module declaration found in {args.file}", file=sys.stderr)
        return 1

    if args.format == 'json':
        print(dump_module(module))
    else:
        sys.stdout.write(TemplateRenderer().render_module_tree(module))
    return 0


def _run_validate(args, config) -> int:
    try:
        validate_syntax(args.file, stream=sys.stdout, config=config)
    except SyntaxValidationError:
        return 1
    except OSError:
        # already logged by validate_syntax
        return 2
    return 0


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog='yang-inspector',
        description='Build the node tree of a YANG file or check its syntax',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='YAML configuration file (default: $YANG_INSPECTOR_CONFIG or environment)',
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    build_parser = subparsers.add_parser('build', help='Print the module tree')
    build_parser.add_argument('file', help='YANG file to read')
    build_parser.add_argument(
        '--format',
        choices=['tree', 'json'],
        default='tree',
        help='Output format (default: tree)',
    )

    validate_parser = subparsers.add_parser('validate', help='Check the file syntax')
    validate_parser.add_argument('file', help='YANG file to check')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    config.set_logging()

    if args.command == 'build':
        sys.exit(_run_build(args, config))
    sys.exit(_run_validate(args, config))


if __name__ == '__main__':
    main()
