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

"""CLI entry point for linting YANG files."""

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import List, Sequence

from ..config import load_config
from ..exceptions import ConfigurationError
from ..file_io.source_location import SourceLocation, format_source
from ..rules import SyntaxRule
from . import lint_files


def find_yang_files(paths: List[str], extensions: Sequence[str]) -> List[Path]:
    """Find all YANG files in given paths."""
    yang_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if any(path.name.endswith(ext) for ext in extensions):
                yang_files.append(path)
            else:
                print(f"Warning: File does not match YANG file pattern: {path}", file=sys.stderr)
        elif path.is_dir():
            for ext in extensions:
                yang_files.extend(path.rglob(f'*{ext}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(yang_files))


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint YANG files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '--config',
        default=None,
        help='YAML configuration file (default: $YANG_INSPECTOR_CONFIG or environment)',
    )
    parser.add_argument(
        '--disable',
        action='append',
        default=[],
        choices=SyntaxRule.ALL,
        metavar='RULE',
        help='Disable a lint rule; may be repeated',
    )

    args = parser.parse_args(argv)

    if not args.paths:
        args.paths = ['.']

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    if args.disable:
        disabled = tuple(dict.fromkeys(config.disabled_rules + tuple(args.disable)))
        config = dataclasses.replace(config, disabled_rules=disabled)

    config.set_logging()

    # Find all YANG files
    yang_files = find_yang_files(args.paths, config.file_extensions)

    if not yang_files:
        print("No YANG files found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(yang_files, config)

    if args.format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [
                {
                    'file': str(r.file_path),
                    'errors': [d.to_dict() for d in r.errors],
                    'warnings': [d.to_dict() for d in r.warnings],
                }
                for r in results
            ]
        }
        print(json.dumps(output, indent=2))
    elif args.format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path},line={error.line or 1}::{error.message}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path},line={warning.line or 1}::{warning.message}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                # same order as validate_syntax: warnings, then errors
                for warning in result.warnings:
                    src = format_source(SourceLocation(file_path=result.file_path, line=warning.line))
                    print(f"  WARNING: {warning.message}{src}")
                for error in result.errors:
                    src = format_source(SourceLocation(file_path=result.file_path, line=error.line))
                    print(f"  ERROR: {error.message}{src}")

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
