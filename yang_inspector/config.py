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

"""Configuration management for the YANG inspector."""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import jsonschema
import yaml

from .exceptions import ConfigurationError
from .rules import SyntaxRule
from .utils.json_schema_loader import load_schema
from .utils.logging_utils import configure_split_stream_logging

CONFIG_ENV_VAR = 'YANG_INSPECTOR_CONFIG'


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(',') if item.strip())


@dataclass(frozen=True)
class InspectorConfig:
    """Configuration for parsing, linting and logging."""
    log_level: str = "INFO"
    print_level: str = "WARNING"
    disabled_rules: Tuple[str, ...] = ()
    file_extensions: Tuple[str, ...] = (".yang",)
    encoding: Optional[str] = None

    def __post_init__(self):
        unknown = [rule for rule in self.disabled_rules if rule not in SyntaxRule.ALL]
        if unknown:
            raise ConfigurationError(
                f"Unknown lint rule(s): {', '.join(unknown)}. "
                f"Expected one of: {', '.join(SyntaxRule.ALL)}"
            )

    @classmethod
    def from_env(cls) -> 'InspectorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('YANG_INSPECTOR_LOG_LEVEL', 'INFO'),
            print_level=os.getenv('YANG_INSPECTOR_PRINT_LEVEL', 'WARNING'),
            disabled_rules=_split_list(os.getenv('YANG_INSPECTOR_DISABLED_RULES', '')),
        )

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> 'InspectorConfig':
        """Create configuration from a YAML file.

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or does not match the configuration schema
        """
        path = Path(file_path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as stream:
                data = yaml.safe_load(stream)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Failed to parse YAML file {path}: {exc}") from exc

        if data is None:
            data = {}

        try:
            jsonschema.validate(instance=data, schema=load_schema("config"))
        except jsonschema.ValidationError as exc:
            location = "/" + "/".join(str(p) for p in exc.absolute_path) if exc.absolute_path else "/"
            raise ConfigurationError(f"Invalid configuration {path} at {location}: {exc.message}") from exc

        for key in ('disabled_rules', 'file_extensions'):
            if key in data:
                data[key] = tuple(data[key])
        return cls(**data)

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('yang_inspector')


def load_config(file_path: Optional[Union[str, Path]] = None) -> InspectorConfig:
    """Load configuration from ``file_path``, the file named by
    ``YANG_INSPECTOR_CONFIG``, or the environment, in that order."""
    if file_path is None:
        file_path = os.getenv(CONFIG_ENV_VAR) or None
    if file_path is not None:
        return InspectorConfig.from_file(file_path)
    return InspectorConfig.from_env()
