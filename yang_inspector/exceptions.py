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

"""Custom exceptions for the YANG inspector."""


class YangInspectorError(Exception):
    """Base exception for yang-inspector related errors."""
    pass


class ConfigurationError(YangInspectorError):
    """Exception raised for invalid inspector configuration files."""
    pass


class ValidationError(YangInspectorError):
    """Exception raised for validation errors."""
    pass


class SyntaxValidationError(ValidationError):
    """Raised once a syntax check has reported one or more errors.

    Individual findings are written out before this is raised; the exception
    only carries how many of them were errors.
    """

    def __init__(self, error_count: int):
        self.error_count = error_count
        super().__init__(f"Validation failed with {error_count} error(s)")
