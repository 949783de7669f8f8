"""Shared fixtures for yang_inspector tests."""

import logging

import pytest


EXAMPLE_LINES = [
    'module m {',
    '  namespace "urn:x";',
    '  prefix x;',
    '  container c {',
    '    leaf l {',
    '      type string;',
    '      mandatory true;',
    '      description "d";',
    '    }',
    '  }',
    '}',
]

EXAMPLE_TEXT = "\n".join(EXAMPLE_LINES) + "\n"


@pytest.fixture
def write_yang(tmp_path):
    """Return a helper that writes lines to a .yang file and returns its path."""

    def _write(lines, name="example.yang"):
        path = tmp_path / name
        if isinstance(lines, str):
            path.write_text(lines)
        else:
            path.write_text("\n".join(lines) + "\n")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for var in (
        "YANG_INSPECTOR_CONFIG",
        "YANG_INSPECTOR_LOG_LEVEL",
        "YANG_INSPECTOR_PRINT_LEVEL",
        "YANG_INSPECTOR_DISABLED_RULES",
        "YANG_INSPECTOR_SOURCE_ROOT",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
