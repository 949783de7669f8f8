"""Tests for line-level statement recognition."""

import pytest

from yang_inspector.parsing import Keyword, Statement, match_statement, tokenize
from yang_inspector.parsing.statement_matcher import STATEMENT_RULES


class TestMatchStatement:
    """Tests for match_statement."""

    @pytest.mark.parametrize(
        "line, keyword, argument",
        [
            ('module m {', Keyword.MODULE, 'm'),
            ('module m{', Keyword.MODULE, 'm'),
            ('namespace "urn:example:x";', Keyword.NAMESPACE, 'urn:example:x'),
            ('prefix ex;', Keyword.PREFIX, 'ex'),
            ('import ietf-inet-types {', Keyword.IMPORT, 'ietf-inet-types'),
            ('container system {', Keyword.CONTAINER, 'system'),
            ('leaf hostname {', Keyword.LEAF, 'hostname'),
            ('leaf-list servers {', Keyword.LEAF_LIST, 'servers'),
            ('list user {', Keyword.LIST, 'user'),
            ('type string;', Keyword.TYPE, 'string'),
            ('type inet:ip-address ;', Keyword.TYPE, 'inet:ip-address'),
            ('mandatory true;', Keyword.MANDATORY, 'true'),
            ('mandatory false;', Keyword.MANDATORY, 'false'),
            ('description "Host name";', Keyword.DESCRIPTION, 'Host name'),
        ],
    )
    def test_recognized_statements(self, line, keyword, argument):
        """Each supported statement is matched with its argument."""
        statement = match_statement(line)
        assert statement == Statement(keyword, argument)

    def test_leaf_does_not_shadow_leaf_list(self):
        """A leaf-list header is never reported as a leaf."""
        assert match_statement('leaf-list xs {').keyword == Keyword.LEAF_LIST

    def test_trailing_text_after_match_is_allowed(self):
        """Patterns are anchored at the start only."""
        statement = match_statement('container c { // settings')
        assert statement.keyword == Keyword.CONTAINER
        assert statement.argument == 'c'

    def test_closing_brace(self):
        """Only a line that is exactly '}' closes a scope."""
        assert match_statement('}') == Statement(Keyword.CLOSE)
        assert match_statement('};') is None
        assert match_statement('} }') is None

    @pytest.mark.parametrize(
        "line",
        [
            'namespace urn:x;',
            'mandatory maybe;',
            'description unquoted;',
            'leaf hostname',
            'config true;',
            'containers c {',
            'type string',
        ],
    )
    def test_unrecognized_lines(self, line):
        """Anything else is silently ignored."""
        assert match_statement(line) is None

    def test_module_header_can_be_disabled(self):
        """Once a module exists, module headers match nothing."""
        assert match_statement('module other {', allow_module_header=False) is None

    def test_line_number_is_recorded(self):
        statement = match_statement('prefix x;', line_number=7)
        assert statement.line == 7

    def test_rules_are_precompiled_and_ordered(self):
        """The rule table is built once, in priority order."""
        keywords = [rule.keyword for rule in STATEMENT_RULES]
        assert keywords[0] == Keyword.MODULE
        assert keywords.index(Keyword.LEAF) < keywords.index(Keyword.LEAF_LIST)
        assert keywords[-3:] == [Keyword.TYPE, Keyword.MANDATORY, Keyword.DESCRIPTION]
        assert isinstance(STATEMENT_RULES, tuple)


class TestTokenize:
    """Tests for tokenize."""

    def test_skips_blank_and_comment_lines(self):
        lines = [
            '// header comment',
            'module m {',
            '',
            '   // container hidden {',
            '  leaf a {',
            '  }',
            '}',
        ]
        statements = list(tokenize(lines))
        assert [s.keyword for s in statements] == [
            Keyword.MODULE, Keyword.LEAF, Keyword.CLOSE, Keyword.CLOSE,
        ]
        assert [s.line for s in statements] == [2, 5, 6, 7]

    def test_only_first_module_header_is_reported(self):
        statements = list(tokenize(['module a {', 'module b {', '}']))
        assert [s.keyword for s in statements] == [Keyword.MODULE, Keyword.CLOSE]
        assert statements[0].argument == 'a'

    def test_unknown_lines_are_dropped(self):
        statements = list(tokenize(['module m {', 'revision 2024-01-01 {', 'config false;', '}']))
        assert [s.keyword for s in statements] == [Keyword.MODULE, Keyword.CLOSE]
