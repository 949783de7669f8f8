"""Tests for building module trees."""

import logging

import pytest

from yang_inspector import NodeKind, YangModule, YangNode, parse_yang_file, parse_yang_string
from yang_inspector.parsing import Keyword, Statement, TreeBuilder, build_module

from conftest import EXAMPLE_LINES, EXAMPLE_TEXT


class TestEndToEnd:
    """The reference example builds the expected tree."""

    def test_example_module(self, write_yang):
        module = parse_yang_file(write_yang(EXAMPLE_LINES))

        assert isinstance(module, YangModule)
        assert module.name == 'm'
        assert module.namespace == 'urn:x'
        assert module.prefix == 'x'
        assert module.imports == ()
        assert len(module.nodes) == 1

        container = module.nodes[0]
        assert container.name == 'c'
        assert container.kind == NodeKind.CONTAINER
        assert container.data_type is None
        assert len(container.children) == 1

        leaf = container.children[0]
        assert leaf.name == 'l'
        assert leaf.kind == NodeKind.LEAF
        assert leaf.data_type == 'string'
        assert leaf.mandatory is True
        assert leaf.description == 'd'
        assert leaf.children == ()

    def test_string_and_file_agree(self, write_yang):
        from_file = parse_yang_file(write_yang(EXAMPLE_TEXT))
        from_string = parse_yang_string(EXAMPLE_TEXT)
        assert from_file.name == from_string.name
        assert [n.name for _, n in from_file.iter_nodes()] == [n.name for _, n in from_string.iter_nodes()]

    def test_form_feed_does_not_split_string_input(self, write_yang):
        """A form feed inside a line must not end it, for strings or files."""
        text = "module m {\nleaf a {\x0c}\nleaf b {\n}\n}\n"
        from_file = parse_yang_file(write_yang(text))
        from_string = parse_yang_string(text)
        expected = [(0, 'a'), (1, 'b')]
        assert [(d, n.name) for d, n in from_file.iter_nodes()] == expected
        assert [(d, n.name) for d, n in from_string.iter_nodes()] == expected

    def test_carriage_return_line_endings(self):
        module = parse_yang_string("module m {\r\n  leaf a {\r\n  }\r\n}\r\n")
        assert [n.name for _, n in module.iter_nodes()] == ['a']


class TestScopeAttachment:
    """Children attach to whatever scope is open when they are declared."""

    def test_top_level_and_nested_leaves(self):
        module = build_module([
            'module m {',
            '  leaf a {',
            '  }',
            '  container c {',
            '    leaf b {',
            '    }',
            '  }',
            '  leaf d {',
            '  }',
            '}',
        ])
        assert [n.name for n in module.nodes] == ['a', 'c', 'd']
        container = module.nodes[1]
        assert [n.name for n in container.children] == ['b']
        assert module.nodes[2].children == ()

    def test_all_node_kinds(self):
        module = build_module([
            'module m {',
            '  list users {',
            '    leaf name {',
            '      type string;',
            '    }',
            '    leaf-list groups {',
            '      type string;',
            '    }',
            '  }',
            '}',
        ])
        users = module.nodes[0]
        assert users.kind == NodeKind.LIST
        assert [(n.name, n.kind) for n in users.children] == [
            ('name', NodeKind.LEAF),
            ('groups', NodeKind.LEAF_LIST),
        ]

    def test_properties_only_touch_innermost_node(self):
        module = build_module([
            'module m {',
            '  container c {',
            '    leaf l {',
            '      type int32;',
            '    }',
            '    type orphan;',
            '    description "set on the container";',
            '  }',
            '}',
        ])
        container = module.nodes[0]
        leaf = container.children[0]
        assert leaf.data_type == 'int32'
        assert leaf.description is None
        assert container.data_type == 'orphan'
        assert container.description == 'set on the container'

    def test_closed_node_stays_in_tree(self):
        builder = TreeBuilder()
        module = builder.build([
            Statement(Keyword.MODULE, 'm'),
            Statement(Keyword.CONTAINER, 'c'),
            Statement(Keyword.CLOSE),
        ])
        assert builder.current_node is None
        assert builder.open_tags == [Keyword.MODULE]
        assert [n.name for n in module.nodes] == ['c']

    def test_leaf_can_receive_children(self):
        module = build_module([
            'module m {',
            '  leaf a {',
            '    leaf b {',
            '    }',
            '  }',
            '}',
        ])
        assert [n.name for n in module.nodes[0].children] == ['b']


class TestModuleStatements:
    """Module-level statements."""

    def test_imports_are_recorded_in_order(self):
        module = build_module([
            'module m {',
            '  import ietf-yang-types {',
            '  }',
            '  import ietf-inet-types {',
            '  }',
            '}',
        ])
        assert module.imports == ('ietf-yang-types', 'ietf-inet-types')

    def test_import_scope_does_not_own_nodes(self):
        module = build_module([
            'module m {',
            '  import other {',
            '    container c {',
            '    }',
            '  }',
            '}',
        ])
        assert [n.name for n in module.nodes] == ['c']

    def test_prefix_is_unrestricted_and_last_write_wins(self):
        module = build_module([
            'module m {',
            '  prefix x;',
            '  import ietf-inet-types {',
            '    prefix inet;',
            '  }',
            '}',
        ])
        assert module.prefix == 'inet'

    def test_namespace_inside_node_still_sets_module(self):
        module = build_module([
            'module m {',
            '  namespace "urn:a";',
            '  container c {',
            '    namespace "urn:b";',
            '  }',
            '}',
        ])
        assert module.namespace == 'urn:b'

    def test_mandatory_false(self):
        module = build_module(['module m {', 'leaf l {', 'mandatory false;', '}', '}'])
        assert module.nodes[0].mandatory is False


class TestTolerantBuilding:
    """The builder never rejects input."""

    def test_no_module_header_returns_none(self):
        assert build_module(['container c {', '  leaf l {', '  }', '}']) is None

    def test_empty_input_returns_none(self):
        assert parse_yang_string('') is None

    def test_lines_before_module_header_are_ignored(self):
        module = build_module([
            'container early {',
            'prefix early;',
            '}',
            'module m {',
            '  container c {',
            '  }',
            '}',
        ])
        assert module.prefix is None
        assert [n.name for n in module.nodes] == ['c']

    def test_property_without_open_node_is_ignored(self):
        module = build_module(['module m {', '  type string;', '  mandatory true;', '}'])
        assert module.nodes == ()

    def test_second_module_header_is_ignored(self):
        module = build_module([
            'module m {',
            'module other {',
            '  container c {',
            '  }',
            '}',
            'leaf z {',
            '}',
            '}',
        ])
        assert module.name == 'm'
        assert [n.name for n in module.nodes] == ['c', 'z']

    def test_extra_closing_braces_are_ignored(self):
        module = build_module(['module m {', '}', '}', '}', 'leaf l {', '}'])
        assert [n.name for n in module.nodes] == ['l']

    def test_unclosed_scopes_still_return_module(self):
        module = build_module(['module m {', '  container c {', '    leaf l {'])
        assert [n.name for _, n in module.iter_nodes()] == ['c', 'l']

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            parse_yang_file(tmp_path / 'missing.yang')


class TestModel:
    """Tests for YangModule and YangNode."""

    def test_node_name_and_kind_are_read_only(self):
        node = YangNode('l', NodeKind.LEAF)
        with pytest.raises(AttributeError):
            node.kind = NodeKind.CONTAINER
        with pytest.raises(AttributeError):
            node.name = 'other'

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError, match="Unknown node kind"):
            YangNode('x', 'choice')

    def test_children_are_append_only(self):
        parent = YangNode('c', NodeKind.CONTAINER)
        child = YangNode('l', NodeKind.LEAF)
        parent.add_child(child)
        children = parent.children
        assert isinstance(children, tuple)
        assert children == (child,)

    def test_iter_nodes_reports_depth(self):
        module = parse_yang_string(EXAMPLE_TEXT)
        assert [(depth, node.name) for depth, node in module.iter_nodes()] == [(0, 'c'), (1, 'l')]


class TestBuildLogging:
    """Debug trace of scope changes."""

    def test_open_and_close_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="yang_inspector.parsing.tree_builder")
        build_module(['module m {', '  container c {', '    leaf l {', '    }', '  }', '}'])
        messages = caplog.messages
        assert "Opened container 'c' at depth 2" in messages
        assert "Opened leaf 'l' at depth 3" in messages
        assert "Closed leaf 'l' at line 4" in messages
        assert "Closed container 'c' at line 5" in messages
        assert "Closed module scope at line 6" in messages

    def test_nothing_logged_above_debug(self, caplog):
        caplog.set_level(logging.INFO, logger="yang_inspector.parsing.tree_builder")
        build_module(EXAMPLE_LINES)
        assert [r for r in caplog.records if r.name == "yang_inspector.parsing.tree_builder"] == []
