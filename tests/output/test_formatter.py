"""Tests for MarkupFormatter."""

import copy
import datetime
import html
import re
from decimal import Decimal

import pytest

from json_markup.domain.enums import TypeTag, UndefinedMarkup
from json_markup.domain.errors import CyclicStructureError, DepthLimitError, UnsupportedTypeError
from json_markup.domain.models import UNDEFINED, RenderOptions
from json_markup.output.formatter import MarkupFormatter, number_text
from tests.conftest import HOSTILE_STRING, NESTED_DOCUMENT, expected_pair


def _items(*markups: str) -> str:
    return '<li>' + ',</li><li>'.join(markups) + '</li>'


def _separator_count(markup: str) -> int:
    return markup.count(',</li>')


class TestLeaves:
    """Tests for leaf rendering."""

    @pytest.mark.parametrize('value, text, tag', [
        (None, 'null', 'null'),
        (True, 'true', 'boolean'),
        (False, 'false', 'boolean'),
        (42, '42', 'number'),
        (-1.5, '-1.5', 'number'),
        ('plain', '"plain"', 'string'),
        (datetime.date(2024, 1, 2), '"2024-01-02"', 'date'),
        (datetime.datetime(2024, 1, 2, 3, 4, 5), '"2024-01-02T03:04:05"', 'date'),
    ])
    def test_leaf_canonical_text(self, formatter, value, text, tag):
        result = formatter.format(None, value)
        assert result == expected_pair(None, text, tag)
        assert result.count('class="value"') == 1

    def test_leaf_with_key(self, formatter):
        assert formatter.format('count', 3) == expected_pair('count', '3', 'number')

    def test_string_is_sanitized(self, formatter):
        result = formatter.format(None, HOSTILE_STRING)
        value = re.search(r'<span class="value" data-type="string">"(.*)"</span>$', result).group(1)
        assert '<script>' not in value
        assert html.unescape(value).replace('\\"', '"') == HOSTILE_STRING

    def test_string_is_linkified(self, formatter):
        result = formatter.format(None, 'see http://x.io/a now')
        assert '<a href="http://x.io/a" target="_blank">http://x.io/a</a>' in result

    def test_key_is_encoded_but_not_linkified(self, formatter):
        result = formatter.format('<b>http://x.io', 1)
        assert '"&lt;b&gt;http://x.io"' in result
        assert '<a ' not in result


class TestNumberText:
    """Tests for canonical number text."""

    @pytest.mark.parametrize('value, text', [
        (0, '0'),
        (10 ** 20, '100000000000000000000'),
        (1.0, '1.0'),
        (0.1, '0.1'),
        (float('nan'), 'NaN'),
        (float('inf'), 'Infinity'),
        (float('-inf'), '-Infinity'),
        (Decimal('2.50'), '2.50'),
    ])
    def test_number_text(self, value, text):
        assert number_text(value) == text


class TestContainers:
    """Tests for array and object rendering."""

    def test_end_to_end_document(self, formatter):
        a = expected_pair('a', '1', 'number')
        b = expected_pair(
            'b',
            '[<ul>' + _items(expected_pair(None, 'true', 'boolean'), expected_pair(None, 'null', 'null')) + '</ul>]',
            'array', 2,
        )
        expected = expected_pair(None, '{<ul>' + _items(a, b) + '</ul>}', 'object', 2)
        assert formatter.format(None, {'a': 1, 'b': [True, None]}) == expected

    def test_empty_containers(self, formatter):
        assert formatter.format(None, []) == expected_pair(None, '[<ul></ul>]', 'array', 0)
        assert formatter.format(None, {}) == expected_pair(None, '{<ul></ul>}', 'object', 0)

    def test_key_order_preserved(self, formatter):
        result = formatter.format(None, {'zeta': 1, 'alpha': 2, 'mid': 3})
        assert result.index('"zeta"') < result.index('"alpha"') < result.index('"mid"')

    def test_array_elements_have_no_keys(self, formatter):
        node = formatter.format_node(None, ['x', 'y'])
        assert node.child_count == 2
        assert '<span class="key" data-type="string"></span>' in node.markup

    def test_tuple_renders_as_array(self, formatter):
        assert formatter.format(None, (1, 2)) == formatter.format(None, [1, 2])

    @pytest.mark.parametrize('value', [
        [1],
        [1, 2, 3],
        {'a': 1, 'b': 2},
        [[], {}, [1, 2]],
    ])
    def test_separators_between_members_only(self, formatter, value):
        node = formatter.format_node(None, value)
        assert node.child_count == len(value)
        # nested containers contribute their own separators
        nested = sum(max(len(v) - 1, 0) for v in (value.values() if isinstance(value, dict) else value)
                     if isinstance(v, (list, dict)))
        assert _separator_count(node.markup) == node.child_count - 1 + nested

    def test_nested_document_renders(self, formatter):
        node = formatter.format_node(None, NESTED_DOCUMENT)
        assert node.tag is TypeTag.OBJECT
        assert node.child_count == len(NESTED_DOCUMENT)
        assert 'data-type="array" data-length="2"' in node.markup
        assert '<a href="mailto:dev@example.com" target="_blank">' in node.markup

    def test_shared_reference_is_not_a_cycle(self, formatter):
        shared = [1]
        node = formatter.format_node(None, [shared, shared])
        assert node.child_count == 2

    def test_input_not_mutated(self, formatter):
        original = copy.deepcopy(NESTED_DOCUMENT)
        formatter.format(None, NESTED_DOCUMENT)
        assert NESTED_DOCUMENT == original


class TestSuppression:
    """Tests for undefined and function members."""

    def test_skipped_members_leave_no_gaps(self, formatter):
        node = formatter.format_node(None, [1, UNDEFINED, 2, len])
        assert node.child_count == 2
        assert _separator_count(node.markup) == 1
        assert '<li></li>' not in node.markup

    def test_skipped_last_member_has_no_trailing_separator(self, formatter):
        node = formatter.format_node(None, {'a': 1, 'b': UNDEFINED})
        assert node.child_count == 1
        assert _separator_count(node.markup) == 0

    def test_skipped_first_member_has_no_leading_separator(self, formatter):
        node = formatter.format_node(None, [UNDEFINED, 'x'])
        assert node.child_count == 1
        assert '<ul><li>' + expected_pair(None, '"x"', 'string') + '</li></ul>' in node.markup

    def test_all_members_skipped(self, formatter):
        node = formatter.format_node(None, {'a': UNDEFINED, 'f': print})
        assert node.child_count == 0
        assert node.markup == expected_pair(None, '{<ul></ul>}', 'object', 0)

    def test_skipped_root(self, formatter):
        assert formatter.format(None, UNDEFINED) is None
        assert formatter.to_html(UNDEFINED) == '<div class="jsoner"></div>'

    def test_placeholders(self):
        formatter = MarkupFormatter(RenderOptions(undefined_markup=UndefinedMarkup.PLACEHOLDER))
        node = formatter.format_node(None, [UNDEFINED, len])
        assert node.child_count == 2
        assert expected_pair(None, 'null', 'null') in node.markup
        assert expected_pair(None, '"(function)"', 'function') in node.markup


class TestGuards:
    """Tests for cycle, depth and type errors."""

    def test_cyclic_list(self, formatter):
        loop = []
        loop.append(loop)
        with pytest.raises(CyclicStructureError) as exc_info:
            formatter.format(None, loop)
        assert exc_info.value.path == '$[0]'

    def test_cyclic_dict(self, formatter):
        loop = {'name': 'x'}
        loop['self'] = loop
        with pytest.raises(CyclicStructureError) as exc_info:
            formatter.format(None, {'root': loop})
        assert exc_info.value.path == '$.root.self'

    def test_max_depth(self):
        formatter = MarkupFormatter(RenderOptions(max_depth=2))
        assert formatter.format(None, [[1]]) is not None
        with pytest.raises(DepthLimitError):
            formatter.format(None, [[[1]]])

    def test_unsupported_nested_value(self, formatter):
        with pytest.raises(UnsupportedTypeError):
            formatter.format(None, {'ok': 1, 'bad': {1, 2}})

    def test_formatter_reusable_after_error(self, formatter):
        loop = []
        loop.append(loop)
        with pytest.raises(CyclicStructureError):
            formatter.format(None, loop)
        assert formatter.format(None, [1]) is not None


class TestToHtml:
    """Tests for the outer container."""

    def test_wraps_in_container(self, formatter):
        result = formatter.to_html({'a': 1})
        assert result.startswith('<div class="jsoner">')
        assert result.endswith('</div>')
        assert result == f'<div class="jsoner">{formatter.format(None, {"a": 1})}</div>'

    def test_custom_container_class(self):
        formatter = MarkupFormatter(RenderOptions(container_class='viewer'))
        assert formatter.to_html(None).startswith('<div class="viewer">')


class TestMappingKeys:
    """Tests for non-string mapping keys."""

    def test_keys_use_json_spelling(self, formatter):
        result = formatter.format(None, {True: 1, None: 2, 3: 'x'})
        assert expected_pair('true', '1', 'number') in result
        assert expected_pair('null', '2', 'number') in result
        assert expected_pair('3', '"x"', 'string') in result

    def test_none_key_is_not_an_array_element(self, formatter):
        result = formatter.format(None, {None: 1})
        assert '<span class="key" data-type="number">"null"</span>' in result

    def test_default_depth_limit(self, formatter):
        deep = []
        for _ in range(600):
            deep = [deep]
        with pytest.raises(DepthLimitError):
            formatter.format(None, deep)
