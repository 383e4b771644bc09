"""Tests for SVG id namespacing."""

import pytest
from pydantic import ValidationError

from asset_build.svg.namespacer import (
    RewrittenFragment,
    SvgFragment,
    namespace_fragment,
    namespace_fragments,
    namespace_markup,
)


def test_id_is_prefixed_with_fragment_name():
    out = namespace_markup("bar", '<path id="foo"/>')
    assert 'id="bar-foo"' in out
    assert 'id="foo"' not in out


@pytest.mark.parametrize("attr", ["fill", "mask", "filter"])
def test_url_references_are_prefixed(attr):
    out = namespace_markup("bar", f'<rect {attr}="url(#foo)"/>')
    assert out == f'<rect {attr}="url(#bar-foo)"/>'


def test_all_matches_across_lines_are_rewritten():
    markup = (
        '<svg id="root">\n'
        '  <linearGradient id="g1"/>\n'
        '  <mask id="m1"/>\n'
        '  <rect fill="url(#g1)" mask="url(#m1)"/>\n'
        '  <circle fill="url(#g1)" filter="url(#f1)"/>\n'
        "</svg>"
    )
    out = namespace_markup("icon", markup)
    assert out == (
        '<svg id="icon-root">\n'
        '  <linearGradient id="icon-g1"/>\n'
        '  <mask id="icon-m1"/>\n'
        '  <rect fill="url(#icon-g1)" mask="url(#icon-m1)"/>\n'
        '  <circle fill="url(#icon-g1)" filter="url(#icon-f1)"/>\n'
        "</svg>"
    )


def test_id_equal_to_name_keeps_double_segment():
    assert namespace_markup("icon", '<svg id="icon">') == '<svg id="icon-icon">'


def test_triple_segment_collapses_first_occurrence_only():
    markup = '<svg id="icon-a"><g id="icon-b"/></svg>'
    out = namespace_markup("icon", markup)
    assert out == '<svg id="icon-a"><g id="icon-icon-b"/></svg>'


def test_single_prefixed_id_folds_back_to_itself():
    assert namespace_markup("bar", '<g id="bar-foo"/>') == '<g id="bar-foo"/>'


def test_rewrite_is_not_idempotent():
    once = namespace_markup("bar", '<g id="foo"/><g id="baz"/><rect fill="url(#foo)"/>')
    assert once == '<g id="bar-foo"/><g id="bar-baz"/><rect fill="url(#bar-foo)"/>'

    twice = namespace_markup("bar", once)
    assert twice != once
    assert 'id="bar-bar-baz"' in twice
    assert 'fill="url(#bar-bar-foo)"' in twice


def test_exact_values_only():
    out = namespace_markup("n", '<a id="a-b"/><b id="a"/>')
    assert out == '<a id="n-a-b"/><b id="n-a"/>'


def test_markup_without_targets_passes_through():
    markup = '<svg viewBox="0 0 1 1"><path d="M0 0" stroke="red"/></svg>'
    assert namespace_markup("plain", markup) == markup


def test_single_quoted_and_non_url_values_are_untouched():
    markup = "<g id='x'/><rect fill=\"red\"/><rect stroke=\"url(#s)\"/>"
    assert namespace_markup("n", markup) == markup


def test_malformed_markup_is_rewritten_textually():
    out = namespace_markup("n", '<svg <g id="x" fill="url(#y)"')
    assert out == '<svg <g id="n-x" fill="url(#n-y)"'


def test_name_with_backslash_is_inserted_literally():
    out = namespace_markup(r"a\1", '<g id="x"/>')
    assert out == r'<g id="a\1-x"/>'


def test_namespace_fragment_keeps_name():
    fragment = SvgFragment(name="star", raw_markup='<g id="a"/>')
    rewritten = namespace_fragment(fragment)
    assert isinstance(rewritten, RewrittenFragment)
    assert rewritten.name == "star"
    assert rewritten.raw_markup == '<g id="star-a"/>'
    assert fragment.raw_markup == '<g id="a"/>'


def test_namespace_fragments_preserves_order_and_count():
    fragments = [SvgFragment(name=n, raw_markup='<g id="x"/>') for n in ("a", "b", "c")]
    rewritten = namespace_fragments(fragments)
    assert [f.name for f in rewritten] == ["a", "b", "c"]
    assert [f.raw_markup for f in rewritten] == [
        '<g id="a-x"/>',
        '<g id="b-x"/>',
        '<g id="c-x"/>',
    ]


def test_fragments_are_immutable():
    fragment = SvgFragment(name="a", raw_markup="")
    with pytest.raises(ValidationError):
        fragment.name = "b"
