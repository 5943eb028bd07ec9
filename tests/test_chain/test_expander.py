"""Tests for token and document expansion."""

import pytest
from chainwind.lib.chain import document_expand, token_expand
from chainwind.models.dataModel import ExpandOptions

ATTRIBUTES_ONLY = ExpandOptions(attributeOnly=True)


# Token expansion
def test_token_simple_chain():
    assert token_expand("hover:a|b|c") == "hover:a hover:b hover:c"


def test_token_without_prefix_is_unchanged():
    assert token_expand("bg-red-500|text-white") == "bg-red-500|text-white"


def test_token_pipe_inside_arbitrary_value():
    assert token_expand("md:bg-[url(a|b)]") == "md:bg-[url(a|b)]"


def test_token_arbitrary_value_and_chain():
    assert (
        token_expand("md:bg-[url(a|b)]|p-4") == "md:bg-[url(a|b)] md:p-4"
    )


def test_token_arbitrary_variant_chain():
    assert (
        token_expand("[&>div]:text-red|font-bold")
        == "[&>div]:text-red [&>div]:font-bold"
    )


def test_token_empty_parts_are_kept():
    assert token_expand("hover:a|") == "hover:a hover:"


@pytest.mark.parametrize(
    "token", ["", "hover:bg-red-500", "bg-[a|b]", "[&>div]:p-4", "a:b:c"]
)
def test_token_identity_without_delimiter(token):
    assert token_expand(token) == token


# Document expansion, default mode
def test_document_hover_chain():
    assert (
        document_expand("hover:bg-red-500|text-white")
        == "hover:bg-red-500 hover:text-white"
    )


def test_document_stacked_variants():
    assert (
        document_expand("md:max-lg:bg-red-500|scale-110")
        == "md:max-lg:bg-red-500 md:max-lg:scale-110"
    )


def test_document_arbitrary_value_unchanged():
    assert document_expand("bg-[url(a|b)]") == "bg-[url(a|b)]"


def test_document_attribute_then_bare_text():
    assert (
        document_expand('class="hover:a|b" other') == 'class="hover:a hover:b" other'
    )


def test_document_single_quoted_attribute():
    assert (
        document_expand("<p class='p-4 focus:ring|outline-none'>")
        == "<p class='p-4 focus:ring focus:outline-none'>"
    )


def test_document_markup():
    source = '<div class="flex md:hover:bg-red-500|scale-110">\n  <a href="/x">Go</a>\n</div>\n'
    expected = '<div class="flex md:hover:bg-red-500 md:hover:scale-110">\n  <a href="/x">Go</a>\n</div>\n'
    assert document_expand(source) == expected


def test_document_bound_attribute_names():
    source = '<div :class="hover:a|b" v-bind:class="md:c|d">'
    assert (
        document_expand(source, ATTRIBUTES_ONLY)
        == '<div :class="hover:a hover:b" v-bind:class="md:c md:d">'
    )


def test_document_preserves_whitespace_inside_values():
    source = 'class="p-4\n    hover:a|b\tm-2"'
    assert document_expand(source) == 'class="p-4\n    hover:a hover:b\tm-2"'


def test_document_empty():
    assert document_expand("") == ""


# Attribute-only mode
def test_attribute_only_leaves_bare_tokens():
    assert document_expand("hover:a|b", ATTRIBUTES_ONLY) == "hover:a|b"


def test_attribute_only_leaves_bitwise_or():
    assert document_expand("const x = a | b", ATTRIBUTES_ONLY) == "const x = a | b"


def test_attribute_only_rewrites_jsx_attribute():
    source = 'return <button className="px-2 hover:bg-red-500|text-white">Go</button>'
    assert document_expand(source, ATTRIBUTES_ONLY) == (
        'return <button className="px-2 hover:bg-red-500 hover:text-white">Go</button>'
    )


def test_attribute_only_leaves_call_arguments():
    source = "el.classList.add('hover:bg-red-500|scale-110')"
    assert document_expand(source, ATTRIBUTES_ONLY) == source


# Properties
DOCUMENTS = [
    "hover:a|b|c",
    'class="hover:a|b" other',
    "md:bg-[url(a|b)]|p-4 [&>div]:x|y",
    "<p class='focus:ring|outline-none'>a | b</p>",
    "hover:a|| x:|",
    "const flags = A | B; el.className = 'md:a|b'",
]


@pytest.mark.parametrize("source", DOCUMENTS)
@pytest.mark.parametrize("options", [None, ATTRIBUTES_ONLY])
def test_document_expansion_is_idempotent(source, options):
    once = document_expand(source, options)
    assert document_expand(once, options) == once


def test_bracket_containment_at_depth():
    source = "hover:bg-[a[b|c]d]"
    assert document_expand(source) == source
