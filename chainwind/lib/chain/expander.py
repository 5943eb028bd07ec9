"""
Chained class expansion for single tokens and whole documents.

A chained token shares one variant prefix between several utilities:

    hover:bg-red-500|text-white  ->  hover:bg-red-500 hover:text-white

Documents are rewritten in one of two modes:

- default: quoted attribute values are expanded sub-token by sub-token and
  every other non-whitespace run is expanded as a single token. Suited to
  markup and template files.
- attribute-only: only quoted attribute values are touched. Suited to script
  files, where a bare pipe is usually a bitwise-or.

Expansion is pure and idempotent; already expanded text is returned unchanged.
"""

import re
from typing import Final
from chainwind.lib.chain.scanner import (
    delimiter_unbracketedContains,
    delimiter_unbracketedSplit,
)
from chainwind.lib.chain.variants import variantPrefix_split
from chainwind.models.dataModel import ExpandOptions, VariantSplit

_ATTRIBUTE: Final[str] = (
    r"(?P<name>[\w:@][\w:@.-]*)=(?P<quote>[\"'])(?P<value>.*?)(?P=quote)"
)

# Attribute constructs: class="...", :class='...', v-bind:class="..."
ATTRIBUTE_PATTERN: Final[re.Pattern[str]] = re.compile(_ATTRIBUTE, re.DOTALL)

# Attribute constructs first, otherwise a bare non-whitespace run
DOCUMENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"{_ATTRIBUTE}|(?P<bare>\S+)", re.DOTALL
)

_SUBTOKEN_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S+")

DEFAULT_OPTIONS: Final[ExpandOptions] = ExpandOptions()


def token_expand(token: str) -> str:
    """Expand one chained class token.

    Tokens without a variant prefix are never expanded: with no variant
    context a pipe is as likely to be literal data as a chain.

    Args:
        token: A single class token

    Returns:
        The space-joined expansion, or `token` itself when nothing applies
    """
    split: VariantSplit = variantPrefix_split(token)
    if not split.prefix or not delimiter_unbracketedContains(split.rest):
        return token

    parts: list[str] = delimiter_unbracketedSplit(split.rest)
    if len(parts) <= 1:
        return token

    return " ".join(split.prefix + part for part in parts)


def attributeValue_expand(value: str) -> str:
    """Expand every whitespace-delimited class inside an attribute value.

    Whitespace between classes is kept as written.
    """
    return _SUBTOKEN_PATTERN.sub(lambda m: token_expand(m.group()), value)


def _attribute_rewrite(match: re.Match[str]) -> str:
    quote: str = match.group("quote")
    value: str = attributeValue_expand(match.group("value"))
    return f"{match.group('name')}={quote}{value}{quote}"


def _document_rewrite(match: re.Match[str]) -> str:
    bare: str | None = match.group("bare")
    if bare is not None:
        return token_expand(bare)
    return _attribute_rewrite(match)


def document_expand(text: str, options: ExpandOptions | None = None) -> str:
    """Expand all chained class tokens in a document.

    Args:
        text: Full source text
        options: Expansion mode; default mode when omitted

    Returns:
        The rewritten text
    """
    options = options or DEFAULT_OPTIONS
    if options.attributeOnly:
        return ATTRIBUTE_PATTERN.sub(_attribute_rewrite, text)
    return DOCUMENT_PATTERN.sub(_document_rewrite, text)
