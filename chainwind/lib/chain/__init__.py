"""
Chain package for chainwind class expansion.

Provides bracket-aware delimiter scanning, variant prefix parsing and
token/document expansion of chained utility classes.
"""

from .scanner import (
    CHAIN_DELIMITER,
    delimiter_unbracketedContains,
    delimiter_unbracketedSplit,
)
from .variants import VARIANT_SEPARATOR, variantPrefix_split
from .expander import attributeValue_expand, document_expand, token_expand

__all__ = [
    "CHAIN_DELIMITER",
    "VARIANT_SEPARATOR",
    "delimiter_unbracketedContains",
    "delimiter_unbracketedSplit",
    "variantPrefix_split",
    "attributeValue_expand",
    "token_expand",
    "document_expand",
]
