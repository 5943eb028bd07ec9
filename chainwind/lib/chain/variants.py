"""
Variant prefix parsing.

Peels the leading "variant:" segments off a class token. Segments are either
plain (`hover`, `md`, `max-lg`) or arbitrary bracket groups (`[&>div]`,
`[@supports(display:grid)]`), and each must be closed by the separator for it
to count as part of the prefix:

    md:hover:bg-red-500|text-white  ->  "md:hover:" + "bg-red-500|text-white"
    [&>div]:text-red                ->  "[&>div]:" + "text-red"
    bg-[#f00]                       ->  "" + "bg-[#f00]"
"""

from typing import Final
from chainwind.lib.chain.scanner import BRACKET_OPEN, BRACKET_CLOSE, CHAIN_DELIMITER
from chainwind.models.dataModel import VariantSplit

VARIANT_SEPARATOR: Final[str] = ":"

# Characters that end a plain variant segment
_SEGMENT_STOP: Final[frozenset[str]] = frozenset(
    (VARIANT_SEPARATOR, BRACKET_OPEN, CHAIN_DELIMITER)
)


def variantPrefix_split(token: str) -> VariantSplit:
    """Split a token into its variant prefix and the chain suffix.

    Single left-to-right pass without backtracking. The prefix grows one
    "segment:" at a time and the scan stops at the first segment that is
    not followed by the separator.

    Args:
        token: A single class token

    Returns:
        VariantSplit with `prefix + rest == token`
    """
    length: int = len(token)
    i: int = 0
    lastVariantEnd: int = 0

    while i < length:
        if token[i] == BRACKET_OPEN:
            depth: int = 1
            i += 1
            while i < length and depth > 0:
                if token[i] == BRACKET_OPEN:
                    depth += 1
                elif token[i] == BRACKET_CLOSE:
                    depth -= 1
                i += 1
            # Arbitrary variant only if the group is closed by a separator
            if i < length and token[i] == VARIANT_SEPARATOR:
                i += 1
                lastVariantEnd = i
                continue
            break

        while i < length and token[i] not in _SEGMENT_STOP:
            i += 1

        if i < length and token[i] == VARIANT_SEPARATOR:
            i += 1
            lastVariantEnd = i
            continue

        break

    return VariantSplit(prefix=token[:lastVariantEnd], rest=token[lastVariantEnd:])
