"""
Bracket-aware delimiter scanning.

A chain delimiter only separates utilities when it sits outside every
arbitrary-value bracket group, e.g. the pipe in `bg-[url(a|b)]` is data while
the one in `bg-red-500|text-white` is a separator. Depth is a running counter;
brackets need not be balanced.
"""

from typing import Final

CHAIN_DELIMITER: Final[str] = "|"
BRACKET_OPEN: Final[str] = "["
BRACKET_CLOSE: Final[str] = "]"


def delimiter_unbracketedContains(text: str) -> bool:
    """Check whether `text` holds a chain delimiter at bracket depth 0.

    Args:
        text: Text to scan

    Returns:
        True on the first delimiter found outside brackets
    """
    depth: int = 0
    for char in text:
        if char == BRACKET_OPEN:
            depth += 1
        elif char == BRACKET_CLOSE:
            depth -= 1
        elif char == CHAIN_DELIMITER and depth == 0:
            return True
    return False


def delimiter_unbracketedSplit(text: str) -> list[str]:
    """Split `text` on chain delimiters found at bracket depth 0.

    Args:
        text: Text to split

    Returns:
        At least one part; `[text]` when there is nothing to split on
    """
    parts: list[str] = []
    current: list[str] = []
    depth: int = 0

    for char in text:
        if char == BRACKET_OPEN:
            depth += 1
        elif char == BRACKET_CLOSE:
            depth -= 1
        elif char == CHAIN_DELIMITER and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    return parts
