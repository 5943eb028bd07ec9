"""
dataModel.py

This module defines the data models used throughout chainwind.
The models leverage Pydantic for validation and type safety.

Features:
- Variant prefix parsing results
- Document expansion options
- Transform hook results
- File rewrite results

Usage:
Import these models to structure data passed between the chain engine,
the transform hook and the rewriter.
"""

from pathlib import Path
from pydantic import BaseModel, Field, ConfigDict


class VariantSplit(BaseModel):
    """Result of splitting a class token into variant prefix and chain suffix.

    `prefix + rest` always reconstructs the original token.

    Attributes:
        prefix: Leading "variant:" segments, separators included
        rest: Remainder of the token after the prefix
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    rest: str


class ExpandOptions(BaseModel):
    """Document expansion options.

    Attributes:
        attributeOnly: Only rewrite quoted attribute values, leave all other
            text untouched
    """

    model_config = ConfigDict(frozen=True)

    attributeOnly: bool = False


class TransformResult(BaseModel):
    """Result of the transform hook when the source text changed.

    Attributes:
        code: The rewritten source text
        map: Source map; chainwind never produces one
    """

    code: str
    map: None = None


class RewriteResult(BaseModel):
    """Outcome of rewriting a single file.

    Attributes:
        path: The input file
        output: Where the result was (or would be) written
        eligible: Whether the transform hook accepts this file kind
        changed: Whether rewriting altered the file's text
        status: False if the file could not be read or written
        message: Additional context on failure
    """

    path: Path
    output: Path
    eligible: bool = False
    changed: bool = False
    status: bool = True
    message: str | None = Field(
        default=None, description="Additional context or information."
    )
