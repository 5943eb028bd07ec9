"""
settings.py

This module provides application configuration management for chainwind.

Features:
- Centralized application configuration using Pydantic settings
- Constants for the file-kind rules of the transform hook

Usage:
Import appsettings for application configuration values.
"""

from typing import Final
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console

# Console instance for rich output
console: Final[Console] = Console()

# Markup, templating and script extensions eligible for rewriting
FILE_EXTENSIONS: Final[tuple[str, ...]] = (
    "js",
    "jsx",
    "ts",
    "tsx",
    "html",
    "vue",
    "svelte",
    "astro",
    "md",
    "mdx",
    "blade.php",
    "php",
)

# Extensions whose text is script code; only quoted attribute values are touched
SCRIPT_EXTENSIONS: Final[tuple[str, ...]] = ("js", "jsx", "ts", "tsx")

# Dependency directories never rewritten
EXCLUDE_DIRS: Final[tuple[str, ...]] = ("node_modules",)


class App(BaseSettings):
    """
    Application settings model.

    Settings can be overridden through environment variables with CHW_ prefix.
    List-valued settings are given as JSON, e.g.
    CHW_EXCLUDEDIRS='["node_modules", "dist"]'.

    Attributes:
        beQuiet: Suppress detailed logging output
        detailedOutput: List unchanged files in rewrite summaries as well
        fileExtensions: Extensions the transform hook will rewrite
        scriptExtensions: Extensions rewritten in attribute-only mode
        excludeDirs: Directory names whose contents are never rewritten
    """

    beQuiet: bool = False
    detailedOutput: bool = False

    fileExtensions: list[str] = list(FILE_EXTENSIONS)
    scriptExtensions: list[str] = list(SCRIPT_EXTENSIONS)
    excludeDirs: list[str] = list(EXCLUDE_DIRS)

    model_config = SettingsConfigDict(
        env_prefix="CHW_",  # Environment variables with this prefix override settings
        case_sensitive=False,  # Allow case-insensitive environment variables
        frozen=True,  # File-kind rules are static for the life of the process
    )


# Create the application settings instance
appsettings: Final[App] = App()
