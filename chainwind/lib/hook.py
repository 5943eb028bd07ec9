"""
Build-tool transform hook.

Decides which files get their chained classes expanded and in which mode:

- ids under an excluded directory (node_modules) are skipped
- ids whose extension is outside the allow-list are skipped
- script files (js, jsx, ts, tsx) only have quoted attribute values rewritten
- everything else is rewritten in default mode

When expansion leaves the text as it was the hook returns None rather than
the identical text, so the host toolchain can skip downstream work.

Example:
    result = transform('className="hover:a|b"', "src/App.tsx")
    result.code  # 'className="hover:a hover:b"'
"""

import re
from typing import Final
from chainwind.config.settings import App, appsettings
from chainwind.lib.chain import document_expand
from chainwind.lib.log import LOG
from chainwind.models.dataModel import ExpandOptions, TransformResult

HOOK_NAME: Final[str] = "tailwindcss-chain"
HOOK_ENFORCE: Final[str] = "pre"

_PATH_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[\\/]")


def extension_match(file_id: str, extensions: list[str]) -> str | None:
    """Return the longest extension in `extensions` that ends `file_id`."""
    found: list[str] = [ext for ext in extensions if file_id.endswith(f".{ext}")]
    return max(found, key=len) if found else None


def path_isExcluded(file_id: str, settings: App = appsettings) -> bool:
    """Check whether any directory segment of `file_id` is excluded."""
    segments: list[str] = _PATH_SEPARATORS.split(file_id)[:-1]
    return any(segment in settings.excludeDirs for segment in segments)


def file_isEligible(file_id: str, settings: App = appsettings) -> bool:
    """Check whether the hook rewrites the file identified by `file_id`.

    Args:
        file_id: File path or module id as given by the host toolchain
        settings: File-kind rules

    Returns:
        True for allow-listed extensions outside excluded directories
    """
    if path_isExcluded(file_id, settings):
        return False
    return extension_match(file_id, settings.fileExtensions) is not None


def mode_select(file_id: str, settings: App = appsettings) -> ExpandOptions:
    """Pick the expansion mode for a file.

    Args:
        file_id: File path or module id
        settings: File-kind rules

    Returns:
        Attribute-only options for script files, default options otherwise
    """
    ext: str | None = extension_match(file_id, settings.fileExtensions)
    return ExpandOptions(attributeOnly=ext in settings.scriptExtensions)


def transform(
    code: str, file_id: str, settings: App = appsettings
) -> TransformResult | None:
    """Expand chained classes in one file's source text.

    Args:
        code: Full source text
        file_id: File path or module id
        settings: File-kind rules

    Returns:
        TransformResult with the rewritten code, or None when the file is
        not eligible or nothing changed
    """
    if not file_isEligible(file_id, settings):
        LOG(f"Skipping {file_id}")
        return None

    options: ExpandOptions = mode_select(file_id, settings)
    transformed: str = document_expand(code, options)
    if transformed == code:
        return None

    LOG(f"Expanded chained classes in {file_id} (attributeOnly={options.attributeOnly})")
    return TransformResult(code=transformed, map=None)
