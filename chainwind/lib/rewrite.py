"""
File and directory rewriting for chainwind.

Applies the transform hook to files on disk. Files are rewritten either in
place or into an output tree that mirrors the input tree; in the latter case
files the hook leaves alone are copied through unchanged.

Every file is independent, so a tree is processed concurrently in worker
threads. Failures are reported per file in a RewriteResult and never abort
the rest of the tree.
"""

import asyncio
import os
import shutil
from pathlib import Path
from chainwind.config.settings import App, appsettings
from chainwind.lib.hook import file_isEligible, transform
from chainwind.lib.log import LOG
from chainwind.models.dataModel import RewriteResult, TransformResult


def files_find(root: Path, settings: App = appsettings) -> list[Path]:
    """List every regular file under `root`, skipping excluded directories.

    Args:
        root: Directory to walk
        settings: Supplies the excluded directory names

    Returns:
        Sorted file paths
    """
    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in settings.excludeDirs]
        found.extend(Path(dirpath) / name for name in filenames)
    return sorted(found)


def file_rewrite(
    inputfile: Path,
    outputfile: Path | None = None,
    *,
    check: bool = False,
    settings: App = appsettings,
) -> RewriteResult:
    """Expand chained classes in a single file.

    Args:
        inputfile: File to read
        outputfile: Where to write; None rewrites `inputfile` in place
        check: Report what would change without writing anything
        settings: File-kind rules

    Returns:
        RewriteResult describing the outcome
    """
    target: Path = outputfile if outputfile is not None else inputfile
    result: RewriteResult = RewriteResult(
        path=inputfile,
        output=target,
        eligible=file_isEligible(inputfile.as_posix(), settings),
    )
    copy_through: bool = target != inputfile

    try:
        transformed: TransformResult | None = None
        if result.eligible:
            code: str = inputfile.read_text(encoding="utf-8")
            transformed = transform(code, inputfile.as_posix(), settings)
            result.changed = transformed is not None

        if check:
            return result

        if copy_through:
            target.parent.mkdir(parents=True, exist_ok=True)
        if transformed is not None:
            target.write_text(transformed.code, encoding="utf-8")
            LOG(f"Rewrote {inputfile} -> {target}")
        elif copy_through:
            shutil.copy2(inputfile, target)

    except UnicodeDecodeError:
        result.status = False
        result.message = f"File is not valid UTF-8: {inputfile}"
        LOG(result.message)
    except OSError as e:
        result.status = False
        result.message = f"Error rewriting file {inputfile}: {e}"
        LOG(result.message)

    return result


async def tree_rewrite(
    inputdir: Path,
    outputdir: Path | None = None,
    *,
    check: bool = False,
    settings: App = appsettings,
) -> list[RewriteResult]:
    """Expand chained classes in every file under `inputdir`.

    Args:
        inputdir: Root of the tree to read
        outputdir: Root of the mirrored output tree; None rewrites in place
        check: Report what would change without writing anything
        settings: File-kind rules

    Returns:
        One RewriteResult per file, in path order
    """
    files: list[Path] = files_find(inputdir, settings)
    LOG(f"Found {len(files)} files under {inputdir}")

    tasks = [
        asyncio.to_thread(
            file_rewrite,
            path,
            outputdir / path.relative_to(inputdir) if outputdir is not None else None,
            check=check,
            settings=settings,
        )
        for path in files
    ]
    return list(await asyncio.gather(*tasks))
