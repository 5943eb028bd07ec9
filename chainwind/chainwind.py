"""
chainwind Plugin Main Module.

This module serves as the main entry point for the chainwind plugin, a ChRIS
plugin that expands chained utility classes (`hover:a|b` -> `hover:a hover:b`)
in markup, template and script sources so that utility-class scanners can see
each class.

Features:
- Rewrites every eligible file of the input directory into the output directory
- Copies ineligible and unchanged files through, mirroring the input tree
- Optional in-place rewriting and a check-only mode for CI
- Handles graceful termination on user interruption

Examples:
    Rewrite a source tree into an output directory:
        $ chainwind /incoming /outgoing

    Rewrite in place:
        $ chainwind --inplace src/ /tmp/unused

    Fail if any file still contains chained classes:
        $ chainwind --check src/ /tmp/unused
"""

from pathlib import Path
from argparse import Namespace, ArgumentParser, ArgumentDefaultsHelpFormatter
from chris_plugin import chris_plugin
from chainwind.config.settings import appsettings, console
from chainwind.lib.rewrite import tree_rewrite
from chainwind.models.dataModel import RewriteResult
import asyncio
import signal
from rich.markup import escape
from rich.table import Table
from chainwind.lib.log import LOG
import sys
from typing import Final, Optional
from types import FrameType

__version__: Final[str] = "0.1.0"


# Define the argument parser for the plugin
parser: Final[ArgumentParser] = ArgumentParser(
    description="A ChRIS plugin expanding chained utility classes in source files.",
    formatter_class=ArgumentDefaultsHelpFormatter,
)
parser.add_argument(
    "--inplace",
    action="store_true",
    help="Rewrite files in the input directory instead of the output directory",
)
parser.add_argument(
    "--check",
    action="store_true",
    help="Only report files that would change; exit 1 if there are any",
)
parser.add_argument(
    "-V", "--version", action="version", version=f"%(prog)s {__version__}"
)


def summary_render(results: list[RewriteResult], check: bool = False) -> Table:
    """Build the rich summary table for a rewrite run.

    Args:
        results: Per-file outcomes
        check: Whether the run was check-only

    Returns:
        Table listing changed and failed files (all files with detailedOutput)
    """
    table: Table = Table(title="chainwind", show_lines=False)
    table.add_column("File", style="cyan")
    table.add_column("Status")

    for result in results:
        if not result.status:
            table.add_row(escape(str(result.path)), f"[bold red]{escape(result.message or '')}[/bold red]")
        elif result.changed:
            label: str = "would expand" if check else "expanded"
            table.add_row(escape(str(result.path)), f"[bold green]{label}[/bold green]")
        elif appsettings.detailedOutput:
            label = "unchanged" if result.eligible else "skipped"
            table.add_row(escape(str(result.path)), f"[dim]{label}[/dim]")
    return table


async def async_main(options: Namespace, inputdir: Path, outputdir: Path) -> None:
    """Asynchronous main function rewriting the input tree.

    Args:
        options: Parsed command-line arguments
        inputdir: Directory containing the source tree
        outputdir: Directory receiving the rewritten tree

    Note:
        Exits with status 1 when any file failed, or in check mode when any
        file would change.
    """
    try:
        check: bool = bool(getattr(options, "check", False))
        inplace: bool = bool(getattr(options, "inplace", False))

        results: list[RewriteResult] = await tree_rewrite(
            inputdir, None if inplace else outputdir, check=check
        )

        changed: int = sum(1 for r in results if r.changed)
        failed: int = sum(1 for r in results if not r.status)

        console.print(summary_render(results, check))
        console.print(
            f"[bold cyan]{len(results)} files, {changed} "
            f"{'would change' if check else 'changed'}, {failed} failed[/bold cyan]"
        )

        if failed or (check and changed):
            sys.exit(1)

    except Exception as e:
        LOG(f"Unhandled exception in async_main: {e}")
        console.print(f"[bold red]An unexpected error occurred: {e}[/bold red]")
        sys.exit(1)


def signal_handle(sig: int, frame: Optional[FrameType]) -> None:
    """Signal handler for graceful interruption.

    Args:
        sig: Signal number
        frame: Current stack frame
    """
    console.print("\n[bold red]Interrupt received. Exiting.[/bold red]")
    sys.exit(0)


@chris_plugin(
    parser=parser,
    title="pl-chainwind",
    category="",
    min_memory_limit="200Mi",
    min_cpu_limit="1000m",
    min_gpu_limit=0,
)
def main(options: Namespace, inputdir: Path, outputdir: Path) -> None:
    """Main entry point for the ChRIS plugin.

    Args:
        options: Parsed command-line options
        inputdir: Directory containing input files
        outputdir: Directory for output files
    """

    # Register signal handler
    signal.signal(signal.SIGINT, signal_handle)

    try:
        asyncio.run(async_main(options, inputdir, outputdir))
    except KeyboardInterrupt:
        console.print("\n[bold cyan]Program interrupted by user. Exiting.[/bold cyan]")
