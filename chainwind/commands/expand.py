"""
Expansion CLI Commands

This module provides commands for expanding chained utility classes on
ad-hoc text and on individual files.

Commands:
- expand text: Expand chained classes in the given text (or stdin)
- expand file: Show or write the expansion of a single file
"""

from pathlib import Path
from rich.console import Console
import click
from chainwind.commands.base import RichGroup, RichCommand, rich_help
from chainwind.lib.chain import document_expand
from chainwind.lib.hook import file_isEligible, transform
from chainwind.lib.log import LOG
from chainwind.lib.rewrite import file_rewrite
from chainwind.models.dataModel import ExpandOptions, RewriteResult, TransformResult

console: Console = Console(stderr=True)


@click.group(
    cls=RichGroup,
    short_help="expand chained classes",
    help="""
    expand

    Expand chained utility classes such as hover:a|b into hover:a hover:b.
    """,
)
def expand() -> None:
    """
    Root group for expansion commands.
    """
    pass


expand: click.Group = expand


@expand.command(
    cls=RichCommand,
    help=rich_help(
        command="text",
        description="Expand chained classes in text",
        usage="expand text [--attributes-only] <text>...",
        args={
            "<text>": "text to expand; '-' reads from stdin",
            "--attributes-only": "only rewrite quoted attribute values",
        },
    ),
)
@click.option("--attributes-only", "attributesOnly", is_flag=True, default=False)
@click.argument("text", nargs=-1, required=True)
def text(attributesOnly: bool, text: tuple[str, ...]) -> None:
    """
    Expand chained classes in the given text.
    """
    source: str = (
        click.get_text_stream("stdin").read() if text == ("-",) else " ".join(text)
    )
    options: ExpandOptions = ExpandOptions(attributeOnly=attributesOnly)
    click.echo(document_expand(source, options), nl=not source.endswith("\n"))


@expand.command(
    cls=RichCommand,
    help=rich_help(
        command="file",
        description="Expand chained classes in a file",
        usage="expand file [--write] <path>",
        args={
            "<path>": "file to expand",
            "--write": "rewrite the file in place instead of printing it",
        },
    ),
)
@click.option("--write", is_flag=True, default=False)
@click.argument(
    "path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
def file(write: bool, path: Path) -> None:
    """
    Print the expansion of a file, or rewrite it in place.
    """
    if not file_isEligible(path.as_posix()):
        console.print(f"[bold yellow]Not an eligible file: {path}[/bold yellow]")
        return

    if write:
        result: RewriteResult = file_rewrite(path)
        if not result.status:
            raise click.ClickException(result.message or f"Could not rewrite {path}")
        state: str = "expanded" if result.changed else "unchanged"
        console.print(f"[bold green]{path}: {state}[/bold green]")
        return

    try:
        code: str = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        LOG(f"File is not valid UTF-8: {path}")
        raise click.ClickException(f"File is not valid UTF-8: {path}")

    transformed: TransformResult | None = transform(code, path.as_posix())
    click.echo(transformed.code if transformed else code, nl=False)
