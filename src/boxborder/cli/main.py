import logging
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .. import __version__
from ..border_side import BorderSide
from ..box_border import Border, BoxBorder
from ..config import load_settings
from ..errors import BorderSpecError, ConfigError
from ..parsing import format_border, parse_border

console = Console()
logger = logging.getLogger(__name__)


def _side_rows(border: BoxBorder):
    if isinstance(border, Border):
        return [("top", border.top), ("right", border.right), ("bottom", border.bottom), ("left", border.left)]
    return [("top", border.top), ("start", border.start), ("end", border.end), ("bottom", border.bottom)]


def _swatch(side: BorderSide) -> Text:
    if side == BorderSide.NONE:
        return Text("-", style="dim")
    return Text("  ", style=f"on {side.color.rgb_hex}") + Text(f" {side.color}")


def _sides_table(border: BoxBorder, title: str) -> Table:
    table = Table(title=title)
    table.add_column("Side", style="cyan")
    table.add_column("Colour")
    table.add_column("Width", style="yellow", justify="right")
    table.add_column("Style", style="green")
    for name, side in _side_rows(border):
        table.add_row(name, _swatch(side), f"{float(side.width):g}", side.style.value)
    return table


def _fail(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="boxborder")
@click.option('--config', 'config_path', type=click.Path(dir_okay=False), default=None,
              help="Settings file (defaults to ./boxborder.json when present)")
@click.option('-v', '--verbose', is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Inspect, combine and interpolate box borders"""
    try:
        settings = load_settings(config_path)
        palette = settings.palette()
    except ConfigError as e:
        _fail(str(e))

    level = logging.DEBUG if verbose else getattr(logging, str(settings.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("settings: %s", settings)

    ctx.obj = {"settings": settings, "palette": palette}


def _parse(ctx, text):
    try:
        return parse_border(text, ctx.obj["palette"])
    except BorderSpecError as e:
        _fail(str(e))


@cli.command()
@click.argument('border')
@click.pass_context
def inspect(ctx, border):
    """Show the sides, uniformity and insets of a border"""
    value = _parse(ctx, border)
    console.print(_sides_table(value, type(value).__name__))
    console.print(Panel.fit(
        f"uniform: {'yes' if value.is_uniform else 'no'}\n"
        f"dimensions: {value.dimensions}\n"
        f"notation: {format_border(value)}",
        title="[bold blue]Summary[/bold blue]",
        border_style="blue"
    ))


@cli.command()
@click.argument('first')
@click.argument('second')
@click.pass_context
def add(ctx, first, second):
    """Merge two borders into one, if they are combinable"""
    a = _parse(ctx, first)
    b = _parse(ctx, second)
    try:
        result = a + b
    except TypeError:
        console.print("[bold yellow]Not combinable:[/bold yellow] draw the borders as separate layers")
        sys.exit(1)
    console.print(_sides_table(result, type(result).__name__))
    console.print(f"[bold green]Result:[/bold green] {format_border(result)}")


@cli.command()
@click.argument('first')
@click.argument('second')
@click.option('--frames', type=click.IntRange(min=2), default=None,
              help="Number of evenly spaced samples, endpoints included")
@click.pass_context
def lerp(ctx, first, second, frames):
    """Sample the interpolation between two borders"""
    settings = ctx.obj["settings"]
    a = _parse(ctx, first)
    b = _parse(ctx, second)
    count = frames or settings.frames

    table = Table(title=f"{format_border(a)}  ->  {format_border(b)}")
    table.add_column("t", style="yellow", justify="right", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Border", style="green")
    for index in range(count):
        t = index / (count - 1)
        value = BoxBorder.lerp(a, b, t)
        kind = type(value).__name__ if value is not None else "-"
        table.add_row(f"{t:.{settings.precision}f}", kind, format_border(value) if value is not None else "none")
    console.print(table)


@cli.command()
@click.argument('border')
@click.argument('factor', type=float)
@click.pass_context
def scale(ctx, border, factor):
    """Scale the visual weight of a border"""
    value = _parse(ctx, border).scale(factor)
    console.print(_sides_table(value, type(value).__name__))
    console.print(f"[bold green]Result:[/bold green] {format_border(value)}")


if __name__ == "__main__":
    cli()
