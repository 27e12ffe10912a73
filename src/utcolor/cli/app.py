"""Typer CLI application."""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from utcolor.codec.decoder import DecodeError, count_markers, decode, parse_hex_dump
from utcolor.codec.encoder import hex_dump
from utcolor.core.color import parse_color
from utcolor.core.selection import SelectionRange
from utcolor.ops.colorize import Scope
from utcolor.render.terminal import TerminalRenderer
from utcolor.session import ColorSession


def parse_range(spec: str) -> SelectionRange:
    """Parse "START:END" into a half-open range."""
    start, sep, end = spec.partition(':')
    if not sep:
        raise ValueError(f"Range must be START:END, got {spec!r}")
    try:
        return SelectionRange.between(int(start), int(end))
    except ValueError:
        raise ValueError(f"Range must be START:END, got {spec!r}") from None


def build_session(
    text: str,
    color: Optional[str] = None,
    select: Optional[str] = None,
    grid: Optional[str] = None,
    gradient: bool = False,
    start: str = "red",
    end: str = "blue",
) -> ColorSession:
    """
    Drive a session the way the interactive tool would.

    The text is typed, then the selection is made (text-widget highlight
    or grid click plus shift-click), then the picker color is chosen,
    then the gradient is applied. When no selection option is given,
    color and gradient apply to the whole text; an empty or out-of-range
    selection leaves the colors unchanged.
    """
    session = ColorSession()
    session.on_text_changed(text)

    if select:
        rng = parse_range(select)
        session.on_text_widget_selection(rng.start, rng.end)
    elif grid:
        rng = parse_range(grid)
        # Empty range means no click, same as an empty --select
        if not rng.is_empty:
            session.on_grid_click(rng.start)
            if rng.end - 1 > rng.start:
                session.on_grid_click(rng.end - 1, shift=True)

    scope = Scope.ALL if not (select or grid) else Scope.SELECTION

    if color:
        session.on_color_picker_changed(parse_color(color))
        if scope is Scope.ALL:
            session.on_apply_uniform_requested(Scope.ALL)

    if gradient:
        session.on_gradient_endpoints_changed(parse_color(start), parse_color(end))
        session.on_apply_gradient_requested(scope)

    return session


def _setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="utcolor",
        help="Color text per character and export it as game color codes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    renderer = TerminalRenderer()

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ) -> None:
        """Color text per character and export it as game color codes."""
        _setup_logging(verbose)

    @app.command()
    def encode(
        text: Annotated[str, typer.Argument(help="Text to color")],
        color: Annotated[Optional[str], typer.Option("--color", "-c", help="Solid color (#RRGGBB, r,g,b or name)")] = None,
        select: Annotated[Optional[str], typer.Option("--select", "-s", help="Text selection START:END")] = None,
        grid: Annotated[Optional[str], typer.Option("--grid", help="Grid selection START:END (click + shift-click)")] = None,
        gradient: Annotated[bool, typer.Option("--gradient", "-g", help="Apply a gradient")] = False,
        start: Annotated[str, typer.Option("--start", help="Gradient start color")] = "red",
        end: Annotated[str, typer.Option("--end", help="Gradient end color")] = "blue",
        preview: Annotated[bool, typer.Option("--preview/--no-preview", help="Show colored preview")] = True,
        show_grid: Annotated[bool, typer.Option("--show-grid", help="Show the character grid")] = False,
        show_hex: Annotated[bool, typer.Option("--hex/--no-hex", help="Show hex dump")] = True,
        raw: Annotated[bool, typer.Option("--raw", help="Write encoded bytes to stdout")] = False,
        copy: Annotated[bool, typer.Option("--copy", help="Copy encoded bytes to the clipboard")] = False,
    ) -> None:
        """Color TEXT and print the encoded color string."""
        try:
            session = build_session(text, color, select, grid, gradient, start, end)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

        if len(text) > session.config.max_length:
            console.print(f"[yellow]Text truncated to {session.config.max_length} characters[/]")

        if raw:
            sys.stdout.buffer.write(session.encoded())
            sys.stdout.buffer.flush()
        else:
            if preview:
                print(renderer.render(session.buffer))
            if show_grid:
                print(renderer.render_grid(session.buffer, session.selection))
            if show_hex:
                console.print(session.hex_dump().rstrip(), highlight=False, soft_wrap=True)

        if copy and session.copy_to_clipboard():
            console.print(f"[green]Copied {len(session.encoded())} bytes to clipboard[/]")

    @app.command()
    def hexdump(
        text: Annotated[str, typer.Argument(help="Text to color")],
        color: Annotated[Optional[str], typer.Option("--color", "-c", help="Solid color for all text")] = None,
    ) -> None:
        """Print only the hex dump of TEXT's encoded color string."""
        try:
            session = build_session(text, color)
        except ValueError as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)
        print(session.hex_dump().rstrip())

    @app.command(name="decode")
    def decode_cmd(
        data: Annotated[Optional[list[str]], typer.Argument(help="Hex bytes, e.g. 1B FF 01 01 61")] = None,
        file: Annotated[Optional[Path], typer.Option("--file", "-f", help="Read raw encoded bytes from a file")] = None,
    ) -> None:
        """Decode an encoded color string and show its runs."""
        try:
            if file is not None:
                raw_bytes = file.read_bytes()
            elif data:
                raw_bytes = parse_hex_dump(' '.join(data))
            else:
                console.print("[red]Give hex bytes or --file[/]")
                raise typer.Exit(1)
            buffer = decode(raw_bytes)
        except (DecodeError, OSError) as exc:
            console.print(f"[red]{exc}[/]")
            raise typer.Exit(1)

        print(renderer.render(buffer))

        table = Table(title=f"{count_markers(raw_bytes)} color codes, {len(buffer)} chars")
        table.add_column("Color")
        table.add_column("RGB")
        table.add_column("Hex")
        table.add_column("Text")
        for rgb, chunk in buffer.runs():
            table.add_row(
                Text("    ", style=f"on rgb({rgb.r},{rgb.g},{rgb.b})"),
                f"{rgb.r},{rgb.g},{rgb.b}",
                rgb.to_hex(),
                Text(chunk),
            )
        console.print(table)
        console.print(hex_dump(raw_bytes).rstrip(), highlight=False, soft_wrap=True)

    return app
