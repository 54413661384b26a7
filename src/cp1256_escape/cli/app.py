"""Typer CLI application."""

from __future__ import annotations

import json
import logging
import sys
import unicodedata
from pathlib import Path
from typing import Annotated, Optional, Union

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from cp1256_escape.codec.decoder import DecodeResult, decode, decode_with_report
from cp1256_escape.codec.encoder import EncodeResult, encode, encode_with_report
from cp1256_escape.codec.token import format_token
from cp1256_escape.core.constants import ASCII_MAX, FORWARD_ENTRIES
from cp1256_escape.core.errors import Cp1256EscapeError, LossyConversionError
from cp1256_escape.core.table import ForwardTable, build_reverse_table, default_tables
from cp1256_escape.io.convert import decode_file, encode_file, read_escaped, read_unicode

STRICT_ENVVAR = "CP1256_ESCAPE_STRICT"


def _read_input(text: Optional[str]) -> str:
    return text if text is not None else sys.stdin.read()


def _char_name(char: str) -> str:
    return unicodedata.name(char, "<unnamed>")


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="cp1256-escape",
        help="Convert Arabic-script text to and from escaped CP1256 bytes.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    def _report(result: Union[EncodeResult, DecodeResult]) -> None:
        err_console.print(f"[bold]Tokens:[/] {result.token_count}")
        if isinstance(result, EncodeResult):
            for char in result.fallback_chars:
                err_console.print(
                    f"[yellow]Fallback:[/] U+{ord(char):04X} {escape(_char_name(char))}"
                )
        else:
            for byte in result.unmapped_bytes:
                err_console.print(f"[yellow]Unmapped byte:[/] {byte:#04x}")
        if result.is_lossy:
            err_console.print("[yellow]Result is lossy and will not round-trip[/]")

    def _emit(value: str, output: Optional[Path], encoding: str) -> None:
        if output is None:
            print(value)
        else:
            output.write_text(value, encoding=encoding)
            err_console.print(f"[green]Wrote {output}[/]")

    @app.callback()
    def main_options(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Convert Arabic-script text to and from escaped CP1256 bytes."""
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=err_console, show_path=False)],
            )

    @app.command(name="encode")
    def encode_cmd(
        text: Annotated[Optional[str], typer.Argument(help="Text to encode (default: stdin)")] = None,
        file: Annotated[Optional[Path], typer.Option("--file", "-f", exists=True, dir_okay=False, readable=True, help="Read input from a UTF-8 file")] = None,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write result to a file")] = None,
        strict: Annotated[bool, typer.Option("--strict", "-s", envvar=STRICT_ENVVAR, help="Fail instead of using the UTF-8 fallback")] = False,
        report: Annotated[bool, typer.Option("--report", "-r", help="Show token count and fallbacks")] = False,
    ) -> None:
        """Encode Unicode text as \\u00XX tokens."""
        try:
            if file is not None and output is not None:
                _, result = encode_file(file, output, strict=strict)
                err_console.print(f"[green]Wrote {output}[/]")
            else:
                source = read_unicode(file) if file is not None else _read_input(text)
                result = encode_with_report(source, strict=strict)
                _emit(result.text, output, "ascii")
        except LossyConversionError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)

        if report:
            _report(result)

    @app.command(name="decode")
    def decode_cmd(
        text: Annotated[Optional[str], typer.Argument(help="Escaped text to decode (default: stdin)")] = None,
        file: Annotated[Optional[Path], typer.Option("--file", "-f", exists=True, dir_okay=False, readable=True, help="Read input from a file")] = None,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write result to a UTF-8 file")] = None,
        strict: Annotated[bool, typer.Option("--strict", "-s", envvar=STRICT_ENVVAR, help="Fail on bytes with no CP1256 mapping")] = False,
        report: Annotated[bool, typer.Option("--report", "-r", help="Show token count and unmapped bytes")] = False,
    ) -> None:
        """Decode \\u00XX tokens back to Unicode text. Other text is ignored."""
        try:
            if file is not None and output is not None:
                _, result = decode_file(file, output, strict=strict)
                err_console.print(f"[green]Wrote {output}[/]")
            else:
                source = read_escaped(file) if file is not None else _read_input(text)
                result = decode_with_report(source, strict=strict)
                _emit(result.text, output, "utf-8")
        except LossyConversionError as exc:
            err_console.print(f"[red]{escape(str(exc))}[/]")
            raise typer.Exit(1)

        if report:
            _report(result)

    @app.command()
    def table(
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show the Unicode to CP1256 mapping table."""
        forward, _ = default_tables()
        entries = sorted(forward, key=lambda e: e.byte)

        if json_output:
            data = [
                {
                    "codepoint": f"U+{e.codepoint:04X}",
                    "char": e.char,
                    "name": _char_name(e.char),
                    "byte": f"0x{e.byte:02X}",
                    "token": format_token(e.byte),
                }
                for e in entries
            ]
            print(json.dumps(data, indent=2, ensure_ascii=False))
            return

        grid = Table(title=f"CP1256 mapping ({len(entries)} entries)")
        grid.add_column("Byte", style="cyan")
        grid.add_column("Token")
        grid.add_column("Codepoint", style="magenta")
        grid.add_column("Char")
        grid.add_column("Name", style="dim")
        for e in entries:
            grid.add_row(
                f"0x{e.byte:02X}",
                escape(format_token(e.byte)),
                f"U+{e.codepoint:04X}",
                e.char,
                _char_name(e.char),
            )
        console.print(grid)

    @app.command()
    def check() -> None:
        """Verify the table is injective and its repertoire round-trips."""
        try:
            forward = ForwardTable(FORWARD_ENTRIES)
        except Cp1256EscapeError as exc:
            console.print(f"[red]Table invalid:[/] {escape(str(exc))}")
            raise typer.Exit(1)
        console.print(f"[green]Injective:[/] {len(forward)} entries, no duplicate codepoints or bytes")

        reverse = build_reverse_table(forward)
        if reverse != build_reverse_table(forward):
            console.print("[red]Reverse table construction is not deterministic[/]")
            raise typer.Exit(1)

        chars = [chr(cp) for cp in range(ASCII_MAX + 1)] + [e.char for e in forward]
        failures = [c for c in chars if decode(encode(c, strict=True), strict=True) != c]
        if failures:
            for char in failures:
                console.print(f"[red]Round trip failed:[/] U+{ord(char):04X}")
            raise typer.Exit(1)
        console.print(f"[green]Round trip:[/] {len(chars)} characters OK")

    return app
