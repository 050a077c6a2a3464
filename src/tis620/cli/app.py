"""Typer CLI application."""

import unicodedata
from pathlib import Path
from typing import Annotated, NoReturn, Optional

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

from tis620.core.chars import ThaiChar
from tis620.core.constants import DEFAULT_REPLACEMENT
from tis620.core.table import TABLE
from tis620.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def _describe(byte: int) -> tuple[str, str, str]:
    """Return (glyph, code point, name) columns for a table row."""
    ch = TABLE.char_for(byte)
    if ch is None:
        return "", "", "(unmapped)"
    thai = ThaiChar.from_byte(byte)
    name = thai.name if thai is not None else unicodedata.name(ch, "<control>")
    glyph = ch if ch.isprintable() else repr(ch)
    return glyph, f"U+{ord(ch):04X}", name


def _fail(console: "Console", error: Exception) -> NoReturn:
    """Print ``error`` in red and exit with status 1."""
    console.print(f"[red]{escape(str(error))}[/]")
    raise typer.Exit(1)


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install tis620[cli]")

    app = typer.Typer(
        name="tis620",
        help="Convert text between Unicode and TIS-620 (Thai).",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def configure(
        log_level: Annotated[str, typer.Option("--log-level", "-l", help="Logging level")] = "WARNING",
    ) -> None:
        """Convert text between Unicode and TIS-620 (Thai)."""
        try:
            setup_logging(log_level)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--log-level")

    @app.command()
    def encode(
        source: Annotated[Path, typer.Argument(help="Unicode text file to read")],
        dest: Annotated[Path, typer.Argument(help="TIS-620 file to write")],
        lossy: Annotated[bool, typer.Option("--lossy", help="Replace unencodable characters")] = False,
        replacement: Annotated[str, typer.Option("--replacement", "-r", help="Replacement character for --lossy")] = DEFAULT_REPLACEMENT,
        drop: Annotated[bool, typer.Option("--drop", help="Drop unencodable characters (implies --lossy)")] = False,
        source_encoding: Annotated[str, typer.Option("--source-encoding", help="Encoding of SOURCE")] = "utf-8",
    ) -> None:
        """Encode a Unicode text file as TIS-620."""
        from tis620.codec.transform import encode_lossy_report
        from tis620.io.writer import save_text

        try:
            # Bytes in, bytes out: line endings pass through unchanged
            text = source.read_bytes().decode(source_encoding)
            logger.info("Encoding %s (%d characters)", source, len(text))

            if lossy or drop:
                chosen = None if drop else replacement
                data, report = encode_lossy_report(text, chosen)
                dest.write_bytes(data)
                if report.was_lossy:
                    console.print(f"[yellow]Replaced {report.count} unencodable characters[/]")
                written = len(data)
            else:
                written = save_text(dest, text)
        except (OSError, LookupError, ValueError) as e:
            _fail(console, e)

        console.print(f"[green]Encoded {source} → {dest}[/] ({written} bytes)")

    @app.command()
    def decode(
        source: Annotated[Path, typer.Argument(help="TIS-620 file to read")],
        dest: Annotated[Path, typer.Argument(help="Unicode text file to write")],
        lossy: Annotated[bool, typer.Option("--lossy", help="Replace unmapped bytes with U+FFFD")] = False,
        target_encoding: Annotated[str, typer.Option("--target-encoding", help="Encoding of DEST")] = "utf-8",
    ) -> None:
        """Decode a TIS-620 file to Unicode text."""
        from tis620.codec.transform import decode_lossy_report
        from tis620.io.reader import load_text

        try:
            if lossy:
                text, report = decode_lossy_report(source.read_bytes())
                if report.was_lossy:
                    console.print(f"[yellow]Replaced {report.count} unmapped bytes[/]")
            else:
                text = load_text(source)

            dest.write_bytes(text.encode(target_encoding))
        except (OSError, LookupError, ValueError) as e:
            _fail(console, e)

        logger.info("Decoded %s (%d characters)", source, len(text))
        console.print(f"[green]Decoded {source} → {dest}[/] ({len(text)} characters)")

    @app.command()
    def table(
        all_bytes: Annotated[bool, typer.Option("--all", "-a", help="Show all 256 bytes, not just Thai")] = False,
        start: Annotated[Optional[int], typer.Option("--start", help="First byte to show")] = None,
    ) -> None:
        """Show the TIS-620 code table."""
        first = start if start is not None else (0x00 if all_bytes else 0xA0)
        if not 0 <= first <= 0xFF:
            raise typer.BadParameter("must be 0-255", param_hint="--start")

        grid = Table(title="TIS-620")
        grid.add_column("Byte", style="cyan")
        grid.add_column("Char")
        grid.add_column("Unicode", style="magenta")
        grid.add_column("Name")

        for byte in range(first, 0x100):
            glyph, code, name = _describe(byte)
            if not code and not all_bytes:
                continue
            grid.add_row(f"0x{byte:02X}", escape(glyph), code, name)

        console.print(grid)
        console.print(f"{len(TABLE)} of 256 bytes mapped")

    return app
