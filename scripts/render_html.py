#!/usr/bin/env python3
"""
HTML Rendering CLI

Renders HTML pages, URLs or raw HTML (from stdin) to PDF or image files with
wkhtmltopdf / wkhtmltoimage.

Commands:
    pdf     - Render to PDF
    image   - Render to an image (format follows the output extension)
    command - Print the command line without running it

Examples:\n

    render_html.py pdf https://example.com out/example.pdf

    render_html.py pdf page.html out/page.pdf -o page-size=A4 -o grayscale=true

    render_html.py pdf - out/page.pdf < page.html                  # Raw HTML from stdin

    render_html.py image page.html out/page.png -o width=1024 --overwrite

    render_html.py pdf page.html out/page.pdf -P cookie=session=abc123

    render_html.py pdf page.html out/page.pdf --preset page_a4_portrait

    render_html.py command page.html out/page.pdf --kind pdf -o dpi=300
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from wkpress.rendering import GENERATORS, Generator, GeneratorError
from wkpress.rendering.logger import setup_rendering_logger
from wkpress.utils.presets import apply_presets
from wkpress.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

STDIN_SOURCE = "-"


def parse_value(raw: str) -> Any:
    """Map 'true'/'false' to booleans; keep everything else as text."""
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return raw


def parse_options(option_args: List[str], pair_args: List[str]) -> Dict[str, Any]:
    """
    Turn repeated name=value and name=key=value arguments into an option dict.

    A name given more than once becomes a list. Pairs build a dict per name.
    """
    options: Dict[str, Any] = {}

    for arg in option_args or []:
        if "=" not in arg:
            raise typer.BadParameter(f"Expected name=value, got '{arg}'", param_hint="--option")
        name, raw = arg.split("=", 1)
        value = parse_value(raw)
        if name in options:
            previous = options[name]
            options[name] = previous + [value] if isinstance(previous, list) else [previous, value]
        else:
            options[name] = value

    for arg in pair_args or []:
        parts = arg.split("=", 2)
        if len(parts) != 3:
            raise typer.BadParameter(f"Expected name=key=value, got '{arg}'", param_hint="--pair")
        name, key, value = parts
        options.setdefault(name, {})
        if not isinstance(options[name], dict):
            raise typer.BadParameter(f"'{name}' given both as option and pair", param_hint="--pair")
        options[name][key] = value

    return options


def build_generator(kind: str, binary: Optional[str], presets: List[str]) -> Generator:
    generator = GENERATORS[kind](binary)
    apply_presets(generator, presets)
    return generator


app = typer.Typer(
    help="Render HTML to PDF or images with wkhtmltopdf / wkhtmltoimage",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _render(
    kind: str,
    source: str,
    output: Path,
    option_args: List[str],
    pair_args: List[str],
    presets: List[str],
    overwrite: bool,
    binary: Optional[str],
    verbose: bool,
) -> None:
    try:
        generator = build_generator(kind, binary, presets)
        options = parse_options(option_args, pair_args)
    except (GeneratorError, ValueError, OSError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    log_file = setup_rendering_logger(
        LOGS_PATH / f"render_{now()}", binary=generator.get_binary(), verbose=verbose
    )

    typer.secho(f"\nRendering: {source}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"Output: {output}")
    typer.echo("")

    try:
        if source == STDIN_SOURCE:
            generator.generate_from_html(sys.stdin.read(), output, options, overwrite)
        else:
            generator.generate(source, output, options, overwrite)
    except GeneratorError as e:
        typer.secho(f"\n✗ Rendering failed: {type(e).__name__}", fg=typer.colors.RED, bold=True)
        typer.secho(f"  {e}", fg=typer.colors.RED)
        typer.echo(f"  Log: {log_file}\n")
        raise typer.Exit(code=1)

    typer.secho("\n✓ Rendering succeeded", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  {kind.upper()}: {output}")
    typer.echo(f"  Log: {log_file}\n")


SourceArg = Annotated[str, typer.Argument(help="Input file path or URL ('-' reads HTML from stdin)")]
OutputArg = Annotated[Path, typer.Argument(help="Output file path")]
OptionOpt = Annotated[
    Optional[List[str]],
    typer.Option("--option", "-o", help="Renderer option as name=value (repeatable)"),
]
PairOpt = Annotated[
    Optional[List[str]],
    typer.Option("--pair", "-P", help="Keyed renderer option as name=key=value (repeatable)"),
]
PresetOpt = Annotated[
    Optional[List[str]],
    typer.Option("--preset", "-p", help="Option preset from WKPRESS_PRESETS_PATH (repeatable)"),
]
OverwriteOpt = Annotated[bool, typer.Option("--overwrite", help="Replace an existing output file")]
BinaryOpt = Annotated[Optional[str], typer.Option("--binary", "-b", help="Renderer binary path")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Show debug output")]


@app.command("pdf")
def pdf_command(
    source: SourceArg,
    output: OutputArg,
    option: OptionOpt = None,
    pair: PairOpt = None,
    preset: PresetOpt = None,
    overwrite: OverwriteOpt = False,
    binary: BinaryOpt = None,
    verbose: VerboseOpt = False,
):
    """
    Render a page to PDF.

    Examples:\n

        $ render_html.py pdf https://example.com example.pdf

        $ render_html.py pdf page.html page.pdf -o orientation=Landscape
    """
    _render("pdf", source, output, option, pair, preset, overwrite, binary, verbose)


@app.command("image")
def image_command(
    source: SourceArg,
    output: OutputArg,
    option: OptionOpt = None,
    pair: PairOpt = None,
    preset: PresetOpt = None,
    overwrite: OverwriteOpt = False,
    binary: BinaryOpt = None,
    verbose: VerboseOpt = False,
):
    """
    Render a page to an image.

    Examples:\n

        $ render_html.py image https://example.com example.png -o width=1280
    """
    _render("image", source, output, option, pair, preset, overwrite, binary, verbose)


@app.command("command")
def command_command(
    source: SourceArg,
    output: OutputArg,
    kind: Annotated[str, typer.Option("--kind", "-k", help="Generator: pdf or image")] = "pdf",
    option: OptionOpt = None,
    pair: PairOpt = None,
    preset: PresetOpt = None,
    binary: BinaryOpt = None,
):
    """Print the renderer command line without running it."""
    if kind not in GENERATORS:
        typer.secho(
            f"Error: unknown kind '{kind}' (expected one of {list(GENERATORS)})\n",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        generator = build_generator(kind, binary, preset)
        typer.echo(generator.get_command(source, output, parse_options(option, pair)))
    except (GeneratorError, ValueError, OSError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
