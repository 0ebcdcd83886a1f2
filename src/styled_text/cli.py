"""Command-line interface for Styled Text."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from styled_text import __version__
from styled_text.config import get_settings
from styled_text.core.styler import SUPPORTED_EXTENSIONS, StylingError, TextStyler
from styled_text.formatting.ir import BracketScope
from styled_text.renderers import SUPPORTED_RENDERERS, ConsoleRenderer

app = typer.Typer(
    name="styled-text",
    help="Render Markdown inline markup as styled text spans.",
    add_completion=False,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Styled Text v{__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Set up root logging for the CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def generate_output_path(
    input_path: Path,
    extension: str,
    output_dir: Optional[Path] = None,
) -> Path:
    """Generate output path with -styled suffix."""
    output_name = f"{input_path.stem}-styled{extension}"

    if output_dir:
        return output_dir / output_name
    return input_path.parent / output_name


def emit(styler: TextStyler, markdown_text: str) -> None:
    """Render Markdown straight to the terminal."""
    styled = styler.style(markdown_text)
    if isinstance(styler.renderer, ConsoleRenderer):
        console.print(styler.renderer.to_rich_text(styled), soft_wrap=True)
    else:
        console.print(
            styler.renderer.render(styled),
            markup=False,
            highlight=False,
            soft_wrap=True,
        )


def process_file(
    styler: TextStyler,
    input_path: Path,
    output_path: Optional[Path],
    verbose: bool,
) -> bool:
    """Process a single file. Returns True on success."""
    if not input_path.exists():
        console.print(f"[red]Error:[/red] File not found: {input_path}")
        return False

    ext = input_path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        console.print(
            f"[yellow]Skipping:[/yellow] {input_path.name} "
            f"(unsupported format: {ext})"
        )
        return False

    if output_path is None:
        output_path = generate_output_path(
            input_path, styler.renderer.file_extension
        )

    if verbose:
        console.print(f"[blue]Processing:[/blue] {input_path}")
        console.print(f"[blue]Output:[/blue] {output_path}")
        console.print(f"[blue]Renderer:[/blue] {styler.renderer.name}")

    try:
        styled = styler.render_file(input_path, output_path)
        console.print(f"[green]Success:[/green] {output_path} ({len(styled)} spans)")
        return True
    except Exception as e:
        console.print(f"[red]Error processing {input_path.name}:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        return False


def process_folder(
    styler: TextStyler,
    folder_path: Path,
    verbose: bool,
    recursive: bool = True,
) -> tuple[int, int]:
    """Process all supported files in a folder. Returns (success_count, fail_count)."""
    if not folder_path.is_dir():
        console.print(f"[red]Error:[/red] Not a directory: {folder_path}")
        return 0, 0

    files: list[Path] = []
    for ext in SUPPORTED_EXTENSIONS:
        if recursive:
            files.extend(folder_path.rglob(f"*{ext}"))
        else:
            files.extend(folder_path.glob(f"*{ext}"))

    # Skip our own output
    files = sorted(f for f in files if not f.stem.endswith("-styled"))

    if not files:
        console.print(
            f"[yellow]No supported files found in {folder_path}[/yellow]\n"
            f"Supported formats: {', '.join(SUPPORTED_EXTENSIONS)}"
        )
        return 0, 0

    console.print(f"[blue]Found {len(files)} file(s) to process[/blue]")

    success_count = 0
    fail_count = 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Processing files...", total=len(files))

        for file_path in files:
            progress.update(task, description=f"Processing {file_path.name}...")
            if process_file(styler, file_path, None, verbose):
                success_count += 1
            else:
                fail_count += 1
            progress.advance(task)

    return success_count, fail_count


@app.command()
def main(
    path: Optional[Path] = typer.Argument(
        None,
        help="Markdown file or folder to process",
        exists=True,
    ),
    text: Optional[str] = typer.Option(
        None,
        "--text",
        "-t",
        help="Markdown text to render instead of a file",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output path (for single file only)",
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help=f"Renderer to use: {', '.join(SUPPORTED_RENDERERS)} (default: html)",
    ),
    tint: Optional[str] = typer.Option(
        None,
        "--tint",
        help="Tint color for links and inline code, as #RRGGBB",
    ),
    bracket_scope: Optional[BracketScope] = typer.Option(
        None,
        "--bracket-scope",
        "-b",
        help="Bracket all text (all) or only link labels (links)",
    ),
    inline: bool = typer.Option(
        False,
        "--inline",
        "-i",
        help="Treat input as a single line of inline markup",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Render Markdown inline markup as styled text.

    Examples:

        styled-text notes.md  # Writes notes-styled.html

        styled-text notes.md --format plain -o notes.txt

        styled-text /path/to/folder --format console

        styled-text --text "See [1](https://example.com)" --format console

        styled-text --text "Use `pip`" --tint "#FF9500" --bracket-scope links
    """
    configure_logging(verbose)

    try:
        settings = get_settings()
        configuration = settings.style_configuration(
            tint=tint, bracket_scope=bracket_scope
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    try:
        styler = TextStyler(configuration, renderer=output_format, inline=inline)
    except StylingError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if text is not None:
        if path is not None:
            console.print("[yellow]Warning:[/yellow] PATH is ignored when --text is given.")
        if output is not None:
            try:
                styler.renderer.write(styler.style(text), output)
            except OSError as e:
                console.print(f"[red]Error:[/red] Cannot write {output}: {escape(str(e))}")
                raise typer.Exit(1)
            console.print(f"[green]Success:[/green] {output}")
        else:
            emit(styler, text)
        raise typer.Exit(0)

    if path is None:
        console.print("[red]Error:[/red] Provide a PATH or --text.")
        raise typer.Exit(1)

    if path.is_file():
        success = process_file(styler, path, output, verbose)
        raise typer.Exit(0 if success else 1)
    else:
        if output is not None:
            console.print(
                "[yellow]Warning:[/yellow] --output is ignored in folder mode. "
                "Files will be saved alongside originals with -styled suffix."
            )

        success, fail = process_folder(styler, path, verbose)
        console.print(
            f"\n[bold]Complete:[/bold] {success} succeeded, {fail} failed"
        )
        raise typer.Exit(0 if fail == 0 else 1)


if __name__ == "__main__":
    app()
