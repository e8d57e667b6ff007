import logging
import shutil
import sys
from pathlib import Path
from typing import Optional

import typer
from clang_format_invoker.engine import CLANG_FORMAT_BINARY_ENV, ClangFormatEngine, resolve_binary
from clang_format_invoker.errors import ClangFormatError, ToolNotFoundError
from clang_format_invoker.models import StylePreset

from .config import DEFAULT_CONFIG_FILE, InvokerConfig, find_config_file
from .converters import format_result_to_report, format_results_to_summary
from .models import FileStatus

app = typer.Typer(help="clang-format invoker - Format C/C++ sources with an installed clang-format")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging")):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("format")
def format_command(
    files: list[Path] = typer.Argument(None, help="Files to format (reads stdin when omitted)"),
    style: Optional[str] = typer.Option(None, help="Preset name (e.g. mozilla, file) or custom style"),
    binary: Optional[str] = typer.Option(None, help=f"clang-format executable (default: ${CLANG_FORMAT_BINARY_ENV} or clang-format)"),
    timeout: Optional[float] = typer.Option(None, help="Kill clang-format after this many seconds"),
    config_file: Path = typer.Option(Path(DEFAULT_CONFIG_FILE), help="Path to config file"),
    check: bool = typer.Option(False, help="Only report files that would change"),
    in_place: bool = typer.Option(False, "--in-place", "-i", help="Rewrite files in place"),
):
    """Format source files or standard input"""
    config = InvokerConfig(find_config_file(config_file)).override(style, binary, timeout)
    engine = ClangFormatEngine(config.to_formatter_config())

    if not files:
        _format_stdin(engine, check)
        return

    resolved = resolve_binary(engine.config.binary)
    # NUL in the name is reported per file by the engine
    if "\0" not in resolved and shutil.which(resolved) is None:
        _tool_not_found(f"Could not run clang-format executable '{resolved}'")

    results = engine.format_files(files, write=in_place and not check)

    would_change = False
    for result in results.results:
        report = format_result_to_report(result)
        if report.status == FileStatus.FAILED:
            typer.echo(f"ERROR: {report.file_path} - {report.message}", err=True)
        elif report.status == FileStatus.REFORMATTED and check:
            typer.echo(f"Would reformat {report.file_path}")
            would_change = True
        elif report.status == FileStatus.REFORMATTED and in_place:
            typer.echo(f"Reformatted {report.file_path}")
        elif not check and not in_place:
            typer.echo(result.source, nl=False)

    summary = format_results_to_summary(results)
    typer.echo(
        f"\nTotal files: {summary.total_files} ({summary.reformatted_files} reformatted, {summary.failed_files} failed)",
        err=True,
    )

    if summary.failed_files > 0 or would_change:
        raise typer.Exit(code=1)


def _format_stdin(engine: ClangFormatEngine, check: bool):
    source = sys.stdin.read()
    try:
        output = engine.format(source)
    except ToolNotFoundError as e:
        _tool_not_found(str(e))
    except ClangFormatError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    if check:
        if output != source:
            typer.echo("Would reformat <stdin>")
            raise typer.Exit(code=1)
        return
    typer.echo(output, nl=False)


def _tool_not_found(message: str):
    typer.echo(f"Error: {message}. Install clang-format, pass --binary or set ${CLANG_FORMAT_BINARY_ENV}.", err=True)
    raise typer.Exit(code=1)


@app.command()
def styles():
    """List the built-in style presets"""
    for preset in StylePreset:
        typer.echo(f"{preset.name.lower():<10} --style={preset.value}")


if __name__ == "__main__":
    app()
