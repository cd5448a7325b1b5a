"""dstruck CLI - Main entry point."""

import copy
import json
import logging
import sys
from pathlib import Path
from typing import Any

import click
import yaml  # type: ignore[import-untyped]
from tqdm import tqdm

from dstruck.keyboard import KeyboardContext, KeyHandler
from dstruck.normalize.double_struck import mapping_table, to_double_struck
from dstruck.qc.unicode_sanity import check_text, verify_mapping_table
from dstruck.utils.io import read_lines, write_lines
from dstruck.utils.log import log_with_context, setup_logging
from dstruck.utils.parallel import map_parallel_ordered


# Root directory
ROOT_DIR = Path(__file__).parent.parent

DEFAULT_SETTINGS: dict[str, Any] = {
    "logging": {"level": "WARNING", "format": "pretty", "file": None},
    "keyboard": {"double_tap_window": 0.3},
    "convert": {"workers": 4, "suffix": ".ds"},
}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(settings_path: Path | None = None) -> dict[str, Any]:
    """
    Load settings.yaml over the built-in defaults.

    Args:
        settings_path: Explicit settings file (default: etc/settings.yaml)

    Returns:
        Settings dict
    """
    if settings_path is None:
        settings_path = ROOT_DIR / "etc" / "settings.yaml"
        if not settings_path.exists():
            click.echo("Warning: settings.yaml not found, using defaults", err=True)
            return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        with Path(settings_path).open(encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid settings file {settings_path}: {e}") from e

    if not isinstance(loaded, dict):
        raise click.ClickException(f"Invalid settings file {settings_path}: expected a mapping")

    return _merge(DEFAULT_SETTINGS, loaded)


def convert_file(input_path: Path, output_path: Path) -> tuple[Path, int]:
    """
    Convert a UTF-8 text file to double-struck, writing atomically.

    Args:
        input_path: Source file
        output_path: Destination file

    Returns:
        Tuple of (output path, number of lines written)
    """
    lines = (to_double_struck(line) for line in read_lines(input_path))
    return output_path, write_lines(output_path, lines)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Settings file (default: etc/settings.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, settings_path: Path | None) -> None:
    """Double-struck text converter and keyboard simulator."""
    settings = load_settings(settings_path)

    log_level = "DEBUG" if verbose else settings["logging"]["level"]
    log_format = settings["logging"].get("format", "pretty")
    log_file = settings["logging"].get("file")

    logger = setup_logging(
        level=log_level,
        format_type=log_format,
        log_file=ROOT_DIR / log_file if log_file else None,
    )

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["logger"] = logger


@cli.command()
@click.argument("text", required=False)
@click.pass_context
def convert(ctx: click.Context, text: str | None) -> None:
    """Convert TEXT (or stdin) to double-struck characters."""
    logger = ctx.obj["logger"]

    if text is None:
        text = sys.stdin.read()
        logger.debug(f"Read {len(text)} characters from stdin")

    click.echo(to_double_struck(text), nl=not text.endswith("\n"))


@cli.command("convert-files")
@click.argument(
    "inputs",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: next to each input)",
)
@click.option("--suffix", help="Suffix appended to output file names")
@click.option("--workers", type=int, help="Parallel workers")
@click.pass_context
def convert_files(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    output_dir: Path | None,
    suffix: str | None,
    workers: int | None,
) -> None:
    """Convert UTF-8 text files to double-struck characters."""
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    suffix = suffix if suffix is not None else settings["convert"]["suffix"]
    workers = workers if workers is not None else settings["convert"]["workers"]

    jobs = []
    targets: dict[Path, Path] = {}
    for input_path in inputs:
        target_dir = output_dir if output_dir is not None else input_path.parent
        output_path = target_dir / f"{input_path.name}{suffix}"
        resolved = output_path.resolve()
        if resolved == input_path.resolve():
            click.echo(f"Error: output would overwrite {input_path}", err=True)
            sys.exit(1)
        if resolved in targets:
            click.echo(
                f"Error: {targets[resolved]} and {input_path} both write to {output_path}", err=True
            )
            sys.exit(1)
        targets[resolved] = input_path
        jobs.append((input_path, output_path))

    try:
        results = map_parallel_ordered(
            lambda job: convert_file(*job),
            jobs,
            max_workers=workers,
        )
        for output_path, line_count in tqdm(results, total=len(jobs), desc="Converting", unit="file"):
            log_with_context(logger, "info", "Converted file", output=str(output_path), lines=line_count)
            tqdm.write(str(output_path))

    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Conversion failed: {e}", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def table(output_format: str) -> None:
    """Print the double-struck mapping table."""
    entries = mapping_table()

    if output_format == "json":
        click.echo(json.dumps(entries, ensure_ascii=False, indent=2))
        return

    for source, target in entries.items():
        click.echo(f"{source}  {target}  U+{ord(target):04X}")


@cli.command()
@click.option("--text", help="Also report on the characters of TEXT")
@click.pass_context
def check(ctx: click.Context, text: str | None) -> None:
    """Verify the mapping table against the Unicode database."""
    logger = ctx.obj["logger"]

    issues = verify_mapping_table(logger)
    for issue in issues:
        click.echo(f"  ERROR: {issue}", err=True)

    if text is not None:
        result = check_text(text)
        click.echo(f"Characters: {result.total_chars}")
        click.echo(f"  Mappable: {result.mappable_chars}")
        click.echo(f"  Double-struck: {result.double_struck_chars}")
        click.echo(f"  Other: {result.other_chars}")
        if result.non_ascii:
            chars = ", ".join(sorted(result.non_ascii))
            click.echo(f"  Non-ASCII pass-through: {chars}")

    if issues:
        sys.exit(1)
    click.echo("Mapping table verified")


@cli.command("type")
@click.argument("tokens", nargs=-1, required=True)
@click.pass_context
def type_(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """
    Simulate key presses on the keyboard.

    TOKENS are glyphs typed as shown on the keys, or named keys: <shift>,
    <space>, <return>, <backspace>, <123>, <#+=>, <ABC>.
    """
    logger = ctx.obj["logger"]
    settings = ctx.obj["settings"]

    context = KeyboardContext(double_tap_window=settings["keyboard"]["double_tap_window"])
    handler = KeyHandler(context, logger=logging.getLogger("dstruck.keyboard"))

    try:
        text = handler.type_keys(tokens)
    except ValueError as e:
        logger.error(f"Typing failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(text)


def main() -> None:
    """Entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
