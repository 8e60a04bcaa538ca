"""
Main CLI entry point for logconverter.

Provides the command-line interface using Click:

    logconverter convert app.json --to html -o report.html
    logconverter preview app.log --limit 20
    logconverter formats
    logconverter config show --json
"""

import json as _json
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import click as _click

import logconverter
import logconverter.config as config
import logconverter.conversion as conversion
import logconverter.core as core
import logconverter.parsers as parsers
import logconverter.renderers as renderers

_logger = _logging.getLogger(__name__)

# Custom Click context settings for better help formatting
CONTEXT_SETTINGS: dict[str, _typing.Any] = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 100,
}

_LOG_LEVELS = ["debug", "info", "warning", "error"]

# Rich styles for the preview table, keyed by upper-cased level
_LEVEL_STYLES: dict[str, str] = {
    "ERROR": "bold red",
    "WARNING": "yellow",
    "WARN": "yellow",
    "DEBUG": "dim",
    "INFO": "green",
}


def _fail(error: Exception) -> _typing.NoReturn:
    """Report an error on stderr and exit with status 1."""
    _click.echo(f"Error: {error}", err=True)
    raise SystemExit(1) from None


def _configure_logging(level_name: str) -> None:
    _logging.basicConfig(
        level=getattr(_logging, level_name.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


@_click.group(context_settings=CONTEXT_SETTINGS)
@_click.version_option(logconverter.__version__, "-v", "--version", prog_name="logconverter")
@_click.option(
    "--log-level",
    type=_click.Choice(_LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Log level (default: logging.level from config)",
)
@_click.pass_context
def cli(ctx: _click.Context, log_level: str | None) -> None:
    """
    logconverter - convert logs between formats.

    Reads JSON, CSV, XML and plain-text logs and writes Markdown, HTML,
    JSON, XML or CSV.

    \b
    Examples:
        logconverter convert app.json                # HTML to stdout
        logconverter convert app.csv --to markdown   # Markdown table
        logconverter convert app.log -o report.html  # Write a file
        logconverter preview app.xml                 # Table in the terminal
        logconverter formats                         # Supported formats
    """
    try:
        settings = config.Settings()
    except config.ConfigFileError as e:
        _fail(e)

    _configure_logging(log_level or settings.logging.level)

    unknown = settings.get_unknown_fields()
    if unknown:
        _logger.warning("Unknown config keys ignored: %s", ", ".join(sorted(unknown)))

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


# =============================================================================
# convert
# =============================================================================


@cli.command(name="convert")
@_click.argument("input_path", metavar="INPUT", type=_click.Path(dir_okay=False, path_type=_pathlib.Path))
@_click.option(
    "--to",
    "target_format",
    type=str,
    default=None,
    help="Output format: markdown, html, json, xml, csv (default: output.default_format)",
)
@_click.option(
    "-o",
    "--output",
    "output_path",
    type=_click.Path(dir_okay=False, path_type=_pathlib.Path),
    default=None,
    help="Write to this file instead of stdout",
)
@_click.option("--color/--no-color", "use_color", default=None, help="Colour levels (Markdown, HTML)")
@_click.option("--styles/--no-styles", "include_styles", default=None, help="Embed the HTML stylesheet")
@_click.option("--summary/--no-summary", "enable_summary", default=None, help="HTML count banner")
@_click.option("--fold/--no-fold", "fold_long_messages", default=None, help="Fold long HTML text")
@_click.option(
    "--fold-length",
    "fold_message_length",
    type=_click.IntRange(min=0),
    default=None,
    help="Fold threshold in characters",
)
@_click.option("--group-by", "group_by_property", type=str, default=None, help="Property to group HTML rows by")
@_click.option(
    "--relaxed-json",
    "relaxed_json_escaping",
    is_flag=True,
    default=None,
    help="Do not escape non-ASCII or HTML-sensitive characters in JSON",
)
@_click.pass_context
def convert_cmd(
    ctx: _click.Context,
    input_path: _pathlib.Path,
    target_format: str | None,
    output_path: _pathlib.Path | None,
    use_color: bool | None,
    include_styles: bool | None,
    enable_summary: bool | None,
    fold_long_messages: bool | None,
    fold_message_length: int | None,
    group_by_property: str | None,
    relaxed_json_escaping: bool | None,
) -> None:
    """Convert a log file to another format.

    The input format is taken from the file extension (.json, .csv, .xml,
    .txt, .log).
    """
    settings: config.Settings = ctx.obj["settings"]
    target = target_format or settings.output.default_format

    options = settings.to_render_options(
        use_color=use_color,
        include_styles=include_styles,
        enable_summary=enable_summary,
        fold_long_messages=fold_long_messages,
        fold_message_length=fold_message_length,
        group_by_property=group_by_property,
        relaxed_json_escaping=relaxed_json_escaping or None,
    )

    try:
        text = conversion.convert_file(input_path, target, options)
    except (core.LogConverterError, OSError) as e:
        _fail(e)

    if output_path is None:
        _click.echo(text, nl=False)
        return

    try:
        output_path.write_text(text, encoding=settings.output.encoding)
    except (OSError, LookupError) as e:
        _fail(e)
    _logger.info("Wrote %s", output_path)


# =============================================================================
# preview
# =============================================================================


@cli.command(name="preview")
@_click.argument("input_path", metavar="INPUT", type=_click.Path(dir_okay=False, path_type=_pathlib.Path))
@_click.option(
    "--limit",
    type=_click.IntRange(min=1),
    default=None,
    help="Show at most this many records",
)
def preview_cmd(input_path: _pathlib.Path, limit: int | None) -> None:
    """Show a log file as a table in the terminal."""
    import rich.console as _rich_console
    import rich.table as _rich_table
    import rich.text as _rich_text

    try:
        records = conversion.load_file(input_path)
    except (core.LogConverterError, OSError) as e:
        _fail(e)

    shown = records[:limit] if limit is not None else records
    headers = core.column_headers(shown)

    table = _rich_table.Table(title=f"{input_path.name} ({len(records)} records)")
    for header in headers:
        table.add_column(header, overflow="fold")

    for record in shown:
        cells = [
            core.format_display_timestamp(record.timestamp),
            record.level,
            record.message,
            record.exception or "",
            record.event_id or "",
        ]
        cells.extend(
            core.format_property_value(record.properties.get(key))
            for key in headers[len(core.STANDARD_HEADERS):]
        )
        # Text cells so log content is never read as console markup
        row = [_rich_text.Text(cell) for cell in cells]
        row[1].stylize(_LEVEL_STYLES.get(record.level.upper(), ""))
        table.add_row(*row)

    _rich_console.Console().print(table)
    if limit is not None and len(records) > limit:
        _click.echo(f"... {len(records) - limit} more record(s)")


# =============================================================================
# formats
# =============================================================================


@cli.command(name="formats")
def formats_cmd() -> None:
    """List supported input and output formats."""
    _click.echo("Input formats:")
    for parser in parsers.available_parsers():
        tags = ", ".join((parser.name, *parser.aliases))
        _click.echo(f"  {tags:<12} {' '.join(parser.extensions)}")

    _click.echo("\nOutput formats:")
    for renderer in renderers.available_renderers():
        tags = ", ".join((renderer.name, *renderer.aliases))
        _click.echo(f"  {tags:<16} {renderer.extension:<6} {renderer.media_type}")


# =============================================================================
# config
# =============================================================================


@cli.group()
def config_cmd() -> None:
    """Configuration management commands."""


# Register config_cmd with the name "config" to avoid shadowing the module
cli.add_command(config_cmd, name="config")


@config_cmd.command(name="show")
@_click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@_click.pass_context
def config_show(ctx: _click.Context, as_json: bool) -> None:
    """Show effective configuration from all sources.

    \b
    Examples:
        logconverter config show         # YAML
        logconverter config show --json  # JSON
    """
    import yaml as _yaml

    settings: config.Settings = ctx.obj["settings"]
    full_config = settings.model_dump(mode="json")

    if as_json:
        _click.echo(_json.dumps(full_config, indent=2))
    else:
        _click.echo(_yaml.safe_dump(full_config, default_flow_style=False, sort_keys=False), nl=False)


def main() -> None:
    """Main entry point with correct program name."""
    cli(prog_name="logconverter")


if __name__ == "__main__":
    main()
