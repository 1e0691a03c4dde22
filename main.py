"""
main.py

Reword - command line entry point

Commands:
- export: write the live extension settings as a commented YAML backup
- import: restore settings sections from a backup document
- render: print the markup for one replaced word
- paths:  show where tool settings and the live store are kept

Usage:
    reword export [--output PATH | --stdout]
    reword import FILE [--dry-run]
    reword render ORIGINAL REPLACEMENT [--category known] [--id ID]
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from debug_trace import close_log, trace, trace_exception
from models import WordCategory
from rendering import build_replacement_html
from settings import SettingsManager, get_settings
from settings_io.backup import (
    export_to_file,
    export_to_text,
    import_from_file,
)
from store import SettingsStore


class AppContext:
    """Tool settings and the live store shared by all commands."""

    def __init__(self, config_dir: Optional[Path] = None, data_dir: Optional[Path] = None):
        if config_dir is None and data_dir is None:
            self.settings_manager = get_settings()
        else:
            self.settings_manager = SettingsManager(config_dir=config_dir, data_dir=data_dir)
        self.settings_manager.ensure_file_complete()
        self.settings_manager.apply_debug()
        self.store = SettingsStore(self.settings_manager.get_store_path())


def _echo_notice(notice) -> None:
    prefix = {"success": "OK", "warning": "WARNING", "error": "ERROR"}.get(notice.level, notice.level.upper())
    click.echo(f"{prefix}: {notice.message}", err=notice.is_error)


@click.group()
@click.option("--config-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding settings.toml (default: platform config dir).")
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory holding the live settings store (default: platform data dir).")
@click.pass_context
def cli(ctx, config_dir, data_dir):
    """Reword: replacement rendering and settings backup tools."""
    ctx.obj = AppContext(config_dir, data_dir)
    ctx.call_on_close(close_log)


@cli.command("export")
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), default=None,
              help="Directory for the backup file (default: export directory setting).")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the document instead of writing a file.")
@click.pass_obj
def export_command(app: AppContext, output, to_stdout):
    """Export the live settings as a commented YAML document."""
    if to_stdout:
        text, notice = export_to_text(app.store.settings)
        if text is None:
            _echo_notice(notice)
            sys.exit(1)
        click.echo(text, nl=False)
        return

    directory = output or app.settings_manager.get_export_dir()
    path, notice = export_to_file(
        app.store.settings,
        directory,
        extension=app.settings_manager.settings.export.extension,
    )
    _echo_notice(notice)
    if path is None:
        sys.exit(1)
    click.echo(str(path))


@cli.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--dry-run", is_flag=True, help="Report what would be restored without saving.")
@click.pass_obj
def import_command(app: AppContext, file, dry_run):
    """Restore settings sections from FILE (.yaml, .yml or .txt)."""
    result, notice = import_from_file(file, app.store)
    _echo_notice(notice)
    if result is not None:
        for key in result.applied_keys:
            click.echo(f"  restored: {key}")
        for key in result.ignored_keys:
            click.echo(f"  ignored: {key}")
        for message in result.errors:
            click.echo(f"  check: {message}")
    if notice.is_error:
        sys.exit(1)
    if result is not None and result.recognized and not dry_run:
        app.store.save()


@cli.command("render")
@click.argument("original")
@click.argument("replacement")
@click.option("--category", "-c", default=WordCategory.LEARNING, show_default=True,
              help="Word category whose style is used.")
@click.option("--id", "entry_id", default="entry-1", show_default=True, help="Per-occurrence identifier.")
@click.option("--hide-original", is_flag=True, help="Render as if original text display were off.")
@click.pass_obj
def render_command(app: AppContext, original, replacement, category, entry_id, hide_original):
    """Print the markup replacing ORIGINAL with REPLACEMENT."""
    settings = app.store.settings
    original_text_config = settings.original_text_config()
    if hide_original:
        original_text_config.show = False
    styles = settings.style_configs()
    if category not in styles:
        click.echo(f"ERROR: no style for category {category!r}", err=True)
        sys.exit(1)
    click.echo(build_replacement_html(
        original,
        replacement,
        category,
        styles,
        original_text_config,
        entry_id,
        options=app.settings_manager.settings.render,
    ))


@cli.command("paths")
@click.pass_obj
def paths_command(app: AppContext):
    """Show the tool settings file and the live store file."""
    click.echo(f"settings: {app.settings_manager.get_settings_path()}")
    click.echo(f"store:    {app.store.path}")
    click.echo(f"exports:  {app.settings_manager.get_export_dir()}")


def main():
    """Console script entry point."""
    try:
        cli()
    except Exception as e:
        trace(f"FATAL: {type(e).__name__}: {e}", "CRASH")
        trace_exception("Fatal exception")
        close_log()
        raise


if __name__ == "__main__":
    main()
