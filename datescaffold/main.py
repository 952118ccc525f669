"""
datescaffold — CLI entrypoint.

Usage:
    python -m datescaffold.main --help
    python -m datescaffold.main new 2023-08-22
    python -m datescaffold.main plan 2023-08-22
    python -m datescaffold.main config check
"""

from __future__ import annotations

import json
import os
import sys
from datetime import date
from pathlib import Path

import click

from datescaffold import __version__
from datescaffold.core.models.scaffold import check_extension
from datescaffold.core.observability.logging_config import setup_logging

_OUTCOME_STYLE = {
    "created": ("✅", "green"),
    "skipped": ("⏭️ ", "yellow"),
    "failed": ("❌", "red"),
}


def _today() -> str:
    return date.today().isoformat()


def _check_ext(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is None:
        return None
    try:
        return check_extension(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.version_option(version=__version__, prog_name="datescaffold")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to scaffold.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """datescaffold — dated folders and files from templates."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("DSC_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("DSC_LOG_FILE"),
        log_file_level=os.environ.get("DSC_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.argument("date_input", metavar="DATE", required=False)
@click.option("--no-doc", is_flag=True, help="Skip the README.md file.")
@click.option(
    "--base-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to build the {year}/ tree under (default: from config, else cwd).",
)
@click.option(
    "--ext",
    "code_extension",
    default=None,
    callback=_check_ext,
    help="Code file extension (default: R).")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def new(
    ctx: click.Context,
    date_input: str | None,
    no_doc: bool,
    base_dir: Path | None,
    code_extension: str | None,
    as_json: bool,
) -> None:
    """Create the scaffold for DATE (yyyy-mm-dd, default: today)."""
    from datescaffold.core.use_cases.new import run_new

    result = run_new(
        date_input or _today(),
        config_path=ctx.obj.get("config_path"),
        include_doc=False if no_doc else None,
        base_dir=base_dir,
        code_extension=code_extension,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    sr = result.scaffold
    assert sr is not None  # guaranteed after error check above

    if not ctx.obj.get("quiet"):
        click.secho(f"\n📁 {sr.paths.directory}", fg="cyan", bold=True)
        if sr.directory_created:
            click.echo("   (directory created)")

    for f in sr.files:
        icon, color = _OUTCOME_STYLE[f.outcome.value]
        click.secho(f"   {icon} {f.outcome.value:<8} {f.path.name}", fg=color)
        if f.error:
            click.echo(f"      {f.error}: {f.message}")

    if not sr.ok:
        sys.exit(1)


@cli.command()
@click.argument("date_input", metavar="DATE", required=False)
@click.option("--no-doc", is_flag=True, help="Leave out the README.md file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def plan(ctx: click.Context, date_input: str | None, no_doc: bool, as_json: bool) -> None:
    """Show the paths DATE would get, without creating anything."""
    from datescaffold.core.use_cases.plan import plan_paths

    result = plan_paths(
        date_input or _today(),
        config_path=ctx.obj.get("config_path"),
        include_doc=False if no_doc else None,
    )

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.error is None else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    assert result.paths is not None and result.date_key is not None
    click.secho(f"\n🗓️  {result.date_key.iso_date}", fg="cyan", bold=True)
    for name, path in (
        ("directory", result.paths.directory),
        ("code_file", result.paths.code_file),
        ("doc_file", result.paths.doc_file),
    ):
        if name not in result.exists:
            continue
        marker = " (exists)" if result.exists[name] else ""
        click.echo(f"   {name:<10} {path}{marker}")
    click.echo()


@cli.group()
def config() -> None:
    """Scaffold configuration commands."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate scaffold.yml and its templates."""
    from datescaffold.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   Base dir:       {result.config.resolved_base_dir()}")
        click.echo(f"   Code extension: {result.config.code_extension}")
        click.echo(f"   README:         {'yes' if result.config.include_doc else 'no'}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        sys.exit(1)


from datescaffold.ui.cli.templates import templates  # noqa: E402

cli.add_command(templates)


if __name__ == "__main__":
    cli()
