"""
CLI commands for templates — list, show, and render without writing.

Thin wrappers over ``datescaffold.core.services.template_store`` and
``datescaffold.core.services.templating``.
"""

from __future__ import annotations

import json
import sys
from datetime import date

import click

from datescaffold.core.config.loader import ConfigError, ScaffoldConfig, load_config
from datescaffold.core.errors import InvalidDateFormat, TemplateNotFound
from datescaffold.core.models.date_key import DateKey
from datescaffold.core.models.template import FileKind
from datescaffold.core.services.templating import find_placeholders, render_template

_KIND_CHOICE = click.Choice([k.value for k in FileKind])


def _load(ctx: click.Context) -> ScaffoldConfig:
    """Load config or exit with an error."""
    try:
        return load_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.group("templates")
def templates() -> None:
    """Templates — inspect and preview the code and README templates."""


@templates.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def list_templates(ctx: click.Context, as_json: bool) -> None:
    """Show each template, where it comes from, and its placeholders."""
    config = _load(ctx)
    store = config.template_store()

    rows = []
    for kind in FileKind:
        row: dict = {"kind": kind.value, "path": str(store.path_for(kind))}
        try:
            template = store.load(kind)
            row["source"] = template.source
            row["placeholders"] = find_placeholders(template.text)
        except TemplateNotFound as e:
            row["error"] = str(e)
        rows.append(row)

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    click.secho("📄 Templates:", fg="cyan", bold=True)
    for row in rows:
        if "error" in row:
            click.secho(f"   ❌ {row['kind']:<5} {row['error']}", fg="red")
            continue
        tokens = ", ".join(row["placeholders"]) or "(none)"
        click.echo(f"   {row['kind']:<5} {row['source']}")
        click.echo(f"         placeholders: {tokens}")


@templates.command("show")
@click.argument("kind", type=_KIND_CHOICE)
@click.pass_context
def show(ctx: click.Context, kind: str) -> None:
    """Print the raw template for KIND (code or doc)."""
    store = _load(ctx).template_store()
    try:
        template = store.load(FileKind(kind))
    except TemplateNotFound as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    click.echo(template.text, nl=False)


@templates.command("render")
@click.argument("kind", type=_KIND_CHOICE)
@click.argument("date_input", metavar="DATE", required=False)
@click.pass_context
def render(ctx: click.Context, kind: str, date_input: str | None) -> None:
    """Print KIND's template rendered for DATE, without writing a file."""
    config = _load(ctx)
    try:
        date_key = DateKey.parse(date_input or date.today().isoformat())
        template = config.template_store().load(FileKind(kind))
    except (InvalidDateFormat, TemplateNotFound) as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)
    click.echo(render_template(template, date_key, quote_char=config.quote_char), nl=False)
