"""
CLI commands for the driver/plugin catalog.

Thin wrappers over ``appium_installer.core.services.catalog`` and
``appium_installer.core.services.classifier``: list what the wizard
would offer, how each entry is classified and the command it would run.
"""

from __future__ import annotations

import json

import click

from appium_installer.core.models.catalog import ItemKind


@click.group("catalog")
def catalog() -> None:
    """Catalog — installable drivers and plugins with their category."""


def _rows(ctx: click.Context, kind: ItemKind, offline: bool) -> list[dict]:
    from appium_installer.core.services.catalog import (
        canonical_name,
        default_catalog,
        query_live_catalog,
    )
    from appium_installer.core.services.classifier import classify
    from appium_installer.core.services.installer import build_install_command

    config = ctx.obj["config"]
    entries: list[str] | None = None
    if not offline and config.fetch_catalog:
        entries = query_live_catalog(kind, ctx.obj["runner"], config)
    if not entries:
        entries = default_catalog(kind)

    rows = []
    for entry in entries:
        name = canonical_name(entry)
        category = classify(name, kind)
        rows.append({
            "entry": entry,
            "name": name,
            "category": category.value,
            "command": build_install_command(name, category, config),
        })
    return rows


def _show(ctx: click.Context, kind: ItemKind, as_json: bool, offline: bool) -> None:
    rows = _rows(ctx, kind, offline)

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    click.secho(f"📦 Appium {kind.value}s ({len(rows)}):", fg="cyan", bold=True)
    click.echo()
    for row in rows:
        click.echo(f"   • {row['entry']}")
        click.echo(f"     [{row['category']}] {row['command'] or '(no install command)'}")
    click.echo()


@catalog.command("drivers")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--offline", is_flag=True, help="Use the built-in list only.")
@click.pass_context
def drivers(ctx: click.Context, as_json: bool, offline: bool) -> None:
    """List installable drivers."""
    _show(ctx, ItemKind.DRIVER, as_json, offline)


@catalog.command("plugins")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--offline", is_flag=True, help="Use the built-in list only.")
@click.pass_context
def plugins(ctx: click.Context, as_json: bool, offline: bool) -> None:
    """List installable plugins, tools and client libraries."""
    _show(ctx, ItemKind.PLUGIN, as_json, offline)
