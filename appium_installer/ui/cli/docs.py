"""
CLI commands for the installation documentation.

Thin wrappers over ``appium_installer.core.services.docs``.
"""

from __future__ import annotations

import sys

import click


@click.command("docs")
@click.argument("section", required=False)
@click.option("--list", "list_only", is_flag=True, help="List section titles and exit.")
@click.pass_context
def docs(ctx: click.Context, section: str | None, list_only: bool) -> None:
    """Browse the installation docs, or print one SECTION (title or prefix)."""
    from appium_installer.core.services.docs import (
        find_section,
        section_titles,
        show_detailed_documentation,
        show_section,
    )

    if list_only:
        for title in section_titles()[:-1]:
            click.echo(f"   • {title}")
        return

    if section is None:
        show_detailed_documentation(ctx.obj["runner"], ctx.obj["config"], ask=ctx.obj.get("ask"))
        return

    title = find_section(section)
    if title is None:
        click.secho(f"❌ Unknown documentation section: {section}", fg="red")
        click.echo("   Available: " + ", ".join(section_titles()[:-1]))
        sys.exit(1)

    show_section(title, ctx.obj["runner"], ctx.obj["config"])
