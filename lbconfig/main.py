"""
lbconfig — CLI entrypoint.

Usage:
    python -m lbconfig.main --help
    python -m lbconfig.main generate > gobetween.toml
    python -m lbconfig.main --config teams.yml check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from lbconfig import __version__
from lbconfig.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="lbconfig")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to teams.yml (default: auto-detect, then built-in catalog).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """lbconfig — generate UDP load-balancer config for team log ports."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("LBCONFIG_LOG_LEVEL", "WARNING")

    setup_logging(level)


@cli.command()
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write to this file instead of stdout.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["toml", "json"]),
    default="toml",
    show_default=True,
    help="Output format.",
)
@click.option("--no-validate", is_flag=True, help="Skip team name and port checks.")
@click.pass_context
def generate(ctx: click.Context, output_path: str | None, fmt: str, no_validate: bool) -> None:
    """Generate the load-balancer config."""
    from lbconfig.core.persistence.output_file import OutputWriteError
    from lbconfig.core.use_cases.generate import generate_config

    output = Path(output_path) if output_path else None

    try:
        result = generate_config(
            config_path=ctx.obj.get("config_path"),
            validate=not no_validate,
            fmt=fmt,
            output=output,
            stream=None if output else sys.stdout,
        )
    except OutputWriteError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if not result.ok:
        click.secho("❌ Cannot generate config:", fg="red", bold=True, err=True)
        for err in result.errors:
            click.echo(f"   • {err}", err=True)
        sys.exit(1)

    if output and not ctx.obj.get("quiet", False):
        click.secho(
            f"✅ Wrote {result.team_count} team(s) to {output}", fg="green", err=True
        )


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def check(ctx: click.Context, as_json: bool) -> None:
    """Validate the team list."""
    from lbconfig.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.config is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        source = result.config_path or "built-in catalog"
        click.echo(f"   Source: {source}")
        click.echo(f"   Teams: {len(result.config.teams)}")
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


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def teams(ctx: click.Context, as_json: bool) -> None:
    """List the teams that would be rendered."""
    from lbconfig.core.config.loader import ConfigError, resolve_config
    from lbconfig.core.services.generators.gobetween import script_name

    try:
        config, _source = resolve_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    rows = [
        {"team": t.team, "port": t.port, "script": script_name(t, config.healthcheck)}
        for t in config.teams
    ]

    if as_json:
        click.echo(json.dumps(rows, indent=2))
        return

    for row in rows:
        click.echo(f"{row['port']:>6}  {row['team']:<24} ./{row['script']}")


if __name__ == "__main__":
    cli()
