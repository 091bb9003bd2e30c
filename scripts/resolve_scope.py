#!/usr/bin/env python3
"""
Documentation Scope CLI

Resolves the documentation scope of a project described in YAML.

Commands:
    resolve  - Resolve the scope of a project for one variant
    variants - Show the defaults of every variant policy

Examples:\n

    resolve_scope.py resolve project.yaml resolution.yaml                 # Main sources

    resolve_scope.py resolve project.yaml resolution.yaml --variant test  # Test sources

    resolve_scope.py resolve project.yaml resolution.yaml -o docscope.yaml

    resolve_scope.py variants
"""

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from docscope.contexts.intake import load_project, load_resolution
from docscope.contexts.scoping import DocScopeError, get_variant_policy, load_scope_overrides
from docscope.contexts.scoping.logger import _log_error, setup_scoping_logger
from docscope.contexts.scoping.variants import VARIANT_SETTINGS

load_dotenv()
LOGS_PATH = Path(os.getenv("DOCSCOPE_LOGS_PATH", "outs/logs"))


app = typer.Typer(
    help="Resolve documentation scopes (source roots, classpath, titles) for build modules",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("resolve")
def resolve_command(
    project_file: Annotated[
        Path,
        typer.Argument(help="YAML project description"),
    ],
    resolution_file: Annotated[
        Path,
        typer.Argument(help="YAML artifact resolution result"),
    ],
    variant: Annotated[
        str,
        typer.Option("--variant", "-V", help="Variant to resolve: main or test"),
    ] = "main",
    overrides_file: Annotated[
        Optional[Path],
        typer.Option(
            "--overrides",
            "-o",
            help="YAML overrides (defaults to DOCSCOPE_OVERRIDES_PATH, if set)",
        ),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Directory for the session log (default: LOGS_PATH)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show resolver decisions on the console"),
    ] = False,
):
    """
    Resolve and print the documentation scope of a project.

    The scope is the only thing written to stdout; log lines go to stderr.
    Exits with code 1 when the project, the resolution result or the
    overrides are unusable. No partial scope is printed in that case.
    """
    if log_dir is None:
        log_dir = LOGS_PATH / f"scope_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
    setup_scoping_logger(log_dir, variant, verbose=verbose, console_sink=sys.stderr)

    try:
        policy = get_variant_policy(variant)
        project = load_project(project_file)
        resolution = load_resolution(resolution_file)
        overrides = load_scope_overrides(overrides_file, policy.variant)
        scope = policy.resolve(project, resolution, overrides)
    except DocScopeError as e:
        _log_error(f"Resolution aborted for {project_file.name}: {e}")
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(OmegaConf.to_yaml(OmegaConf.create(scope.to_dict())))


@app.command("variants")
def variants_command():
    """Show the defaults of every variant policy."""
    for settings in VARIANT_SETTINGS.values():
        typer.secho(f"{settings.variant.value}:", bold=True)
        typer.echo(f"  output directory: <build>/{settings.output_dir_name}")
        typer.echo(f"  resource directory: {settings.resource_dir}")
        typer.echo(f"  title suffix: {settings.title_suffix}")
        typer.echo(f"  classifier: {settings.classifier}")
        typer.echo(f"  classpath scopes: {', '.join(sorted(settings.classpath_scopes))}")


if __name__ == "__main__":
    app()
