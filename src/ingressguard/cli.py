"""Command-line front end: validate Ingress manifests from files."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from ingressguard import __version__
from ingressguard.parser.loader import ManifestError, ManifestLoader
from ingressguard.settings import Settings
from ingressguard.validation.ingress import validate_ingress

logger = logging.getLogger("ingressguard.cli")

EXIT_INVALID = 1
EXIT_LOAD_ERROR = 2


@click.group()
@click.version_option(__version__, prog_name="ingressguard")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """ingressguard: validate NGINX Ingress resources before they are applied."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@cli.command("validate")
@click.argument(
    "manifests",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--plus/--no-plus",
    "is_plus",
    default=None,
    help="Allow NGINX Plus annotations (default: NGINX_PLUS setting).",
)
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def validate(
    ctx: click.Context,
    manifests: tuple[Path, ...],
    is_plus: bool | None,
    as_json: bool,
) -> None:
    """Validate every Ingress found in MANIFESTS."""
    settings: Settings = ctx.obj["settings"]
    if is_plus is None:
        is_plus = settings.nginx_plus

    loader = ManifestLoader()
    report: list[dict[str, object]] = []
    for manifest in manifests:
        try:
            ingresses = loader.load(manifest)
        except ManifestError as exc:
            click.secho(f"error: {exc}", fg="red", err=True)
            sys.exit(EXIT_LOAD_ERROR)

        for ingress in ingresses:
            errors = validate_ingress(ingress, is_plus)
            report.append(
                {
                    "file": str(manifest),
                    "ingress": ingress.qualified_name,
                    "valid": not errors,
                    "errors": [str(error) for error in errors],
                }
            )

    logger.info(
        "checked %d ingress(es) from %d manifest(s) (plus=%s)",
        len(report), len(manifests), is_plus,
    )

    failed = [entry for entry in report if not entry["valid"]]
    if as_json:
        click.echo(json.dumps({"plus": is_plus, "results": report}, indent=2))
    else:
        for entry in report:
            for message in entry["errors"]:  # type: ignore[union-attr]
                click.echo(f"{entry['file']}: {entry['ingress']}: {message}")
        if not report:
            click.secho("No Ingress resources found", fg="yellow")
        elif not failed:
            click.secho(f"{len(report)} ingress(es) valid", fg="green")

    if failed:
        sys.exit(EXIT_INVALID)


def main() -> None:
    """Console-script entry point."""
    cli(obj={})
