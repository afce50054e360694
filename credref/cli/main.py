"""Command-line interface for inspecting the secret index.

Usage::

    credref entries
    credref resolve https://charts.example.com --type kubernetes.io/basic-auth
    kubectl get secrets -A -o json | credref --from-file - entries
"""

from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass
from typing import IO

import click

from credref.app import ComponentError, start_resolver
from credref.collector.secret_lister import SecretLister, StaticSecretLister, records_from_manifests
from credref.config import load_config
from credref.models.config import CredRefConfig
from credref.models.secrets import SecretType
from credref.observability.logging import setup_logging
from credref.resolver.keys import UrlSecretType
from credref.resolver.secret_resolver import FluxSecretResolver


@dataclass
class _CLIState:
    config: CredRefConfig
    lister: SecretLister | None = None


def _build_resolver(state: _CLIState) -> FluxSecretResolver:
    try:
        return asyncio.run(start_resolver(state.config, lister=state.lister))
    except ComponentError as exc:
        raise click.ClickException(f"{exc.component}: {exc.cause}") from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override CREDREF_LOG_LEVEL.",
)
@click.option(
    "--from-file",
    "from_file",
    type=click.File("r"),
    default=None,
    help="Read Secrets from `kubectl get secrets -o json` output instead of the cluster.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, from_file: IO[str] | None) -> None:
    """Resolve repository URLs to credential Secrets."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    if log_level:
        config.log.level = log_level.lower()
    setup_logging(config.log.level, json_output=False)

    lister: SecretLister | None = None
    if from_file is not None:
        try:
            document = json.load(from_file)
        except json.JSONDecodeError as exc:
            raise click.ClickException(f"invalid JSON in {from_file.name}: {exc}") from exc
        except ValueError as exc:
            # UnicodeDecodeError from a file that is not UTF-8
            raise click.ClickException(f"cannot decode {from_file.name}: {exc}") from exc
        try:
            records = records_from_manifests(document)
        except ValueError as exc:
            raise click.ClickException(f"unexpected document in {from_file.name}: {exc}") from exc
        lister = StaticSecretLister(records)
    ctx.obj = _CLIState(config=config, lister=lister)


@cli.command()
@click.pass_obj
def entries(state: _CLIState) -> None:
    """Print every (URL, type) -> Secret mapping in the index."""
    resolver = _build_resolver(state)
    rows = sorted(resolver.entries().items(), key=lambda item: (item[0].url, item[0].secret_type))
    for key, name in rows:
        click.echo(f"{key.url}\t{key.secret_type}\t{name}")
    if not rows:
        click.echo("no eligible secrets found", err=True)


@cli.command()
@click.argument("url")
@click.option(
    "--type",
    "secret_type",
    default=SecretType.BASIC_AUTH.value,
    show_default=True,
    help="Expected Secret type, e.g. kubernetes.io/dockerconfigjson.",
)
@click.pass_obj
def resolve(state: _CLIState, url: str, secret_type: str) -> None:
    """Print the Secret holding credentials for URL."""
    resolver = _build_resolver(state)
    ref = resolver.resolve(UrlSecretType(url=url, secret_type=secret_type))
    if ref is None:
        click.echo(f"no credential configured for {url} ({secret_type})", err=True)
        return
    click.echo(ref.name)
