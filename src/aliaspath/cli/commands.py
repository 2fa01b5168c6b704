"""
Resolution commands.

Every command builds a resolver from the group options (manifest first,
then command-line overrides) and prints one result per line. Commands
that resolve a single path exit with status 1 when nothing is found.
"""

from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import click

from ..config import ResolverConfig
from ..exceptions import PathResolverError
from ..resolver import PathResolver
from ..types import Mode


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except PathResolverError as e:
        raise click.ClickException(str(e)) from e


def build_resolver(options: Dict[str, Any]) -> PathResolver:
    """
    Build a resolver from the group options.

    Args:
        options: ``ctx.obj`` as filled in by the ``main`` group

    Returns:
        A populated PathResolver

    Raises:
        click.ClickException: If the manifest, root or an alias is invalid
    """
    with _reported_errors():
        config_path = options.get("config_path")
        config = ResolverConfig.from_yaml(config_path) if config_path else ResolverConfig()

        updates: Dict[str, Any] = {}
        if options.get("root"):
            updates["root"] = options["root"]
        if options.get("base_url"):
            updates["base_url"] = options["base_url"].rstrip("/")
        if not options.get("real_path", True):
            updates["real_path"] = False
        if updates:
            config = config.model_copy(update=updates)

        resolver = PathResolver.from_config(config)

        for alias_option in options.get("aliases", ()):
            name, separator, path = alias_option.partition("=")
            if not separator or not name or not path:
                raise click.BadParameter(
                    f"expected NAME=PATH, got {alias_option!r}", param_hint="--alias"
                )
            resolver.set(name, path, Mode.APPEND)

    return resolver


def _echo_or_fail(ctx: click.Context, value: Optional[str], source: str) -> None:
    if value is None:
        click.echo(f"Not found: {source}", err=True)
        ctx.exit(1)
    click.echo(value)


@click.command("resolve")
@click.argument("source")
@click.pass_context
def resolve_command(ctx: click.Context, source: str):
    """Print the first existing path for SOURCE."""
    resolver = build_resolver(ctx.obj)
    with _reported_errors():
        path = resolver.get(source)
    _echo_or_fail(ctx, path, source)


@click.command("glob")
@click.argument("source")
@click.option("--relative", is_flag=True, help="Print paths relative to the root")
@click.pass_context
def glob_command(ctx: click.Context, source: str, relative: bool):
    """Print every match of SOURCE in the alias's first directory."""
    resolver = build_resolver(ctx.obj)
    with _reported_errors():
        matches = resolver.rel_glob(source) if relative else resolver.glob(source)
    for match in matches:
        click.echo(match)


@click.command("paths")
@click.argument("source")
@click.pass_context
def paths_command(ctx: click.Context, source: str):
    """Print the resolved directories of an alias in search order."""
    resolver = build_resolver(ctx.obj)
    with _reported_errors():
        directories = resolver.get_paths(source)
    for directory in directories:
        click.echo(directory)


@click.command("url")
@click.argument("source")
@click.option("--relative", is_flag=True, help="Omit the base URL")
@click.pass_context
def url_command(ctx: click.Context, source: str, relative: bool):
    """Print the URL of SOURCE."""
    resolver = build_resolver(ctx.obj)
    with _reported_errors():
        url = resolver.url(source, is_full_url=not relative)
    _echo_or_fail(ctx, url, source)


@click.command("rel")
@click.argument("source")
@click.pass_context
def rel_command(ctx: click.Context, source: str):
    """Print the path of SOURCE relative to the root."""
    resolver = build_resolver(ctx.obj)
    with _reported_errors():
        path = resolver.rel(source)
    _echo_or_fail(ctx, path, source)
