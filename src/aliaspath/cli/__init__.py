"""
aliaspath CLI - resolve virtual paths from the command line.

Usage:
    aliaspath --help
    aliaspath --root /srv/www --alias assets=/srv/www/theme resolve assets:app.js
    aliaspath --config aliases.yaml url assets:app.js
    aliaspath --config aliases.yaml glob "assets:css/*.{css,less}"
"""

import logging
from typing import Optional, Tuple

import click

from ..utils import init_logging
from .commands import glob_command, paths_command, rel_command, resolve_command, url_command


@click.group()
@click.version_option(package_name="aliaspath")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    help="YAML manifest with root, base_url and aliases",
)
@click.option("--root", help="Root directory (overrides the manifest)")
@click.option(
    "--alias",
    "aliases",
    multiple=True,
    metavar="NAME=PATH",
    help="Append PATH to alias NAME; repeat to add more directories",
)
@click.option(
    "--no-real-path",
    is_flag=True,
    help="Return normalized paths without resolving symlinks",
)
@click.option("--base-url", help="Base URL for absolute URLs")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Optional[str],
    root: Optional[str],
    aliases: Tuple[str, ...],
    no_real_path: bool,
    base_url: Optional[str],
    verbose: bool,
):
    """aliaspath - resolve "alias:relative/path" strings.

    Directories are searched in the order they are registered; the first
    existing match wins.
    """
    ctx.ensure_object(dict)
    ctx.obj.update(
        config_path=config_path,
        root=root,
        aliases=aliases,
        real_path=not no_real_path,
        base_url=base_url,
    )
    if verbose:
        init_logging(logging.DEBUG)


# Register commands
main.add_command(resolve_command)
main.add_command(glob_command)
main.add_command(paths_command)
main.add_command(url_command)
main.add_command(rel_command)


if __name__ == "__main__":
    main()
