#!/usr/bin/env python3

"""imdsbox command line entry."""

from __future__ import annotations

import click

from imdsbox.cli.metadata.commands import check_command, get_command, instance_command, interfaces_command
from imdsbox.log.logger import setup_logger
from imdsbox.metadata.client import MetadataClient
from imdsbox.metadata.errors import ConfigError
from imdsbox.utils.load_config import build_metadata_config, load_config_by_file


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Config file (toml/json) with an [imds] table.",
)
@click.option("--base-url", "base_url", type=str, default=None, help="Metadata root URL override.")
@click.option("--timeout", "timeout_s", type=float, default=None, help="Per-request timeout in seconds.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log every metadata request.")
@click.version_option(package_name="imdsbox")
@click.pass_context
def main(
    ctx: click.Context,
    config_path: str | None,
    base_url: str | None,
    timeout_s: float | None,
    verbose: bool,
) -> None:
    """Read instance metadata from the local metadata service.

    Args:
        ctx: Click context.
        config_path: Config file path.
        base_url: Base URL override.
        timeout_s: Timeout override.
        verbose: Whether to show request logs.
    """
    setup_logger(verbose=verbose)
    try:
        loaded = load_config_by_file(config_path) if config_path else None
        config = build_metadata_config(loaded, base_url=base_url, timeout_s=timeout_s)
    except ConfigError as exc:
        raise click.UsageError(str(exc)) from exc
    ctx.obj = MetadataClient(config=config)


main.add_command(check_command)
main.add_command(instance_command)
main.add_command(interfaces_command)
main.add_command(get_command)


if __name__ == "__main__":
    main()
