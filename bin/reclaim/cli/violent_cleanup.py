import logging
from pathlib import Path
from typing import Optional, Sequence

import click

from reclaim import cleanup
from reclaim.cli import cli
from reclaim.cli.cli import CliContext
from reclaim.errors import CleanupError

_LOGGER = logging.getLogger(__name__)


@cli.command(name="violent-cleanup")
@click.pass_obj
@click.option(
    "-d",
    "--directory",
    required=True,
    metavar="PATH",
    type=click.Path(path_type=Path),
    help="Clean files under PATH, measuring the filesystem it lives on",
)
@click.option(
    "-f",
    "--filter-extensions",
    metavar="EXT",
    multiple=True,
    help="Only remove files with extension EXT (repeatable; default mp4 and jpg)",
)
@click.option(
    "-t",
    "--target-use-percentage",
    type=click.IntRange(0, 255),
    metavar="PERCENT",
    help="Stop removing once usage is below PERCENT",
)
@click.option("--actually-rm", is_flag=True, help="Really delete files; without this only report them")
def violent_cleanup(
    context: CliContext,
    directory: Path,
    filter_extensions: Sequence[str],
    target_use_percentage: Optional[int],
    actually_rm: bool,
):
    """Remove the oldest matching files under PATH until filesystem usage drops below a target."""
    config = context.config.with_cli_overrides(
        filter_extensions=tuple(filter_extensions),
        target_use_percentage=target_use_percentage,
    )
    if config.target_use_percentage is None:
        raise click.UsageError("Missing option '-t' / '--target-use-percentage'.")

    try:
        cleanup.run(
            directory,
            config.filter_extensions,
            config.target_use_percentage,
            commit=actually_rm,
        )
    except CleanupError as e:
        _LOGGER.error("Cleanup failed: %s", e)
        raise click.ClickException(str(e)) from e
