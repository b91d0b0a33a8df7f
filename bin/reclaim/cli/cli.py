import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import click
import yaml
from pydantic import ValidationError

from reclaim.config import CleanupConfig

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass(frozen=True)
class CliContext:
    config: CleanupConfig


def configure_logging(level: int, log: Optional[str], log_to_console: bool) -> None:
    formatter = logging.Formatter(fmt="%(asctime)s %(name)-15s %(levelname)-8s %(message)s")
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if log:
        file_handler = logging.FileHandler(log)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    if not log or log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)


@click.group()
@click.option("--debug/--no-debug", help="Turn on debugging")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    envvar="RECLAIM_LOG",
    metavar="LEVEL",
    help="Log at LEVEL (default INFO)",
)
@click.option("--log-to-console", is_flag=True, help="Log output to console, even if logging to a file is requested")
@click.option("--log", metavar="LOGFILE", help="Log to LOGFILE", type=click.Path(dir_okay=False, writable=True))
@click.option(
    "--config",
    "config_path",
    envvar="RECLAIM_CONFIG",
    metavar="CONFIG",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Read cleanup defaults from the YAML file CONFIG",
)
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    log_level: Optional[str],
    log_to_console: bool,
    log: Optional[str],
    config_path: Optional[Path],
):
    """Reclaim disk space by removing old files."""
    if debug:
        level = logging.DEBUG
    elif log_level:
        level = getattr(logging, log_level.upper())
    else:
        level = logging.INFO
    configure_logging(level, log, log_to_console)
    try:
        config = CleanupConfig.load(config_path)
    except (ValidationError, yaml.YAMLError, OSError) as e:
        raise click.ClickException(f"Unable to load config {config_path}: {e}") from e
    ctx.obj = CliContext(config=config)
