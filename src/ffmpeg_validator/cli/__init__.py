"""CLI for ffmpeg-validator."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from ffmpeg_validator.cli.exit_codes import ExitCode
from ffmpeg_validator.config import get_config
from ffmpeg_validator.logging import configure_logging
from ffmpeg_validator.tools import EncoderValidator

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="ffmpeg-validator")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to config file (default: ~/.ffmpeg-validator/config.toml).",
)
@click.option(
    "--ffmpeg-path",
    type=click.Path(path_type=Path),
    default=None,
    help="Path to the ffmpeg binary (default: ffmpeg from PATH).",
)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    ffmpeg_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Validate and inspect an installed ffmpeg binary."""
    ctx.ensure_object(dict)

    try:
        config = get_config(
            config_path=config_path,
            ffmpeg_path=ffmpeg_path,
            log_level=log_level.lower() if log_level else None,
            log_format="json" if log_json else None,
            log_file=log_file,
        )
    except ValueError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config.logging)
    logger.debug("Using ffmpeg at %s", config.engine.ffmpeg or "PATH")

    ctx.obj["config"] = config
    # Preserve a validator injected by tests
    if "validator" not in ctx.obj:
        ctx.obj["validator"] = EncoderValidator.from_config(config)


def _register_commands() -> None:
    from ffmpeg_validator.cli.doctor import doctor_command

    main.add_command(doctor_command)


_register_commands()
