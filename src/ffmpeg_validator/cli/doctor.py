"""Doctor command for checking the installed ffmpeg.

This module provides the 'ffmpeg-validator doctor' command, which reports
the ffmpeg version, whether it is supported, and which of the curated
codecs, filters and hwaccels the build provides.
"""

from __future__ import annotations

import json
import sys
from typing import Any

import click

from ffmpeg_validator.cli.exit_codes import DOCTOR_EXIT_CODES
from ffmpeg_validator.tools import FILTER_OPTIONS, EncoderValidator, Version

EXIT_OK = DOCTOR_EXIT_CODES["EXIT_OK"]
EXIT_WARNINGS = DOCTOR_EXIT_CODES["EXIT_WARNINGS"]
EXIT_CRITICAL = DOCTOR_EXIT_CODES["EXIT_CRITICAL"]


def _format_status(available: bool) -> str:
    """Format status for display."""
    return "✓" if available else "✗"


def _format_list(names: list[str]) -> str:
    return ", ".join(names) if names else "none"


def collect_report(
    validator: EncoderValidator,
    vaapi_driver: str | None = None,
    render_node: str | None = None,
) -> dict[str, Any]:
    """Run every check and gather the results.

    Args:
        validator: Validator for the ffmpeg binary under test.
        vaapi_driver: Driver name for the VA-API device check, if any.
        render_node: Render node for the VA-API device check, if any.

    Returns:
        Dict of results, JSON-serializable.
    """
    version = validator.get_ffmpeg_version()
    filter_support = validator.get_filters_with_option()

    report: dict[str, Any] = {
        "ffmpeg_path": validator.encoder_path,
        "version": str(version) if version is not None else None,
        "version_ok": validator.validate_version(),
        "hwaccels": validator.get_hwaccels(),
        "encoders": validator.get_encoders(),
        "decoders": validator.get_decoders(),
        "filters": validator.get_filters(),
        "filter_options": [
            {
                "filter": name,
                "option": option,
                "supported": filter_support.get(i, False),
            }
            for i, (name, option) in enumerate(FILTER_OPTIONS)
        ],
    }

    if vaapi_driver and render_node:
        report["vaapi_device"] = {
            "driver": vaapi_driver,
            "render_node": render_node,
            "matches": validator.check_vaapi_device_by_driver_name(
                vaapi_driver, render_node
            ),
        }

    return report


def _exit_code_for(report: dict[str, Any]) -> int:
    if not report["version_ok"]:
        return EXIT_CRITICAL
    if not report["hwaccels"]:
        return EXIT_WARNINGS
    vaapi = report.get("vaapi_device")
    if vaapi is not None and not vaapi["matches"]:
        return EXIT_WARNINGS
    return EXIT_OK


def _print_report(report: dict[str, Any], verbose: bool) -> None:
    click.echo("FFmpeg Health Check")
    click.echo("=" * 40)
    click.echo()

    version = report["version"] or "unknown"
    path_info = f" ({report['ffmpeg_path']})" if verbose else ""
    status = _format_status(report["version_ok"])
    click.echo(f"  {status} ffmpeg: {version}{path_info}")
    click.echo()

    click.echo("Capabilities:")
    click.echo("-" * 20)
    click.echo(f"  Hwaccels: {_format_list(report['hwaccels'])}")
    click.echo(f"  Encoders: {_format_list(report['encoders'])}")
    click.echo(f"  Decoders: {_format_list(report['decoders'])}")
    click.echo(f"  Filters:  {_format_list(report['filters'])}")
    click.echo()

    if verbose:
        click.echo("Filter Options:")
        click.echo("-" * 20)
        for entry in report["filter_options"]:
            status = _format_status(entry["supported"])
            click.echo(f"  {status} {entry['filter']}: {entry['option']}")
        click.echo()

    vaapi = report.get("vaapi_device")
    if vaapi is not None:
        click.echo("VA-API Device:")
        click.echo("-" * 20)
        status = _format_status(vaapi["matches"])
        click.echo(f"  {status} {vaapi['render_node']} driver {vaapi['driver']}")
        click.echo()


def _unsupported_message(validator: EncoderValidator, version: str | None) -> str:
    """Describe which version bound the installed ffmpeg failed."""
    min_version = validator.version_validator.min_version
    max_version = validator.version_validator.max_version
    if version is None:
        return (
            "⚠ Could not determine the ffmpeg version; "
            f"{min_version} or newer is required."
        )

    found = Version.parse(version)
    if found < min_version:
        return f"⚠ ffmpeg {found} is too old; {min_version} or newer is required."
    if max_version is not None and found > max_version:
        return f"⚠ ffmpeg {found} is too new; {max_version} or older is required."
    return f"⚠ ffmpeg {found} is not supported."


@click.command("doctor")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Show the ffmpeg path and filter option support",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Output results as JSON",
)
@click.option(
    "--vaapi-driver",
    default=None,
    help="Check that the render node uses this VA-API driver (e.g. iHD)",
)
@click.option(
    "--render-node",
    default="/dev/dri/renderD128",
    show_default=True,
    help="Render node for the VA-API driver check",
)
@click.pass_context
def doctor_command(
    ctx: click.Context,
    verbose: bool,
    json_output: bool,
    vaapi_driver: str | None,
    render_node: str,
) -> None:
    """Check the installed ffmpeg version and capabilities.

    Exit codes:
      0  - Version supported and hardware acceleration available
      60 - Version supported, but no hwaccel found or VA-API driver mismatch
      61 - Version unsupported or unknown
    """
    validator: EncoderValidator = ctx.obj["validator"]
    report = collect_report(validator, vaapi_driver, render_node)

    if json_output:
        click.echo(json.dumps(report, indent=2))
    else:
        _print_report(report, verbose)

        if not report["version_ok"]:
            click.echo(_unsupported_message(validator, report["version"]))
        elif not report["hwaccels"]:
            click.echo("Note: No hardware acceleration methods reported.")
        else:
            click.echo("✓ ffmpeg is supported.")

    sys.exit(_exit_code_for(report))
