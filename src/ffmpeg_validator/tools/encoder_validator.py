"""Entry point used by the host application.

EncoderValidator bundles version gating and capability probing for one
configured ffmpeg binary. The host calls validate_version() once at startup
and then the capability queries to decide which encoding paths to enable.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ffmpeg_validator.logging.interface import LoggerProtocol
from ffmpeg_validator.tools.capabilities import CapabilityProbe
from ffmpeg_validator.tools.libraries import (
    MAX_VERSION,
    MIN_VERSION,
    MINIMUM_LIBRARY_VERSIONS,
)
from ffmpeg_validator.tools.platform import PlatformFamily
from ffmpeg_validator.tools.runner import (
    ProcessRunner,
    SubprocessRunner,
    get_process_output,
)
from ffmpeg_validator.tools.validator import VersionValidator
from ffmpeg_validator.tools.version import Version

if TYPE_CHECKING:
    from ffmpeg_validator.config.models import ValidatorConfig

DEFAULT_ENCODER_PATH = "ffmpeg"


class EncoderValidator:
    """Validates and introspects one ffmpeg binary.

    Every method runs ffmpeg afresh; no results are cached.

    Args:
        encoder_path: Path to the ffmpeg binary.
        logger: Logger for commands and findings. Defaults to a module logger.
        runner: Process runner. Defaults to SubprocessRunner().
        platform_family: OS family. Detected once if not given.
        min_version: Minimum acceptable version.
        max_version: Maximum acceptable version, or None for no upper bound.
        library_minimums: Library minimums paired with min_version.
    """

    MIN_VERSION: Version = MIN_VERSION
    MAX_VERSION: Version | None = MAX_VERSION

    def __init__(
        self,
        encoder_path: str = DEFAULT_ENCODER_PATH,
        logger: LoggerProtocol | None = None,
        runner: ProcessRunner | None = None,
        platform_family: PlatformFamily | None = None,
        min_version: Version | None = None,
        max_version: Version | None = None,
        library_minimums: Mapping[str, Version] | None = None,
    ) -> None:
        self.encoder_path = encoder_path
        self._logger: LoggerProtocol = logger or logging.getLogger(__name__)
        self._runner: ProcessRunner = runner or SubprocessRunner()
        self.version_validator = VersionValidator(
            self._logger,
            min_version=min_version or self.MIN_VERSION,
            max_version=max_version or self.MAX_VERSION,
            library_minimums=(
                library_minimums
                if library_minimums is not None
                else MINIMUM_LIBRARY_VERSIONS
            ),
        )
        self.probe = CapabilityProbe(
            encoder_path, self._logger, self._runner, platform_family
        )

    @classmethod
    def from_config(
        cls,
        config: ValidatorConfig,
        logger: LoggerProtocol | None = None,
        runner: ProcessRunner | None = None,
        platform_family: PlatformFamily | None = None,
    ) -> EncoderValidator:
        """Build a validator from loaded configuration."""
        engine = config.engine
        return cls(
            encoder_path=str(engine.ffmpeg) if engine.ffmpeg else DEFAULT_ENCODER_PATH,
            logger=logger,
            runner=runner or SubprocessRunner(timeout=engine.timeout),
            platform_family=platform_family,
            min_version=engine.parsed_min_version(),
            max_version=engine.parsed_max_version(),
            library_minimums=engine.parsed_library_minimums(),
        )

    @property
    def platform_family(self) -> PlatformFamily:
        return self.probe.platform_family

    def _get_version_output(self) -> str:
        # A failing -version still explains itself on stderr
        return get_process_output(
            self._runner,
            self.encoder_path,
            ["-version"],
            self._logger,
            read_stderr=True,
        )

    def validate_version(self) -> bool:
        """Check that the installed ffmpeg version is supported."""
        return self.version_validator.validate(self._get_version_output())

    def get_ffmpeg_version(self) -> Version | None:
        """Return the ffmpeg version, or None if it cannot be determined."""
        output = self._get_version_output()
        if not output.strip():
            self._logger.error("FFmpeg validation: The process returned no result")
            return None

        self._logger.debug("ffmpeg output: %s", output)
        return self.version_validator.determine_version(output)

    def get_decoders(self) -> list[str]:
        return self.probe.get_decoders()

    def get_encoders(self) -> list[str]:
        return self.probe.get_encoders()

    def get_hwaccels(self) -> list[str]:
        return self.probe.get_hwaccels()

    def get_filters(self) -> list[str]:
        return self.probe.get_filters()

    def get_filters_with_option(self) -> dict[int, bool]:
        return self.probe.get_filters_with_option()

    def check_filter_with_option(self, filter_name: str, option: str) -> bool:
        return self.probe.check_filter_with_option(filter_name, option)

    def check_vaapi_device_by_driver_name(
        self, driver_name: str, render_node_path: str
    ) -> bool:
        return self.probe.check_vaapi_device_by_driver_name(
            driver_name, render_node_path
        )
