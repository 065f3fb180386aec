"""Display names for codecs."""

from __future__ import annotations

from ffmpeg_validator.core.string_utils import compare_strings_ci

AUDIO_CODEC_FRIENDLY_NAMES: tuple[tuple[str, str], ...] = (
    ("ac3", "Dolby Digital"),
    ("eac3", "Dolby Digital+"),
    ("dca", "DTS"),
)


def get_audio_codec_friendly_name(codec: str | None) -> str | None:
    """Return the marketing name of an audio codec.

    Matching is case-insensitive. Codecs without a friendly name, and empty
    values, are returned unchanged.

    Example:
        >>> get_audio_codec_friendly_name("EAC3")
        'Dolby Digital+'
    """
    if not codec:
        return codec

    for name, friendly_name in AUDIO_CODEC_FRIENDLY_NAMES:
        if compare_strings_ci(codec, name):
            return friendly_name
    return codec
