from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import soundfile as sf  # type: ignore[import-untyped]

from wavstats.exceptions import EmptyAudioError, UnreadableHeaderError

# libsndfile major formats of the RIFF/WAVE family
WAV_FORMATS = frozenset({"WAV", "WAVEX", "RF64", "W64"})


def extract_duration(path: str | Path, *, info_reader: Callable[[str], Any] | None = None) -> float:
    """Return the playback duration of a WAV file in seconds.

    Only the header is read: the duration is the frame count divided by the
    sample rate. ``info_reader`` defaults to ``soundfile.info``, which opens
    and closes the file itself; it must return an object exposing ``format``,
    ``frames`` and ``samplerate``. libsndfile derives ``frames`` from the
    bytes actually present, so a truncated data chunk yields the shorter
    duration rather than the declared one.

    Raises:
        UnreadableHeaderError: the file is not a readable WAV container or
            its sample rate is unusable.
        EmptyAudioError: the header declares zero frames.
    """
    reader = info_reader or sf.info
    try:
        info = reader(str(path))
    except (RuntimeError, OSError) as exc:
        # soundfile.LibsndfileError derives from RuntimeError
        raise UnreadableHeaderError(_describe(exc)) from exc

    container = getattr(info, "format", None)
    if container not in WAV_FORMATS:
        raise UnreadableHeaderError(f"not a WAV container: {container}")

    frames = int(getattr(info, "frames", 0) or 0)
    sample_rate = int(getattr(info, "samplerate", 0) or 0)

    if sample_rate <= 0:
        raise UnreadableHeaderError(f"invalid sample rate: {sample_rate}")
    if frames < 0:
        raise UnreadableHeaderError(f"invalid frame count: {frames}")
    if frames == 0:
        raise EmptyAudioError("Empty audio file")

    return frames / sample_rate


def _describe(exc: BaseException) -> str:
    """Flatten a reader error into a single line."""
    message = str(exc).strip()
    if not message:
        return type(exc).__name__
    return " ".join(message.split())
