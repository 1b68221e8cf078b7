"""Root-level pytest configuration and fixtures."""

from __future__ import annotations

import wave
from pathlib import Path
from typing import Callable

import numpy as np
import pytest
import soundfile as sf


@pytest.fixture
def write_wav() -> Callable[..., Path]:
    """Return a helper that writes a silent PCM_16 WAV with a given frame count."""

    def _write(path: Path, frames: int, sample_rate: int = 44_100, channels: int = 1) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        shape = (frames, channels) if channels > 1 else (frames,)
        sf.write(path, np.zeros(shape, dtype=np.int16), sample_rate, subtype="PCM_16", format="WAV")
        return path

    return _write


@pytest.fixture
def write_empty_wav() -> Callable[..., Path]:
    """Return a helper that writes a WAV with a valid header and no frames."""

    def _write(path: Path, sample_rate: int = 44_100) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with wave.open(str(path), "wb") as handle:
            handle.setnchannels(1)
            handle.setsampwidth(2)
            handle.setframerate(sample_rate)
            handle.writeframes(b"")
        return path

    return _write
