from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def audio_tree(tmp_path: Path, write_wav, write_empty_wav) -> Path:
    """A small library: three good files, one corrupt, one empty, one non-WAV."""
    root = tmp_path / "library"
    write_wav(root / "intro.wav", frames=1_000 * 45, sample_rate=1_000)
    write_wav(root / "album" / "track01.WAV", frames=2_000 * 148, sample_rate=2_000)
    write_wav(root / "album" / "disc2" / "track02.Wav", frames=100 * 3603, sample_rate=100, channels=2)
    (root / "album" / "broken.wav").write_bytes(b"RIFF\x00\x00garbage")
    write_empty_wav(root / "album" / "empty.wav")
    (root / "notes.txt").write_text("not audio")
    return root
