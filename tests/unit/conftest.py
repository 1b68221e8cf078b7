from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pytest

from wavstats.types import ScanFailure, ScanSuccess


@pytest.fixture(scope="session", autouse=True)
def _disable_network_for_unit_tests() -> None:
    """Block real sockets for unit tests; allow Unix sockets for pytest internals."""
    from pytest_socket import disable_socket

    disable_socket(allow_unix_socket=True)


@dataclass
class FakeInfo:
    """Stand-in for soundfile's info object."""

    frames: int
    samplerate: int
    format: str = "WAV"


@pytest.fixture
def fake_info() -> type[FakeInfo]:
    return FakeInfo


@pytest.fixture
def mixed_results() -> list:
    """Three measured files, one bad file and one traversal error."""
    return [
        ScanSuccess(path=Path("a.wav"), duration=1.5),
        ScanSuccess(path=Path("b.wav"), duration=148.25),
        ScanFailure(path=Path("bad.wav"), reason="Format not recognised."),
        ScanSuccess(path=Path("c.WAV"), duration=3603.9),
        ScanFailure(path=None, reason="Permission denied"),
    ]
