"""Directory tree traversal that reports listing errors instead of raising."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True, slots=True)
class WalkEntry:
    """One item produced by the walk: either a path or the error hit reading one."""

    path: Path | None = None
    error: OSError | None = None


def walk_tree(root: str | Path) -> Iterator[WalkEntry]:
    """Yield the root and every directory and file below it, top-down.

    Symlinked directories are listed but not descended into. A directory that
    cannot be listed produces an error entry and the walk carries on.
    """
    root_path = Path(root)
    errors: deque[OSError] = deque()

    yield WalkEntry(path=root_path)
    for dirpath, dirnames, filenames in os.walk(root_path, onerror=errors.append, followlinks=False):
        while errors:
            yield WalkEntry(error=errors.popleft())
        base = Path(dirpath)
        for name in dirnames:
            yield WalkEntry(path=base / name)
        for name in filenames:
            yield WalkEntry(path=base / name)

    while errors:
        yield WalkEntry(error=errors.popleft())
