"""Custom exceptions for the WAV statistics scanner.

Two families live here: fatal errors about the scan root, which abort the run
before anything is read, and per-file extraction errors, which are caught at
the dispatch boundary and reported as warnings.

All exceptions inherit from WavStatsError for consistent error handling.
"""

from __future__ import annotations


class WavStatsError(Exception):
    """Base exception for all wavstats errors."""


# Scan root exceptions


class InvalidRootError(WavStatsError):
    """Raised when the directory to scan cannot be used."""


class RootNotFoundError(InvalidRootError, FileNotFoundError):
    """Raised when the scan root does not exist.

    Inherits from FileNotFoundError so callers handling plain OS errors
    still catch it.
    """


class RootNotADirectoryError(InvalidRootError, NotADirectoryError):
    """Raised when the scan root exists but is not a directory."""


# Per-file exceptions


class ExtractionError(WavStatsError):
    """Raised when a duration cannot be derived from a file's header."""


class UnreadableHeaderError(ExtractionError):
    """Raised when the container cannot be opened or its header is invalid.

    This can occur due to:
    - Files that are not WAV containers at all
    - Truncated or corrupted headers
    - A zero or missing sample rate
    """


class EmptyAudioError(ExtractionError):
    """Raised when the header is valid but declares no sample frames."""
