from __future__ import annotations


class ErrorDetectionError(ValueError):
    """Base class for everything this package rejects."""


class InvalidLength(ErrorDetectionError):
    """Declared length is negative or runs past the end of the buffer."""


class UnsupportedWidth(ErrorDetectionError):
    """Bit width outside {8, 16, 32}, or a config used at the wrong width."""


class CheckMismatch(ErrorDetectionError):
    """Received check value does not match the one recomputed over the payload."""
