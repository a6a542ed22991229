"""Utility modules for writing evaluation outputs."""

from grnscore.utils.fileio import (
    atomic_write_json,
    atomic_write_text,
)

__all__ = [
    # Atomic file-write utilities
    'atomic_write_json',
    'atomic_write_text',
]
