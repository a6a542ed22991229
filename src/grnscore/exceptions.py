"""
Error taxonomy for network prediction scoring.

All failures are unrecoverable at the point of detection. Core functions
raise; only the command-line entry point turns an error into a diagnostic
and a non-zero exit status.

Hierarchy:
    EvaluationError
    ├── InputError              missing/empty file, bad column count, bad literal
    │   └── ParseError          record-level failure (carries the line number)
    ├── ConfigurationError      incompatible options, invalid config file
    └── DegenerateInputError    gold standard cannot support the metric
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    'EvaluationError',
    'InputError',
    'ParseError',
    'ConfigurationError',
    'DegenerateInputError',
]


class EvaluationError(Exception):
    """Base class for all scoring errors."""
    pass


class InputError(EvaluationError):
    """Raised when an input file is missing, empty or malformed."""
    pass


class ParseError(InputError):
    """
    Raised when a single record of an input file is invalid.

    Attributes:
        line_number: 1-based line of the offending record (None if unknown)
        source: Name of the file or stream being parsed (None if unknown)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        source: Optional[str] = None,
    ):
        self.line_number = line_number
        self.source = source
        self.reason = message

        prefix = "Parse error"
        if source is not None:
            prefix += f" in {source}"
        if line_number is not None:
            prefix += f" at line {line_number}"
        super().__init__(f"{prefix}: {message}")


class ConfigurationError(EvaluationError):
    """Raised for incompatible option combinations or invalid config files."""
    pass


class DegenerateInputError(EvaluationError):
    """Raised when the gold standard leaves a metric undefined (e.g. no negatives)."""
    pass
