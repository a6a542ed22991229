"""
Bitwise classification flags for candidate edges.

A predicted edge is either a true positive or a false positive. False
positives can additionally be explained by a gold-standard motif:

    TRANSITIVE:   TF -> X -> target exists (an indirect path)
    COREGULATION: X -> TF and X -> target exist (a shared upstream regulator)

The two motif flags are not mutually exclusive with each other, but neither
is ever combined with TRUE_POSITIVE.

Examples:
    >>> from grnscore.core.flags import EdgeFlag
    >>> flag = EdgeFlag.FALSE_POSITIVE | EdgeFlag.TRANSITIVE
    >>> bool(flag & EdgeFlag.TRANSITIVE)
    True
    >>> flag.is_motif_error
    True
"""

from __future__ import annotations

from enum import IntFlag

__all__ = ['EdgeFlag']


class EdgeFlag(IntFlag):
    """
    Classification of a candidate edge against the gold standard.

    Attributes:
        TRUE_POSITIVE: Edge is in the gold standard (1)
        FALSE_POSITIVE: Edge is not in the gold standard (2)
        TRANSITIVE: False positive shortcutting a two-hop path (4)
        COREGULATION: False positive between two co-regulated genes (8)
    """

    TRUE_POSITIVE = 1
    FALSE_POSITIVE = 2
    TRANSITIVE = 4
    COREGULATION = 8

    @property
    def is_motif_error(self) -> bool:
        """True for false positives explained by a transitive or co-regulation motif."""
        return bool(self & (EdgeFlag.TRANSITIVE | EdgeFlag.COREGULATION))
