"""
Scoring algorithms over a gold standard and a ranked prediction.

Modules:
    curves: PR and ROC curves over the full universe, with random-fill tail
    auc: Trapezoidal areas under both curves, AUPR normalization
    motifs: Transitive and co-regulation false positives vs random expectation

Examples:
    >>> from grnscore.stats import compute_curves, compute_auc
    >>> curves = compute_curves(gold, predictions)
    >>> auc = compute_auc(curves)
    >>> print(f"AUPR={auc.aupr:.3f} AUROC={auc.auroc:.3f}")
"""

from grnscore.stats.curves import Curve, PerformanceCurves, compute_curves
from grnscore.stats.auc import AreaUnderCurves, area_under_curve, compute_auc
from grnscore.stats.motifs import (
    ErrorCounts,
    MotifAnalysis,
    analyze_errors,
    count_errors,
    count_expected_errors,
)

__all__ = [
    # Curves
    'Curve',
    'PerformanceCurves',
    'compute_curves',
    # Areas
    'AreaUnderCurves',
    'area_under_curve',
    'compute_auc',
    # Motif errors
    'ErrorCounts',
    'MotifAnalysis',
    'analyze_errors',
    'count_errors',
    'count_expected_errors',
]
