"""
Precision-recall and ROC curves from a ranked prediction.

The curves are computed over the full universe of possible edges, not just
over the submitted list. Rank k (0-based) records the cumulative number of
true and false positives among the top k+1 edges:

    recall    = TP / G                (PR x-axis, ROC y-axis)
    precision = TP / (k + 1)          (PR y-axis)
    fpr       = FP / (P - G)          (ROC x-axis)

where G is the number of gold-standard edges and P the number of possible
edges.

Incomplete Rankings:
    Predictors usually submit fewer than P edges. The remaining ranks are
    filled under the assumption that the missing edges are drawn uniformly at
    random from what is left of the universe: every extra rank adds

        p_tp = (G - TP_n) / (P - n)   true positives
        p_fp = 1 - p_tp               false positives

    so that at the last rank TP == G and FP == P - G exactly. This gives every
    submission, however short, a well-defined area under both curves.

Examples:
    >>> from grnscore.core import GoldStandard, PredictionList
    >>> from grnscore.stats.curves import compute_curves
    >>> gold = GoldStandard.from_records([("A", "B"), ("A", "C"), ("D", "A")])
    >>> preds = PredictionList.from_records([("A", "B", "0.9")], gold)
    >>> curves = compute_curves(gold, preds)
    >>> len(curves), curves.n_extrapolated
    (6, 5)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd
from numpy.typing import NDArray

from grnscore.core.edges import PredictionList, is_true_positive
from grnscore.core.network import GoldStandard
from grnscore.exceptions import DegenerateInputError

__all__ = ['Curve', 'PerformanceCurves', 'compute_curves', 'TOTALS_TOLERANCE']

logger = logging.getLogger(__name__)

TOTALS_TOLERANCE = 1e-6


@dataclass
class Curve:
    """
    A curve sampled at every rank of the universe.

    Attributes:
        x: Abscissa per rank (recall for PR, false positive rate for ROC)
        y: Ordinate per rank (precision for PR, true positive rate for ROC)
        name: Short metric name ("PR" or "ROC")
        x_label: Axis label for x
        y_label: Axis label for y
    """
    x: NDArray[np.float64]
    y: NDArray[np.float64]
    name: str
    x_label: str
    y_label: str

    def __post_init__(self):
        if self.x.shape != self.y.shape:
            raise ValueError(f"x and y must have the same shape, got {self.x.shape} and {self.y.shape}")

    def __len__(self) -> int:
        return len(self.x)

    def points(self) -> list[tuple[float, float]]:
        """The curve as a list of (x, y) tuples."""
        return list(zip(self.x.tolist(), self.y.tolist()))

    def to_frame(self) -> pd.DataFrame:
        """The curve as a two-column DataFrame indexed by rank."""
        return pd.DataFrame(
            {self.x_label: self.x, self.y_label: self.y},
            index=pd.RangeIndex(1, len(self) + 1, name='rank'),
        )


@dataclass
class PerformanceCurves:
    """
    Cumulative counts and PR/ROC curves for one prediction.

    Attributes:
        tp: Cumulative (possibly fractional) true positives per rank
        fp: Cumulative (possibly fractional) false positives per rank
        pr: Precision-recall curve (x=recall, y=precision)
        roc: ROC curve (x=false positive rate, y=true positive rate)
        n_predicted: Ranks taken from the prediction list
        n_gold_edges: G, the number of gold-standard edges
        n_possible_edges: P, the size of the universe
    """
    tp: NDArray[np.float64]
    fp: NDArray[np.float64]
    pr: Curve
    roc: Curve
    n_predicted: int
    n_gold_edges: int
    n_possible_edges: int

    def __len__(self) -> int:
        return self.n_possible_edges

    @property
    def n_extrapolated(self) -> int:
        """Ranks filled by the random-discovery tail."""
        return self.n_possible_edges - self.n_predicted

    @property
    def recall(self) -> NDArray[np.float64]:
        return self.pr.x

    @property
    def precision(self) -> NDArray[np.float64]:
        return self.pr.y

    @property
    def fpr(self) -> NDArray[np.float64]:
        return self.roc.x


def compute_curves(gold: GoldStandard, predictions: PredictionList) -> PerformanceCurves:
    """
    Accumulate PR and ROC curves over the whole universe of possible edges.

    Args:
        gold: Gold standard defining G and P
        predictions: Ranked prediction list, already restricted to the universe

    Returns:
        PerformanceCurves with both curves of length P

    Raises:
        DegenerateInputError: If the gold standard has no negatives (P == G)
        ValueError: If the prediction list is longer than the universe
        RuntimeError: If the final counts do not match G and P - G
    """
    n_gold = gold.n_edges
    n_possible = gold.n_possible_edges
    n_negatives = n_possible - n_gold
    n_predicted = len(predictions)

    if n_negatives == 0:
        raise DegenerateInputError("There are no negatives in the gold standard!")
    if n_predicted > n_possible:
        raise ValueError(
            f"Prediction list has {n_predicted} edges but the universe only has {n_possible}"
        )

    hits = np.fromiter(
        (is_true_positive(edge, gold) for edge in predictions),
        dtype=np.float64,
        count=n_predicted,
    )
    tp = np.cumsum(hits)
    fp = np.arange(1, n_predicted + 1, dtype=np.float64) - tp

    n_tail = n_possible - n_predicted
    if n_tail > 0:
        tp_head = tp[-1] if n_predicted else 0.0
        fp_head = fp[-1] if n_predicted else 0.0
        p_tp = (n_gold - tp_head) / n_tail
        p_fp = 1.0 - p_tp
        steps = np.arange(1, n_tail + 1, dtype=np.float64)
        tp = np.concatenate([tp, tp_head + p_tp * steps])
        fp = np.concatenate([fp, fp_head + p_fp * steps])
        logger.info(
            f"Extrapolated {n_tail} ranks beyond the {n_predicted} predicted edges "
            f"(random discovery rate {p_tp:.4g})"
        )

    _check_totals(tp, fp, n_gold, n_negatives)

    ranks = np.arange(1, n_possible + 1, dtype=np.float64)
    recall = tp / n_gold
    precision = tp / ranks
    fpr = fp / n_negatives

    return PerformanceCurves(
        tp=tp,
        fp=fp,
        pr=Curve(recall, precision, name="PR", x_label="recall", y_label="precision"),
        roc=Curve(fpr, recall.copy(), name="ROC", x_label="false_positive_rate", y_label="true_positive_rate"),
        n_predicted=n_predicted,
        n_gold_edges=n_gold,
        n_possible_edges=n_possible,
    )


def _check_totals(tp: NDArray, fp: NDArray, n_gold: int, n_negatives: int) -> None:
    """At the last rank every positive and every negative has been counted."""
    tp_final, fp_final = float(tp[-1]), float(fp[-1])
    if (
        abs(tp_final - n_gold) >= TOTALS_TOLERANCE
        or abs(fp_final - n_negatives) >= TOTALS_TOLERANCE
        or abs(tp_final + fp_final - (n_gold + n_negatives)) >= TOTALS_TOLERANCE
    ):
        raise RuntimeError(
            f"Curve totals inconsistent: TP={tp_final}, FP={fp_final}, "
            f"expected TP={n_gold}, FP={n_negatives}"
        )
