"""
Systematic prediction errors: transitive and co-regulation false positives.

Two network motifs explain a large share of false positives made by
expression-based inference methods:

    Transitive (indirect) edge:  TF -> X -> target in the gold standard,
                                 predicted as TF -> target
    Co-regulation edge:          X -> TF and X -> target in the gold standard,
                                 predicted as TF -> target

Observed counts come from one pass over the prediction list. Whether these
counts are high has to be judged against chance: the baseline is obtained by
classifying every (regulator, gene) pair of the universe, giving the fraction
of all gold-standard negatives that fall into each motif. A random set of
false positives of the same size is expected to contain

    expected = (motif negatives / all negatives) * observed false positives

Scaling:
    The baseline enumeration visits n_regulators * (n_genes - 1) pairs. This is
    fine for DREAM-sized networks (thousands of genes) but is the limiting step
    for genome-scale gold standards.

Note:
    Motif analysis is meant for a prediction list cut at a confidence
    threshold, whereas PR/ROC curves are meant for complete rankings.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from grnscore.core.edges import (
    CandidateEdge,
    PredictionList,
    is_coregulation,
    is_transitive,
    is_true_positive,
)
from grnscore.core.network import GoldStandard

__all__ = ['ErrorCounts', 'MotifAnalysis', 'count_errors', 'count_expected_errors', 'analyze_errors']

logger = logging.getLogger(__name__)


@dataclass
class ErrorCounts:
    """
    Motif tallies over a set of classified edges.

    Attributes:
        n_edges: Number of edges classified
        n_false_positives: Edges not in the gold standard
        n_transitive: False positives with a TF -> X -> target path
        n_coregulation: False positives with an X -> TF, X -> target pair
    """
    n_edges: int = 0
    n_false_positives: int = 0
    n_transitive: int = 0
    n_coregulation: int = 0


@dataclass
class MotifAnalysis:
    """
    Observed motif errors of a prediction versus the random expectation.

    Attributes:
        observed: Counts over the prediction list
        universe: Counts over every (regulator, gene) pair of the universe
        n_negatives: Gold-standard negatives in the universe (P - G)
    """
    observed: ErrorCounts
    universe: ErrorCounts
    n_negatives: int

    @property
    def n_false_positives(self) -> int:
        return self.observed.n_false_positives

    @property
    def transitive_fraction(self) -> float:
        """Observed transitive edges as a fraction of false positives."""
        return _ratio(self.observed.n_transitive, self.n_false_positives)

    @property
    def coregulation_fraction(self) -> float:
        """Observed co-regulation edges as a fraction of false positives."""
        return _ratio(self.observed.n_coregulation, self.n_false_positives)

    @property
    def transitive_baseline(self) -> float:
        """Fraction of all gold-standard negatives that are transitive."""
        return _ratio(self.universe.n_transitive, self.n_negatives)

    @property
    def coregulation_baseline(self) -> float:
        """Fraction of all gold-standard negatives that are co-regulation edges."""
        return _ratio(self.universe.n_coregulation, self.n_negatives)

    @property
    def expected_transitive(self) -> float:
        """Transitive edges expected in a random false-positive set of the same size."""
        return self.transitive_baseline * self.n_false_positives

    @property
    def expected_coregulation(self) -> float:
        """Co-regulation edges expected in a random false-positive set of the same size."""
        return self.coregulation_baseline * self.n_false_positives

    @property
    def expected_transitive_fraction(self) -> float:
        return _ratio(self.expected_transitive, self.n_false_positives)

    @property
    def expected_coregulation_fraction(self) -> float:
        return _ratio(self.expected_coregulation, self.n_false_positives)

    def to_frame(self) -> pd.DataFrame:
        """
        Observed and expected counts as a table.

        Rows are the motifs ("Transitive", "Co-regulation"); columns are
        observed/expected totals and fractions of false positives.
        """
        return pd.DataFrame(
            {
                'observed': [self.observed.n_transitive, self.observed.n_coregulation],
                'observed_fraction': [self.transitive_fraction, self.coregulation_fraction],
                'expected': [self.expected_transitive, self.expected_coregulation],
                'expected_fraction': [
                    self.expected_transitive_fraction,
                    self.expected_coregulation_fraction,
                ],
            },
            index=pd.Index(['Transitive', 'Co-regulation'], name='motif'),
        )

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict (NaN becomes None)."""
        def clean(value: float):
            return None if np.isnan(value) else float(value)

        return {
            "n_predicted_edges": self.observed.n_edges,
            "n_false_positives": self.n_false_positives,
            "n_negatives": self.n_negatives,
            "observed": {
                "transitive": self.observed.n_transitive,
                "coregulation": self.observed.n_coregulation,
                "transitive_fraction": clean(self.transitive_fraction),
                "coregulation_fraction": clean(self.coregulation_fraction),
            },
            "expected": {
                "transitive": clean(self.expected_transitive),
                "coregulation": clean(self.expected_coregulation),
                "transitive_fraction": clean(self.expected_transitive_fraction),
                "coregulation_fraction": clean(self.expected_coregulation_fraction),
            },
            "universe": {
                "transitive": self.universe.n_transitive,
                "coregulation": self.universe.n_coregulation,
            },
        }


def count_errors(gold: GoldStandard, predictions: PredictionList) -> ErrorCounts:
    """Tally false positives and motif errors over the prediction list."""
    counts = ErrorCounts()
    for edge in predictions:
        _tally(counts, edge, gold)
    return counts


def count_expected_errors(gold: GoldStandard) -> ErrorCounts:
    """
    Classify every (regulator, gene) pair of the universe.

    Self pairs are skipped. The result does not depend on any prediction and
    only needs to be computed once per gold standard.
    """
    logger.info(f"Enumerating {gold.n_possible_edges} regulator-gene pairs for the random baseline")

    counts = ErrorCounts()
    for regulator in gold.regulators:
        for target in gold.genes:
            if target.index == regulator.index:
                continue
            _tally(counts, CandidateEdge.between(regulator, target), gold)
    return counts


def analyze_errors(gold: GoldStandard, predictions: PredictionList) -> MotifAnalysis:
    """Observed motif errors of a prediction together with their random expectation."""
    observed = count_errors(gold, predictions)
    universe = count_expected_errors(gold)

    if observed.n_false_positives == 0:
        logger.warning("The prediction contains no false positives; motif fractions are undefined")

    return MotifAnalysis(observed=observed, universe=universe, n_negatives=gold.n_negatives)


def _tally(counts: ErrorCounts, edge: CandidateEdge, gold: GoldStandard) -> None:
    counts.n_edges += 1
    if not is_true_positive(edge, gold):
        counts.n_false_positives += 1
    if is_transitive(edge, gold):
        counts.n_transitive += 1
    if is_coregulation(edge, gold):
        counts.n_coregulation += 1


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return float('nan')
    return numerator / denominator
