"""
Candidate edges, the ranked prediction list, and the edge classifier.

A prediction is a ranked list of (regulator, target, score) triples, most
confident first. Only edges inside the gold-standard universe are scored:
the regulator must be a gold-standard regulator and the target a gold-standard
gene. Everything else is silently dropped, following the standard DREAM
evaluation protocol.

Classification:
    is_true_positive:  target in regulator.targets
    is_transitive:     not a true positive, and some regulator X of the target
                       is regulated by the edge's regulator (TF -> X -> target)
    is_coregulation:   not a true positive, and some regulator X of the target
                       also regulates the edge's regulator (X -> TF, X -> target)

Examples:
    >>> from grnscore.core.network import GoldStandard
    >>> from grnscore.core.edges import PredictionList, is_true_positive
    >>> gold = GoldStandard.from_records([("A", "B"), ("A", "C")])
    >>> preds = PredictionList.from_records([("A", "B", "0.9"), ("Z", "B", "0.5")], gold)
    >>> len(preds), preds.n_dropped
    (1, 1)
    >>> is_true_positive(preds[0], gold)
    True
"""

from __future__ import annotations

import logging
import math
import warnings
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Set, Tuple

from grnscore.core.flags import EdgeFlag
from grnscore.core.network import Gene, GoldStandard
from grnscore.core.records import RecordLike, numbered
from grnscore.exceptions import ParseError

__all__ = [
    'CandidateEdge',
    'PredictionList',
    'is_true_positive',
    'is_transitive',
    'is_coregulation',
    'classify',
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CandidateEdge:
    """
    A scored or unscored regulator -> target pair.

    Genes are referred to by their registry index in the gold standard.
    Unscored edges (score=None) are used to classify arbitrary pairs of the
    universe that may not appear in any prediction.
    """
    regulator: int
    target: int
    score: Optional[float] = None

    def __post_init__(self):
        if self.regulator == self.target:
            raise ValueError("a candidate edge must connect two distinct genes")

    @classmethod
    def between(cls, regulator: Gene, target: Gene, score: Optional[float] = None) -> CandidateEdge:
        return cls(regulator.index, target.index, score)

    @property
    def is_scored(self) -> bool:
        return self.score is not None

    def names(self, gold: GoldStandard) -> Tuple[str, str]:
        """(regulator name, target name) resolved through the gold standard."""
        return gold.genes[self.regulator].name, gold.genes[self.target].name


# ----------------------------------------------------------------------
# Classifier
# ----------------------------------------------------------------------

def is_true_positive(edge: CandidateEdge, gold: GoldStandard) -> bool:
    """True iff the edge is part of the gold standard."""
    return edge.target in gold.genes[edge.regulator].targets


def is_transitive(edge: CandidateEdge, gold: GoldStandard) -> bool:
    """
    True iff the edge is a false positive shortcutting a path TF -> X -> target.

    The candidate intermediates X are the gold-standard regulators of the
    target; the edge is transitive if the TF regulates any of them.
    """
    if is_true_positive(edge, gold):
        return False
    tf_targets = gold.genes[edge.regulator].targets
    return not tf_targets.isdisjoint(gold.genes[edge.target].regulators)


def is_coregulation(edge: CandidateEdge, gold: GoldStandard) -> bool:
    """
    True iff the edge is a false positive between two co-regulated genes.

    The edge is a co-regulation error if some regulator X of the target also
    regulates the TF (X -> TF and X -> target).
    """
    if is_true_positive(edge, gold):
        return False
    tf_regulators = gold.genes[edge.regulator].regulators
    return not tf_regulators.isdisjoint(gold.genes[edge.target].regulators)


def classify(edge: CandidateEdge, gold: GoldStandard) -> EdgeFlag:
    """Combine the three classifier verdicts into an EdgeFlag."""
    if is_true_positive(edge, gold):
        return EdgeFlag.TRUE_POSITIVE

    flag = EdgeFlag.FALSE_POSITIVE
    if is_transitive(edge, gold):
        flag |= EdgeFlag.TRANSITIVE
    if is_coregulation(edge, gold):
        flag |= EdgeFlag.COREGULATION
    return flag


# ----------------------------------------------------------------------
# Prediction list
# ----------------------------------------------------------------------

class PredictionList:
    """
    Ranked candidate edges restricted to the gold-standard universe.

    The list order is the ranking (best first). The core never re-sorts
    unless explicitly asked to with ``sort_by_score=True``.

    Attributes:
        n_read: Number of records read
        n_dropped: Records outside the universe (unknown regulator or target)
        n_duplicates: Repeated (regulator, target) pairs that were ignored
    """

    def __init__(
        self,
        edges: Iterable[CandidateEdge] = (),
        n_read: int = 0,
        n_dropped: int = 0,
        n_duplicates: int = 0,
    ):
        self._edges: List[CandidateEdge] = list(edges)
        self.n_read = n_read
        self.n_dropped = n_dropped
        self.n_duplicates = n_duplicates

    @classmethod
    def from_records(
        cls,
        records: Iterable[RecordLike],
        gold: GoldStandard,
        sort_by_score: bool = False,
        source: Optional[str] = None,
    ) -> PredictionList:
        """
        Build the ranked prediction list from 3-column records.

        A record is kept iff its regulator is a gold-standard regulator and
        its target is a gold-standard gene. Unknown names are dropped, never
        added to the gold standard. Kept edges preserve input order.

        Args:
            records: (regulator, target, score) records in rank order
            gold: The gold standard defining the universe
            sort_by_score: Re-rank by descending score. The sort is stable,
                so tied scores keep their input order.
            source: Name used in error messages (usually the file path)

        Raises:
            ParseError: Empty input, a record without exactly three columns,
                a score that is not a floating-point literal, or a self-loop

        Warns:
            UserWarning: If a (regulator, target) pair appears more than
                once; the first occurrence is kept
        """
        edges: List[CandidateEdge] = []
        seen: Set[Tuple[int, int]] = set()
        n_read = n_dropped = n_duplicates = 0

        for record in numbered(records):
            n_read += 1
            if record.n_columns != 3:
                raise ParseError(
                    f"expected three columns, found {record.n_columns}",
                    record.line_number, source,
                )

            regulator_name, target_name, score_field = record.fields
            score = _parse_score(score_field, record.line_number, source)

            if regulator_name == target_name:
                raise ParseError(
                    f"self-loop '{regulator_name}' -> '{target_name}' is not a valid prediction",
                    record.line_number, source,
                )

            regulator = gold.gene(regulator_name)
            target = gold.gene(target_name)
            if regulator is None or target is None or not gold.is_regulator(regulator):
                n_dropped += 1
                continue

            key = (regulator.index, target.index)
            if key in seen:
                n_duplicates += 1
                continue
            seen.add(key)
            edges.append(CandidateEdge(regulator.index, target.index, score))

        if n_read == 0:
            raise ParseError("the prediction is empty", source=source)

        if n_duplicates:
            warnings.warn(
                f"Found {n_duplicates} duplicate predicted edges. "
                "Using first occurrence of each.",
                UserWarning
            )

        if sort_by_score:
            edges.sort(key=lambda edge: edge.score, reverse=True)
            logger.info("Re-ranked predictions by descending score (ties keep input order)")

        logger.info(
            f"Prediction: kept {len(edges)}/{n_read} edges "
            f"({n_dropped} outside the gold-standard universe)"
        )
        return cls(edges, n_read=n_read, n_dropped=n_dropped, n_duplicates=n_duplicates)

    def __getitem__(self, k: int) -> CandidateEdge:
        return self._edges[k]

    def __iter__(self) -> Iterator[CandidateEdge]:
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"PredictionList(n_edges={len(self)}, n_read={self.n_read}, n_dropped={self.n_dropped})"


def _parse_score(value: str, line_number: int, source: Optional[str]) -> float:
    try:
        score = float(value)
    except ValueError:
        raise ParseError(f"score '{value}' is not a number", line_number, source) from None
    if math.isnan(score):
        raise ParseError(f"score '{value}' is not a number", line_number, source)
    return score
