"""
Core data structures for scoring network predictions.

1. GoldStandard / GeneRegistry / Gene: the reference network and its universe
2. CandidateEdge / PredictionList: the ranked prediction, restricted to the universe
3. is_true_positive / is_transitive / is_coregulation: the edge classifier
4. EdgeFlag: bitwise summary of a classification

Nothing in this package touches the filesystem; builders accept Records.

Examples:
    >>> from grnscore.core import EdgeFlag, GoldStandard, PredictionList, classify
    >>> gold = GoldStandard.from_records([("A", "B"), ("B", "C")])
    >>> preds = PredictionList.from_records([("A", "C", "1.0")], gold)
    >>> bool(classify(preds[0], gold) & EdgeFlag.TRANSITIVE)
    True
"""

from grnscore.core.records import Record
from grnscore.core.network import Gene, GeneRegistry, GoldStandard
from grnscore.core.flags import EdgeFlag
from grnscore.core.edges import (
    CandidateEdge,
    PredictionList,
    is_true_positive,
    is_transitive,
    is_coregulation,
    classify,
)

__all__ = [
    'Record',
    'Gene',
    'GeneRegistry',
    'GoldStandard',
    'EdgeFlag',
    'CandidateEdge',
    'PredictionList',
    'is_true_positive',
    'is_transitive',
    'is_coregulation',
    'classify',
]
