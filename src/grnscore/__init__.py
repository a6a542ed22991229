"""
grnscore - Gold-standard evaluation of ranked gene regulatory network predictions

Scores a ranked list of predicted regulator -> target edges against a gold
standard network: precision-recall and ROC curves with their areas, and an
analysis of systematic false positives (transitive and co-regulation edges)
against a randomized baseline. Follows the DREAM network inference challenge
evaluation protocol.
"""

__version__ = "0.1.0"

from grnscore.core.network import GoldStandard
from grnscore.core.edges import CandidateEdge, PredictionList
from grnscore.core.flags import EdgeFlag

__all__ = [
    "GoldStandard",
    "CandidateEdge",
    "PredictionList",
    "EdgeFlag",
]
