"""
Pytest configuration and shared fixtures.

Provides small hand-checkable gold standards, a random gold-standard
generator for property tests, and helpers to write tab-delimited files.
"""

from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from grnscore.core.edges import CandidateEdge, PredictionList
from grnscore.core.network import GoldStandard


def write_tsv(path: Path, rows: Iterable[Sequence[object]]) -> Path:
    """Write rows as a tab-delimited file (one line per row)."""
    path.write_text("".join("\t".join(str(v) for v in row) + "\n" for row in rows))
    return path


def edges_to_predictions(
    gold: GoldStandard,
    pairs: Iterable[Tuple[str, str]],
) -> PredictionList:
    """Build a ranked PredictionList from (regulator, target) names, best first."""
    edges = []
    pairs = list(pairs)
    for rank, (regulator, target) in enumerate(pairs):
        edges.append(CandidateEdge.between(
            gold.gene(regulator), gold.gene(target), score=float(len(pairs) - rank)
        ))
    return PredictionList(edges, n_read=len(edges))


def universe_pairs(gold: GoldStandard) -> List[Tuple[str, str]]:
    """Every (regulator, other gene) pair of the gold standard, as names."""
    return [
        (regulator.name, gene.name)
        for regulator in gold.regulators
        for gene in gold.genes
        if gene.index != regulator.index
    ]


def generate_random_gold(
    n_genes: int,
    n_regulators: int,
    targets_per_regulator: int,
    seed: int = 42,
) -> GoldStandard:
    """
    Random gold standard where genes G0..G{n_regulators-1} are regulators.

    Every gene is mentioned at least once so the universe has exactly
    n_regulators * (n_genes - 1) pairs.
    """
    rng = np.random.RandomState(seed)
    names = [f"G{i}" for i in range(n_genes)]
    records = []
    for r in range(n_regulators):
        others = [i for i in range(n_genes) if i != r]
        for t in rng.choice(others, size=targets_per_regulator, replace=False):
            records.append((names[r], names[t]))

    # G0 is a regulator, so every orphan gene can hang off it
    mentioned = {name for record in records for name in record}
    for name in names:
        if name not in mentioned:
            records.append((names[0], name))

    return GoldStandard.from_records(records)


@pytest.fixture
def simple_gold():
    """
    A -> B, A -> C, E -> F

    Regulators {A, E}, genes {A, B, C, E, F}:
    8 possible edges, 3 positives, 5 negatives.
    """
    return GoldStandard.from_records([("A", "B"), ("A", "C"), ("E", "F")])


@pytest.fixture
def motif_gold():
    """
    X -> A, X -> D, A -> B, B -> C

    (A, C) is transitive via B; (A, D) is co-regulated by X.
    Regulators {X, A, B}, genes {X, A, D, B, C}: 12 possible edges, 8 negatives.
    """
    return GoldStandard.from_records([("X", "A"), ("X", "D"), ("A", "B"), ("B", "C")])


@pytest.fixture
def random_gold():
    """40 regulators, 200 genes, 10 targets per regulator."""
    return generate_random_gold(n_genes=200, n_regulators=40, targets_per_regulator=10, seed=7)
