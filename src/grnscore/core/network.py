"""
Gene registry and gold-standard regulatory network.

The gold standard is the reference directed graph of true regulatory
relationships (regulator -> target). It defines the universe against which a
ranked prediction is scored: every ordered pair from a regulator to any other
gene of the gold standard.

Biological Context:
    Network inference benchmarks (e.g. the DREAM challenges) score predicted
    transcription factor -> target edges against a curated or simulated gold
    standard. Only regulators of the gold standard are considered as sources,
    so a predictor is never penalised for edges it could not have known
    about.

Engineering Design:
    - Index-based ownership: GeneRegistry is an arena of Gene records with
      stable integer indices. Adjacency is stored as sets of indices on each
      Gene, so there are no cyclic object references.
    - GoldStandard is the sole owner of the registry and of both adjacency
      directions; it is append-only once built.
    - No file handling here. Builders accept Records (see core.records).

Examples:
    >>> from grnscore.core.network import GoldStandard
    >>> gold = GoldStandard.from_records([("A", "B"), ("A", "C")])
    >>> gold.n_regulators, gold.n_genes, gold.n_edges
    (1, 3, 2)
    >>> gold.n_possible_edges
    2
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Set

import networkx as nx

from grnscore.core.records import RecordLike, numbered
from grnscore.exceptions import ParseError

__all__ = ['Gene', 'GeneRegistry', 'GoldStandard']

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Gene:
    """
    A node of the gold-standard network.

    Attributes:
        name: Unique identifier (gene symbol, locus tag, ...)
        index: Stable position in the owning GeneRegistry
        regulators: Indices of genes with a gold-standard edge into this gene
        targets: Indices of genes this gene has a gold-standard edge into
    """
    name: str
    index: int
    regulators: Set[int] = field(default_factory=set, repr=False)
    targets: Set[int] = field(default_factory=set, repr=False)

    def regulates(self, other: Gene) -> bool:
        """True if this gene has a gold-standard edge into `other`."""
        return other.index in self.targets

    def is_regulated_by(self, other: Gene) -> bool:
        """True if `other` has a gold-standard edge into this gene."""
        return other.index in self.regulators

    @property
    def is_regulator(self) -> bool:
        return len(self.targets) > 0

    def __hash__(self) -> int:
        return hash(self.index)


class GeneRegistry:
    """
    Arena of uniquely named genes.

    Genes are created lazily on first mention and never removed. Lookup is by
    name (``get``) or by index (``registry[i]``).
    """

    def __init__(self):
        self._genes: List[Gene] = []
        self._by_name: Dict[str, int] = {}

    def add(self, name: str) -> Gene:
        """Return the gene called `name`, creating it if needed."""
        index = self._by_name.get(name)
        if index is not None:
            return self._genes[index]

        gene = Gene(name=name, index=len(self._genes))
        self._genes.append(gene)
        self._by_name[name] = gene.index
        return gene

    def get(self, name: str) -> Optional[Gene]:
        """Return the gene called `name`, or None if it was never registered."""
        index = self._by_name.get(name)
        return None if index is None else self._genes[index]

    def __getitem__(self, index: int) -> Gene:
        return self._genes[index]

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Gene]:
        return iter(self._genes)

    def __len__(self) -> int:
        return len(self._genes)

    @property
    def names(self) -> List[str]:
        return [gene.name for gene in self._genes]


class GoldStandard:
    """
    The reference network and the universe of scorable edges.

    Attributes:
        genes: GeneRegistry holding every gene mentioned in the gold standard
        n_edges: Number of distinct gold-standard (regulator, target) pairs

    Invariants:
        - n_possible_edges == n_regulators * (n_genes - 1)
        - n_edges == number of distinct edges ingested
        - every regulator has at least one target
    """

    def __init__(self):
        self.genes = GeneRegistry()
        self._regulators: Dict[int, None] = {}  # insertion-ordered set
        self.n_edges = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_edge(self, regulator_name: str, target_name: str) -> bool:
        """
        Record the gold-standard edge regulator -> target.

        Returns:
            True if the edge is new, False if it was already present

        Raises:
            ValueError: If regulator and target are the same gene
        """
        if regulator_name == target_name:
            raise ValueError(f"self-loop '{regulator_name}' -> '{target_name}' is not a valid edge")

        regulator = self.genes.add(regulator_name)
        target = self.genes.add(target_name)
        self._regulators[regulator.index] = None

        if target.index in regulator.targets:
            return False

        regulator.targets.add(target.index)
        target.regulators.add(regulator.index)
        self.n_edges += 1
        return True

    @classmethod
    def from_records(
        cls,
        records: Iterable[RecordLike],
        source: Optional[str] = None,
    ) -> GoldStandard:
        """
        Build a gold standard from 2- or 3-column records.

        The first record fixes the format for the whole input: either
        ``regulator, target`` or ``regulator, target, 1``. In the 3-column
        format the third field must be exactly ``1``.

        Args:
            records: Records or plain field sequences, in file order
            source: Name used in error messages (usually the file path)

        Returns:
            The populated GoldStandard

        Raises:
            ParseError: Empty input, inconsistent column count, a third
                column other than '1', or a self-loop

        Warns:
            UserWarning: If duplicate edges were found (counted once)
        """
        gold = cls()
        n_columns = None
        n_duplicates = 0

        for record in numbered(records):
            if n_columns is None:
                n_columns = record.n_columns
                if n_columns not in (2, 3):
                    raise ParseError(
                        f"expected two or three columns, found {n_columns}",
                        record.line_number, source,
                    )
            elif record.n_columns != n_columns:
                expected = "two" if n_columns == 2 else "three"
                raise ParseError(
                    f"expected {expected} columns, found {record.n_columns}",
                    record.line_number, source,
                )

            if n_columns == 3 and record.fields[2].strip() != "1":
                raise ParseError(
                    f"the third column must be '1', found '{record.fields[2]}'",
                    record.line_number, source,
                )

            try:
                is_new = gold.add_edge(record.fields[0], record.fields[1])
            except ValueError as e:
                raise ParseError(str(e), record.line_number, source) from e
            if not is_new:
                n_duplicates += 1

        if n_columns is None:
            raise ParseError("the gold standard is empty", source=source)

        if n_duplicates:
            warnings.warn(
                f"Found {n_duplicates} duplicate gold-standard edges. "
                "Each edge is counted once.",
                UserWarning
            )

        logger.info(
            f"Gold standard: {gold.n_edges} edges, {gold.n_regulators} regulators, "
            f"{gold.n_genes} genes ({gold.n_possible_edges} possible edges)"
        )
        return gold

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def gene(self, name: str) -> Optional[Gene]:
        """Return the gene called `name`, or None if it is not in the gold standard."""
        return self.genes.get(name)

    def is_regulator(self, gene: Gene) -> bool:
        return gene.index in self._regulators

    def has_edge(self, regulator: Gene, target: Gene) -> bool:
        return regulator.regulates(target)

    @property
    def regulators(self) -> List[Gene]:
        """Regulators in the order they first appeared."""
        return [self.genes[i] for i in self._regulators]

    @property
    def n_genes(self) -> int:
        return len(self.genes)

    @property
    def n_regulators(self) -> int:
        return len(self._regulators)

    @property
    def n_possible_edges(self) -> int:
        """Size of the universe: every regulator paired with every other gene."""
        return self.n_regulators * (self.n_genes - 1)

    @property
    def n_negatives(self) -> int:
        """Number of universe pairs that are not gold-standard edges."""
        return self.n_possible_edges - self.n_edges

    def summary(self) -> Dict[str, int]:
        """Counts describing the gold standard and its universe."""
        return {
            'n_genes': self.n_genes,
            'n_regulators': self.n_regulators,
            'n_edges': self.n_edges,
            'n_possible_edges': self.n_possible_edges,
            'n_negatives': self.n_negatives,
        }

    def to_networkx(self) -> nx.DiGraph:
        """
        Export the gold standard as a networkx DiGraph.

        Nodes are gene names with an ``is_regulator`` attribute; edges are the
        gold-standard edges.
        """
        G = nx.DiGraph()
        for gene in self.genes:
            G.add_node(gene.name, is_regulator=self.is_regulator(gene))
        for regulator in self.regulators:
            for target_index in regulator.targets:
                G.add_edge(regulator.name, self.genes[target_index].name)
        return G

    def __repr__(self) -> str:
        return (
            f"GoldStandard(n_genes={self.n_genes}, n_regulators={self.n_regulators}, "
            f"n_edges={self.n_edges})"
        )
