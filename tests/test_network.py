"""Tests for the gene registry and gold-standard construction."""

import networkx as nx
import pytest

from grnscore.core.network import GeneRegistry, GoldStandard
from grnscore.core.records import Record
from grnscore.exceptions import InputError, ParseError

from conftest import generate_random_gold


class TestGeneRegistry:
    """Tests for GeneRegistry."""

    def test_add_is_get_or_create(self):
        registry = GeneRegistry()
        a = registry.add("A")
        b = registry.add("B")

        assert registry.add("A") is a
        assert (a.index, b.index) == (0, 1)
        assert len(registry) == 2
        assert registry.names == ["A", "B"]

    def test_get_unknown_returns_none(self):
        registry = GeneRegistry()
        registry.add("A")

        assert registry.get("Z") is None
        assert "A" in registry
        assert "Z" not in registry

    def test_index_lookup(self):
        registry = GeneRegistry()
        registry.add("A")
        b = registry.add("B")

        assert registry[1] is b


class TestGoldStandardConstruction:
    """Tests for GoldStandard.from_records()."""

    def test_two_column_format(self):
        gold = GoldStandard.from_records([("A", "B"), ("A", "C")])

        assert gold.n_edges == 2
        assert gold.n_genes == 3
        assert gold.n_regulators == 1
        assert gold.n_possible_edges == 2

    def test_three_column_format(self):
        gold = GoldStandard.from_records([("A", "B", "1"), ("B", "C", "1")])

        assert gold.n_edges == 2
        assert gold.n_regulators == 2
        assert gold.n_possible_edges == 2 * 2

    def test_mutual_adjacency(self):
        gold = GoldStandard.from_records([("A", "B")])
        a, b = gold.gene("A"), gold.gene("B")

        assert a.regulates(b)
        assert b.is_regulated_by(a)
        assert not b.regulates(a)
        assert a.is_regulator
        assert not b.is_regulator

    def test_target_only_gene_is_not_regulator(self):
        gold = GoldStandard.from_records([("A", "B"), ("C", "A")])

        assert gold.is_regulator(gold.gene("A"))
        assert gold.is_regulator(gold.gene("C"))
        assert not gold.is_regulator(gold.gene("B"))
        assert [g.name for g in gold.regulators] == ["A", "C"]

    def test_empty_input(self):
        with pytest.raises(ParseError, match="empty"):
            GoldStandard.from_records([])

    def test_parse_error_is_input_error(self):
        with pytest.raises(InputError):
            GoldStandard.from_records([])

    def test_column_count_fixed_by_first_record(self):
        with pytest.raises(ParseError, match="expected two columns") as excinfo:
            GoldStandard.from_records([("A", "B"), ("A", "C", "1")])
        assert excinfo.value.line_number == 2

    def test_three_to_two_columns_rejected(self):
        with pytest.raises(ParseError, match="expected three columns"):
            GoldStandard.from_records([("A", "B", "1"), ("A", "C")])

    def test_third_column_must_be_one(self):
        with pytest.raises(ParseError, match="must be '1'"):
            GoldStandard.from_records([("A", "B", "1"), ("A", "C", "0")])

    def test_third_column_is_literal(self):
        with pytest.raises(ParseError, match="must be '1'"):
            GoldStandard.from_records([("A", "B", "1.0")])

    def test_single_column_rejected(self):
        with pytest.raises(ParseError, match="two or three columns"):
            GoldStandard.from_records([("A",)])

    def test_self_loop_rejected(self):
        with pytest.raises(ParseError, match="self-loop"):
            GoldStandard.from_records([("A", "B"), ("A", "A")])

    def test_duplicate_edges_counted_once(self):
        with pytest.warns(UserWarning, match="1 duplicate"):
            gold = GoldStandard.from_records([("A", "B"), ("A", "C"), ("A", "B")])

        assert gold.n_edges == 2

    def test_error_reports_record_line_number(self):
        records = [Record(3, ("A", "B")), Record(7, ("A", "C", "1"))]

        with pytest.raises(ParseError) as excinfo:
            GoldStandard.from_records(records, source="gold.tsv")

        assert excinfo.value.line_number == 7
        assert "gold.tsv" in str(excinfo.value)
        assert "line 7" in str(excinfo.value)


class TestUniverse:
    """The universe of possible edges is regulators x (genes - 1)."""

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_possible_edges_formula(self, seed):
        gold = generate_random_gold(n_genes=30, n_regulators=6, targets_per_regulator=4, seed=seed)

        assert gold.n_genes == 30
        assert gold.n_regulators == 6
        assert gold.n_possible_edges == 6 * 29
        assert gold.n_negatives == gold.n_possible_edges - gold.n_edges

    def test_summary(self, simple_gold):
        assert simple_gold.summary() == {
            'n_genes': 5,
            'n_regulators': 2,
            'n_edges': 3,
            'n_possible_edges': 8,
            'n_negatives': 5,
        }


class TestNetworkxExport:
    """Tests for GoldStandard.to_networkx()."""

    def test_edges_and_attributes(self, motif_gold):
        G = motif_gold.to_networkx()

        assert isinstance(G, nx.DiGraph)
        assert set(G.edges()) == {("X", "A"), ("X", "D"), ("A", "B"), ("B", "C")}
        assert G.nodes["X"]["is_regulator"]
        assert not G.nodes["D"]["is_regulator"]
        assert G.number_of_nodes() == motif_gold.n_genes
