"""Tests for file readers, writers and text reports."""

import numpy as np
import pytest

from grnscore.exceptions import InputError, ParseError
from grnscore.io.parsers import load_gold_standard, load_prediction, read_records
from grnscore.io.writers import (
    default_prefix,
    format_auc_report,
    format_auc_summary,
    format_curve,
    format_motif_report,
    write_auc_summary,
    write_curve,
)
from grnscore.stats.auc import AreaUnderCurves
from grnscore.stats.curves import Curve
from grnscore.stats.motifs import analyze_errors

from conftest import edges_to_predictions, write_tsv


class TestReadRecords:
    """Tests for read_records()."""

    def test_line_numbers_skip_blank_lines(self, tmp_path):
        path = tmp_path / "gold.tsv"
        path.write_text("A\tB\n\nA\tC\n   \nE\tF\n")

        records = read_records(path)

        assert [r.line_number for r in records] == [1, 3, 5]
        assert records[1].fields == ("A", "C")
        assert records[2].n_columns == 2

    def test_column_counts_preserved(self, tmp_path):
        path = tmp_path / "pred.txt"
        path.write_text("G1\tG2\t0.5\nG1\tG3\n")

        records = read_records(path)

        assert [r.n_columns for r in records] == [3, 2]

    def test_missing_file(self, tmp_path):
        with pytest.raises(InputError, match="not found"):
            read_records(tmp_path / "missing.tsv")

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(InputError, match="not a file"):
            read_records(tmp_path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.tsv"
        path.write_text("")

        assert read_records(path) == []


class TestLoaders:
    """Tests for load_gold_standard() and load_prediction()."""

    def test_load_gold_standard(self, tmp_path):
        path = write_tsv(tmp_path / "gold.tsv", [("G1", "G2", 1), ("G1", "G3", 1), ("G3", "G2", 1)])

        gold = load_gold_standard(path)

        assert gold.n_edges == 3
        assert gold.n_regulators == 2
        assert gold.n_possible_edges == 4

    def test_empty_gold_standard(self, tmp_path):
        path = tmp_path / "gold.tsv"
        path.write_text("\n\n")

        with pytest.raises(ParseError, match="empty"):
            load_gold_standard(path)

    def test_error_names_the_file(self, tmp_path):
        path = write_tsv(tmp_path / "gold.tsv", [("G1", "G2"), ("G1",)])

        with pytest.raises(ParseError) as excinfo:
            load_gold_standard(path)

        assert excinfo.value.line_number == 2
        assert str(path) in str(excinfo.value)

    def test_load_prediction(self, tmp_path):
        gold = load_gold_standard(write_tsv(tmp_path / "gold.tsv", [("G1", "G2"), ("G1", "G3")]))
        path = write_tsv(tmp_path / "pred.txt", [
            ("G1", "G3", 0.9),
            ("G2", "G3", 0.8),
            ("G1", "G2", 0.7),
        ])

        preds = load_prediction(path, gold)

        assert [e.names(gold) for e in preds] == [("G1", "G3"), ("G1", "G2")]
        assert preds.n_dropped == 1

    def test_load_prediction_sorted(self, tmp_path):
        gold = load_gold_standard(write_tsv(tmp_path / "gold.tsv", [("G1", "G2"), ("G1", "G3")]))
        path = write_tsv(tmp_path / "pred.txt", [("G1", "G3", 0.1), ("G1", "G2", 0.7)])

        preds = load_prediction(path, gold, sort_by_score=True)

        assert preds[0].names(gold) == ("G1", "G2")


class TestWriters:
    """Tests for curve files and text reports."""

    def test_default_prefix(self):
        assert default_prefix("results/DREAM4_size10_1.txt") == "DREAM4_size10_1"

    def test_format_curve(self):
        curve = Curve(np.array([0.5, 1.0]), np.array([1.0, 1.0]),
                      name="PR", x_label="recall", y_label="precision")

        assert format_curve(curve) == "0.5\t1.0\n1.0\t1.0\n\n"

    def test_write_curve(self, tmp_path):
        curve = Curve(np.array([0.25, 0.5, 1.0]), np.array([1.0, 0.5, 0.375]),
                      name="PR", x_label="recall", y_label="precision")

        path = write_curve(curve, tmp_path / "out" / "pred_PR.txt")
        lines = path.read_text().split("\n")

        assert lines[:3] == ["0.25\t1.0", "0.5\t0.5", "1.0\t0.375"]
        assert lines[3:] == ["", ""]
        assert list(path.parent.glob("*.tmp")) == []

    def test_auc_summary(self, tmp_path):
        auc = AreaUnderCurves(aupr=0.5, auroc=0.75, aupr_random=0.125)

        assert format_auc_summary(auc) == "AUPR\t0.5\nAUROC\t0.75\nAUPR_random\t0.125\n"
        path = write_auc_summary(auc, tmp_path / "pred_AUC.txt")
        assert path.read_text().splitlines()[0] == "AUPR\t0.5"

    def test_auc_report_respects_requested_metrics(self):
        auc = AreaUnderCurves(aupr=0.5, auroc=0.75, aupr_random=0.125)

        report = format_auc_report(auc, pr=True, roc=False)

        assert "AREA UNDER CURVE" in report
        assert "AUPR:\t0.5" in report
        assert "AUROC" not in report

    def test_motif_report(self, motif_gold):
        preds = edges_to_predictions(motif_gold, [("A", "D"), ("A", "C"), ("A", "B"), ("B", "A")])
        report = format_motif_report(analyze_errors(motif_gold, preds))

        assert "SYSTEMATIC PREDICTION ERRORS" in report
        assert "EXPECTED ERRORS IN RANDOMIZED PREDICTION" in report
        assert "Transitive   \t1\t" in report
        assert "Co-regulation\t0.375\t0.125" in report
