"""Tests for rank accumulation of PR and ROC curves."""

import numpy as np
import pytest

from grnscore.core.network import GoldStandard
from grnscore.exceptions import DegenerateInputError
from grnscore.stats.curves import Curve, compute_curves

from conftest import edges_to_predictions, universe_pairs


class TestDegenerateGoldStandard:
    """A gold standard covering the whole universe has no negatives."""

    def test_no_negatives(self):
        """{A -> B, A -> C}: 2 possible edges, both positive."""
        gold = GoldStandard.from_records([("A", "B"), ("A", "C")])
        preds = edges_to_predictions(gold, [("A", "B"), ("A", "C")])

        assert gold.n_possible_edges == 2
        with pytest.raises(DegenerateInputError, match="no negatives"):
            compute_curves(gold, preds)


class TestFullRanking:
    """Curves for predictions covering the whole universe."""

    def test_true_positives_first(self, simple_gold):
        preds = edges_to_predictions(simple_gold, [
            ("A", "B"), ("A", "C"), ("E", "F"),
            ("A", "E"), ("A", "F"), ("E", "A"), ("E", "B"), ("E", "C"),
        ])
        curves = compute_curves(simple_gold, preds)

        np.testing.assert_allclose(curves.tp, [1, 2, 3, 3, 3, 3, 3, 3])
        np.testing.assert_allclose(curves.fp, [0, 0, 0, 1, 2, 3, 4, 5])
        np.testing.assert_allclose(curves.recall[:3], [1 / 3, 2 / 3, 1.0])
        np.testing.assert_allclose(curves.precision, [1, 1, 1, 3 / 4, 3 / 5, 3 / 6, 3 / 7, 3 / 8])
        np.testing.assert_allclose(curves.fpr, [0, 0, 0, 0.2, 0.4, 0.6, 0.8, 1.0])
        assert curves.n_extrapolated == 0

    def test_first_two_points_match_recall_precision(self, simple_gold):
        """Two true positives first: PR starts at (1/3, 1), (2/3, 1)."""
        preds = edges_to_predictions(simple_gold, universe_pairs(simple_gold))
        pairs = universe_pairs(simple_gold)
        assert pairs[:2] == [("A", "B"), ("A", "C")]

        curves = compute_curves(simple_gold, preds)

        assert curves.pr.points()[:2] == [
            pytest.approx((1 / 3, 1.0)),
            pytest.approx((2 / 3, 1.0)),
        ]

    def test_roc_y_is_recall(self, simple_gold):
        preds = edges_to_predictions(simple_gold, universe_pairs(simple_gold)[::-1])
        curves = compute_curves(simple_gold, preds)

        np.testing.assert_array_equal(curves.roc.y, curves.pr.x)

    def test_curve_length_is_universe(self, random_gold):
        preds = edges_to_predictions(random_gold, universe_pairs(random_gold)[:50])
        curves = compute_curves(random_gold, preds)

        assert len(curves) == random_gold.n_possible_edges
        assert len(curves.pr) == len(curves.roc) == random_gold.n_possible_edges


class TestIncompleteRanking:
    """Random-fill extrapolation of ranks the predictor did not supply."""

    def test_tail_probability(self, simple_gold):
        """One TP out of 3 submitted; 7 ranks left with 2 positives."""
        preds = edges_to_predictions(simple_gold, [("A", "B")])
        curves = compute_curves(simple_gold, preds)

        p_tp = 2 / 7
        expected_tp = 1 + p_tp * np.arange(1, 8)
        expected_fp = (1 - p_tp) * np.arange(1, 8)

        assert curves.n_predicted == 1
        assert curves.n_extrapolated == 7
        np.testing.assert_allclose(curves.tp[1:], expected_tp)
        np.testing.assert_allclose(curves.fp[1:], expected_fp)

    def test_empty_prediction_is_random(self, simple_gold):
        """With no submitted edges every rank is drawn at the base rate."""
        preds = edges_to_predictions(simple_gold, [])
        curves = compute_curves(simple_gold, preds)

        np.testing.assert_allclose(curves.tp, 3 / 8 * np.arange(1, 9))
        np.testing.assert_allclose(curves.precision, np.full(8, 3 / 8))

    @pytest.mark.parametrize("n_submitted", [0, 1, 17, 200, 999])
    def test_postcondition(self, random_gold, n_submitted):
        rng = np.random.RandomState(n_submitted)
        pairs = universe_pairs(random_gold)
        order = rng.permutation(len(pairs))[:n_submitted]
        preds = edges_to_predictions(random_gold, [pairs[i] for i in order])

        curves = compute_curves(random_gold, preds)

        assert curves.tp[-1] == pytest.approx(random_gold.n_edges, abs=1e-6)
        assert curves.fp[-1] == pytest.approx(random_gold.n_negatives, abs=1e-6)
        assert curves.tp[-1] + curves.fp[-1] == pytest.approx(random_gold.n_possible_edges, abs=1e-6)
        assert curves.recall[-1] == pytest.approx(1.0)
        assert curves.fpr[-1] == pytest.approx(1.0)


class TestMonotonicity:
    """Recall and false positive rate never decrease with rank."""

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_recall_and_fpr_non_decreasing(self, random_gold, seed):
        rng = np.random.RandomState(seed)
        pairs = universe_pairs(random_gold)
        order = rng.permutation(len(pairs))[: len(pairs) // 3]
        curves = compute_curves(random_gold, edges_to_predictions(random_gold, [pairs[i] for i in order]))

        assert np.all(np.diff(curves.recall) >= -1e-12)
        assert np.all(np.diff(curves.fpr) >= -1e-12)


class TestCurve:
    """Tests for the Curve container."""

    def test_shape_mismatch(self):
        with pytest.raises(ValueError, match="same shape"):
            Curve(np.zeros(3), np.zeros(2), name="PR", x_label="recall", y_label="precision")

    def test_to_frame(self, simple_gold):
        curves = compute_curves(simple_gold, edges_to_predictions(simple_gold, [("A", "B")]))
        df = curves.pr.to_frame()

        assert list(df.columns) == ["recall", "precision"]
        assert df.index.name == "rank"
        assert df.index[0] == 1
        assert len(df) == 8
