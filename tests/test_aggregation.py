import unittest

from mcda.aggregation import compute_final_scores, rank_scores
from mcda.core import FinalScore


class TestAggregation(unittest.TestCase):
    def test_weighted_sum(self) -> None:
        scores = compute_final_scores(
            ["A", "B"],
            ["Cost", "Quality"],
            [0.75, 0.25],
            {"A": {"Cost": 80.0, "Quality": 100.0}, "B": {"Cost": 40.0, "Quality": 0.0}},
        )
        self.assertEqual([item.option_id for item in scores], ["A", "B"])
        self.assertAlmostEqual(scores[0].score, 85.0, places=9)
        self.assertAlmostEqual(scores[1].score, 30.0, places=9)

    def test_ties_keep_option_order(self) -> None:
        utilities = {"A": {"C1": 100.0, "C2": 0.0}, "B": {"C1": 0.0, "C2": 100.0}}

        scores = compute_final_scores(["A", "B"], ["C1", "C2"], [0.5, 0.5], utilities)
        self.assertEqual([item.score for item in scores], [50.0, 50.0])
        self.assertEqual([item.option_id for item in rank_scores(scores)], ["A", "B"])

        scores = compute_final_scores(["B", "A"], ["C1", "C2"], [0.5, 0.5], utilities)
        self.assertEqual([item.option_id for item in rank_scores(scores)], ["B", "A"])

    def test_missing_entries_count_as_zero(self) -> None:
        scores = compute_final_scores(
            ["A", "B"],
            ["C1", "C2"],
            [0.6],
            {"A": {"C1": 50.0, "C2": 100.0}},
        )
        self.assertAlmostEqual(scores[0].score, 30.0, places=9)
        self.assertEqual(scores[1].score, 0.0)

    def test_empty_inputs(self) -> None:
        self.assertEqual(compute_final_scores([], ["C1"], [1.0], {}), [])
        self.assertEqual(compute_final_scores(["A"], [], [], {}), [FinalScore("A", 0.0)])

    def test_rank_scores_descending(self) -> None:
        ranked = rank_scores([FinalScore("A", 10.0), FinalScore("B", 30.0), FinalScore("C", 20.0)])
        self.assertEqual([item.option_id for item in ranked], ["B", "C", "A"])
