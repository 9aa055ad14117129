"""
Tests for label set comparison (comparator.py)

Verifies:
- Case-insensitive, order-independent set comparison
- Defined-as-zero rules for empty inputs
- The extra-tag pass threshold
"""

import pytest

from tech_screen_tagging.scoring.comparator import compare_labels, normalize_labels


class TestNormalizeLabels:
    def test_lowercases_and_dedupes_in_order(self):
        assert normalize_labels(["Git", "python", "GIT", "Python"]) == ["git", "python"]

    def test_trims_surrounding_whitespace(self):
        assert normalize_labels([" Python", "python ", "Node.js"]) == ["python", "node.js"]

    def test_empty(self):
        assert normalize_labels([]) == []


class TestCompareLabels:
    def test_case_insensitive_match(self):
        result = compare_labels(["Git"], ["git"])
        assert result.matches == ("git",)
        assert result.missing == ()
        assert result.extra == ()
        assert result.precision == 1.0
        assert result.recall == 1.0
        assert result.f1 == 1.0
        assert result.passed is True

    def test_empty_predicted(self):
        result = compare_labels(["Agile", "Git"], [])
        assert result.precision == 0.0
        assert result.recall == 0.0
        assert result.f1 == 0.0
        assert result.missing == ("agile", "git")
        assert result.passed is False

    def test_both_empty(self):
        result = compare_labels([], [])
        assert result.precision == 0.0
        assert result.recall == 0.0
        assert result.f1 == 0.0
        assert result.matches == ()
        # Nothing missing and no extras
        assert result.passed is True

    def test_empty_expected_with_predictions(self):
        result = compare_labels([], ["Python"])
        assert result.precision == 0.0
        assert result.recall == 0.0
        assert result.extra == ("python",)

    def test_partial_overlap(self):
        result = compare_labels(["Python", "Go", "Docker"], ["python", "Go", "Kubernetes"])
        assert set(result.matches) == {"python", "go"}
        assert result.extra == ("kubernetes",)
        assert result.missing == ("docker",)
        assert result.precision == pytest.approx(2 / 3)
        assert result.recall == pytest.approx(2 / 3)
        assert result.f1 == pytest.approx(2 / 3)
        assert result.passed is False

    def test_order_independent(self):
        a = compare_labels(["A", "B", "C"], ["c", "a"])
        b = compare_labels(["C", "B", "A"], ["a", "c"])
        assert set(a.matches) == set(b.matches)
        assert a.precision == b.precision
        assert a.recall == b.recall

    def test_duplicates_do_not_inflate_counts(self):
        result = compare_labels(["Python"], ["Python", "python", "PYTHON"])
        assert result.matches == ("python",)
        assert result.precision == 1.0

    def test_f1_zero_when_no_overlap(self):
        result = compare_labels(["Java"], ["Rust"])
        assert result.precision == 0.0
        assert result.recall == 0.0
        assert result.f1 == 0.0

    def test_metrics_in_unit_interval(self):
        cases = [
            ([], []),
            (["a"], []),
            ([], ["a"]),
            (["a", "b"], ["b", "c", "d"]),
            (["a", "A", "b"], ["a", "a"]),
        ]
        for expected, actual in cases:
            result = compare_labels(expected, actual)
            for value in (result.precision, result.recall, result.f1):
                assert 0.0 <= value <= 1.0

    def test_result_is_immutable(self):
        result = compare_labels(["a"], ["a"])
        with pytest.raises(AttributeError):
            result.precision = 0.5


class TestPassThreshold:
    def _expected(self):
        return ["python"]

    def test_four_extras_pass(self):
        result = compare_labels(self._expected(), ["python", "a", "b", "c", "d"])
        assert len(result.extra) == 4
        assert result.passed is True

    def test_five_extras_fail(self):
        result = compare_labels(self._expected(), ["python", "a", "b", "c", "d", "e"])
        assert len(result.extra) == 5
        assert result.passed is False

    def test_custom_threshold(self):
        result = compare_labels(self._expected(), ["python", "a"], extra_threshold=1)
        assert result.passed is False

    def test_missing_label_fails_regardless_of_extras(self):
        result = compare_labels(["python", "go"], ["python"])
        assert result.extra == ()
        assert result.passed is False
