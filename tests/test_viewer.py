"""
Tests for the result viewer helpers (requires the viewer extra)
"""

import pytest

pytest.importorskip("streamlit")
pytest.importorskip("plotly")

from tech_screen_tagging.domain.entities import BatchResult, ExampleResult  # noqa: E402
from tech_screen_tagging.reporting import save_results  # noqa: E402
from tech_screen_tagging.scoring.comparator import compare_labels  # noqa: E402
from tech_screen_tagging.use_cases.evaluation import aggregate_results  # noqa: E402
from tech_screen_tagging.viewer import _find_result_pairs, _load_data  # noqa: E402


def _save(output_dir, run_id):
    results = [
        ExampleResult(
            identifier="a",
            expected_labels=["Go"],
            actual_labels=["Go"],
            comparison=compare_labels(["Go"], ["Go"]),
        )
    ]
    batch = BatchResult(results=results, summary=aggregate_results(results), run_id=run_id)
    return save_results(batch, output_dir)


class TestFindResultPairs:
    def test_newest_run_first(self, tmp_path):
        _save(tmp_path, "20250101_000000")
        _save(tmp_path, "20250102_000000")

        pairs = _find_result_pairs(tmp_path)

        assert [p["run_id"] for p in pairs] == ["20250102_000000", "20250101_000000"]
        assert pairs[0]["summary_path"] is not None

    def test_missing_summary(self, tmp_path):
        _, summary_path = _save(tmp_path, "run")
        summary_path.unlink()

        pairs = _find_result_pairs(tmp_path)

        assert pairs[0]["summary_path"] is None
        raw_df, summary_df = _load_data(pairs[0])
        assert summary_df is None
        assert list(raw_df["identifier"]) == ["a"]
