"""
tech-screen-tagging Result Viewer

Minimal Streamlit dashboard for runs exported with ``--output-dir``.
Displays the batch summary, per-screen precision / recall / F1, and errored
screens separately from scored ones.

Usage:
    pip install -e ".[viewer]"
    streamlit run src/tech_screen_tagging/viewer.py
    streamlit run src/tech_screen_tagging/viewer.py -- --results-dir results

Requires the package to be installed (e.g. via ``pip install -e .``).
"""

from __future__ import annotations

import argparse
from pathlib import Path

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

# -- Colors --
METRIC_COLORS = {
    "precision": "#1a73e8",
    "recall": "#e8710a",
    "f1": "#34a853",
}

RUN_HINT = "Run an evaluation first:\n```\npython -m tech_screen_tagging.runner --output-dir results\n```"


def _find_result_pairs(results_dir: Path) -> list[dict]:
    """Find matching raw_results / summary CSV pairs in results_dir."""
    pairs = []
    for raw_path in sorted(results_dir.glob("raw_results_*.csv"), reverse=True):
        run_id = raw_path.stem.replace("raw_results_", "")
        summary_path = results_dir / f"summary_{run_id}.csv"
        pairs.append({
            "run_id": run_id,
            "raw_path": raw_path,
            "summary_path": summary_path if summary_path.exists() else None,
        })
    return pairs


def _load_data(pair: dict) -> tuple[pd.DataFrame, pd.DataFrame | None]:
    """Load raw and summary DataFrames from a result pair."""
    raw_df = pd.read_csv(pair["raw_path"])
    summary_df = pd.read_csv(pair["summary_path"]) if pair["summary_path"] else None
    return raw_df, summary_df


def _render_summary(summary_df: pd.DataFrame) -> None:
    """Render headline metrics."""
    st.header("Summary")
    row = summary_df.iloc[0]

    cols = st.columns(4)
    cols[0].metric("Passed", f"{int(row['passed_count'])} / {int(row['total'])}")
    cols[1].metric("Failed", int(row["failed_count"]))
    cols[2].metric("Errored", int(row["error_count"]))
    cols[3].metric("Avg time", f"{row['avg_latency_ms']:.0f}ms")

    cols = st.columns(3)
    cols[0].metric("Avg precision", f"{row['avg_precision']:.3f}")
    cols[1].metric("Avg recall", f"{row['avg_recall']:.3f}")
    cols[2].metric("Avg F1", f"{row['avg_f1']:.3f}")

    st.caption(
        f"Screens {int(row['start_index'])} onward of {int(row['total_available'])} "
        f"(run count: {int(row['run_count']) or 'all'}). Averages exclude errored screens."
    )


def _render_metric_chart(scored_df: pd.DataFrame) -> None:
    """Render grouped precision / recall / F1 bars per screen."""
    st.header("Per-screen Scores")
    if scored_df.empty:
        st.info("No scored screens in this run.")
        return

    fig = go.Figure()
    for metric, color in METRIC_COLORS.items():
        fig.add_trace(go.Bar(
            x=scored_df["identifier"],
            y=scored_df[metric],
            name=metric.upper() if metric == "f1" else metric.capitalize(),
            marker_color=color,
        ))

    fig.update_layout(
        barmode="group",
        xaxis_title="Training screen",
        yaxis_title="Score",
        yaxis_range=[0, 1.05],
        template="plotly_white",
        height=450,
    )
    st.plotly_chart(fig, use_container_width=True)


def _render_tables(scored_df: pd.DataFrame, errored_df: pd.DataFrame) -> None:
    """Render scored and errored screens as separate tables."""
    st.header("Scored Screens")
    display_cols = [
        "identifier", "status", "precision", "recall", "f1",
        "missing", "extra", "latency_ms",
    ]
    st.dataframe(
        scored_df[[c for c in display_cols if c in scored_df.columns]],
        use_container_width=True,
        hide_index=True,
    )

    st.header("Errored Screens")
    if errored_df.empty:
        st.success("No errors in this run.")
        return
    st.dataframe(
        errored_df[["identifier", "error_kind", "error", "latency_ms"]],
        use_container_width=True,
        hide_index=True,
    )


def main() -> None:
    # Parse --results-dir from Streamlit args (after --)
    parser = argparse.ArgumentParser()
    parser.add_argument("--results-dir", default="results")
    args, _ = parser.parse_known_args()

    results_dir = Path(args.results_dir)

    st.set_page_config(page_title="tech-screen-tagging", layout="wide")
    st.title("tech-screen-tagging Results")

    if not results_dir.exists():
        st.error(f"Results directory not found: `{results_dir}`")
        st.info(RUN_HINT)
        return

    pairs = _find_result_pairs(results_dir)
    if not pairs:
        st.warning(f"No result files found in `{results_dir}/`")
        st.info(RUN_HINT)
        return

    # Run selector
    run_ids = [p["run_id"] for p in pairs]
    selected_run_id = st.sidebar.selectbox("Run", run_ids, index=0)
    selected_pair = next(p for p in pairs if p["run_id"] == selected_run_id)

    raw_df, summary_df = _load_data(selected_pair)

    errored_df = raw_df[raw_df["status"] == "ERROR"]
    scored_df = raw_df[raw_df["status"] != "ERROR"]

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Screens**: {len(raw_df)}")
    st.sidebar.markdown(f"**Errored**: {len(errored_df)}")

    if summary_df is None:
        st.warning("Summary CSV not found. Showing raw results only.")
    else:
        _render_summary(summary_df)
    _render_metric_chart(scored_df)
    _render_tables(scored_df, errored_df)


if __name__ == "__main__":
    main()
