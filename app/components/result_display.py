"""Result display component for Streamlit UI."""

import html
import json
from collections.abc import Callable

import streamlit as st
from utils.styles import BAND_COLORS

from recruiter_ai.models.analysis import AnalysisResult, Improvement
from recruiter_ai.output.report import (
    KEYWORD_COVERAGE_MESSAGE,
    format_analysis_report,
    score_band,
)


def _render_score_card(result: AnalysisResult) -> None:
    """Render the match score coloured by its band."""
    band = score_band(result.match_score)
    color = BAND_COLORS[band.value]

    st.markdown(
        f'<div class="score-card" style="--band-color: {color};">'
        f'<div class="score-value">{result.match_score}%</div>'
        f'<div class="score-label">{band.label}</div>'
        f"</div>",
        unsafe_allow_html=True,
    )


def _render_missing_keywords(keywords: list[str]) -> None:
    st.markdown("#### Missing Keywords")
    if not keywords:
        st.success(KEYWORD_COVERAGE_MESSAGE)
        return

    chips = "".join(
        f'<span class="keyword-chip">{html.escape(keyword)}</span>' for keyword in keywords
    )
    st.markdown(chips, unsafe_allow_html=True)


def _render_improvement(index: int, improvement: Improvement) -> None:
    """Render one improvement card with a copyable rewrite."""
    with st.container(border=True):
        st.markdown(f"**{index}. {improvement.section}**")

        st.caption("Current Weakness")
        st.markdown(
            f'<div class="weakness-quote">"{html.escape(improvement.original_concept)}"</div>',
            unsafe_allow_html=True,
        )

        st.caption("Recommended (click the copy icon to copy)")
        st.code(improvement.improved_rewrite, language=None, wrap_lines=True)

        st.caption("Recruiter Insight")
        st.markdown(improvement.why_it_works)


def render_result(result: AnalysisResult, on_reset: Callable[[], None] | None = None) -> None:
    """Render a completed analysis.

    Args:
        result: The validated analysis.
        on_reset: Called when the user clicks "Analyze Another Role".
    """
    col_score, col_summary = st.columns([1, 2])

    with col_score:
        _render_score_card(result)

    with col_summary:
        st.markdown("#### Summary")
        st.markdown(result.summary)
        _render_missing_keywords(result.missing_keywords)

    st.markdown("#### Cultural Fit")
    st.markdown(
        f'<div class="culture-box">{html.escape(result.cultural_fit_analysis)}</div>',
        unsafe_allow_html=True,
    )

    st.divider()

    count = len(result.improvements)
    st.markdown(f"#### Suggested Improvements ({count} high-impact tweaks found)")
    if not result.improvements:
        st.info("No rewrites suggested for this role.")
    for index, improvement in enumerate(result.improvements, start=1):
        _render_improvement(index, improvement)

    st.divider()

    # Download buttons
    st.write("**Download Options**")
    col1, col2, col3 = st.columns(3)

    with col1:
        st.download_button(
            label="Download Report",
            data=format_analysis_report(result),
            file_name="fit_analysis.md",
            mime="text/markdown",
            use_container_width=True,
        )

    with col2:
        st.download_button(
            label="Download JSON",
            data=json.dumps(result.model_dump(by_alias=True), indent=2),
            file_name="fit_analysis.json",
            mime="application/json",
            use_container_width=True,
        )

    with col3:
        if st.button(
            "Analyze Another Role",
            type="primary",
            use_container_width=True,
            key="reset_button",
        ):
            if on_reset is not None:
                on_reset()
