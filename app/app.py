"""Streamlit web UI for RecruiterAI."""

import sys
import time
from pathlib import Path

# Add the package sources to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

# Load environment variables from .env.local
from dotenv import load_dotenv  # noqa: E402

load_dotenv(project_root / ".env.local")

import streamlit as st  # noqa: E402
from components.job_input import render_job_input  # noqa: E402
from components.result_display import render_result  # noqa: E402
from components.resume_input import clear_uploader, render_resume_input  # noqa: E402
from utils.styles import apply_custom_styles  # noqa: E402

from recruiter_ai.config import get_settings  # noqa: E402
from recruiter_ai.models.state import Phase, ResultsState  # noqa: E402
from recruiter_ai.output.error_details import ErrorDetails, describe_error  # noqa: E402
from recruiter_ai.processors.analyzer import create_analyzer  # noqa: E402
from recruiter_ai.utils.logging import setup_logging  # noqa: E402
from recruiter_ai.wizard.machine import (  # noqa: E402
    MISSING_JOB_DESCRIPTION_ERROR,
    MISSING_RESUME_ERROR,
    Wizard,
)

# Ordered wizard steps for the navbar indicator
WIZARD_STEPS = [
    (Phase.INPUT, "1. Input Details"),
    (Phase.ANALYZING, "2. Analysis"),
    (Phase.RESULTS, "3. Results"),
]

# Widget keys owned by the input components
INPUT_WIDGET_KEYS = (
    "job_mode_radio",
    "job_text_area",
    "job_url_input",
    "use_sample_job_checkbox",
)


def format_elapsed_time(seconds: float) -> str:
    """Format elapsed time in a human-readable way."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def render_step_indicator(phase: Phase) -> str:
    """Render the wizard steps as HTML, highlighting the current phase."""
    current = [step for step, _ in WIZARD_STEPS].index(phase)
    items = []
    for index, (_, label) in enumerate(WIZARD_STEPS):
        if index < current:
            css_class = "step done"
        elif index == current:
            css_class = "step active"
        else:
            css_class = "step"
        items.append(f'<span class="{css_class}">{label}</span>')
    return f'<div class="step-indicator">{"".join(items)}</div>'


def render_error_details(error_info: ErrorDetails, elapsed_time: float | None = None):
    """Render detailed error information in Streamlit."""
    st.error(f"**{error_info['title']}**")

    # Show elapsed time if available
    if elapsed_time is not None:
        st.markdown(f"*Failed after {format_elapsed_time(elapsed_time)}*")

    # Main explanation
    st.markdown(f"**What happened:** {error_info['explanation']}")
    st.markdown(f"**Likely cause:** {error_info['cause']}")

    # Solutions
    st.markdown("**How to fix it:**")
    for solution in error_info["solution"]:
        st.markdown(f"- {solution}")

    # Technical details in expander
    with st.expander("Technical Details", expanded=False):
        st.code(error_info["technical"], language=None)


# Page configuration
st.set_page_config(
    page_title="RecruiterAI",
    page_icon=":briefcase:",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_custom_styles()


def get_wizard() -> Wizard:
    """Return the session's wizard, creating it on first run."""
    if "wizard" not in st.session_state:
        settings = get_settings()
        st.session_state.wizard = Wizard(max_document_bytes=settings.max_document_bytes)
    return st.session_state.wizard


def reset_wizard() -> None:
    """Start over with empty inputs."""
    get_wizard().reset()
    for key in INPUT_WIDGET_KEYS:
        st.session_state.pop(key, None)
    clear_uploader()
    st.session_state.failed_after = None
    st.rerun()


def main():
    """Main Streamlit application."""
    settings = get_settings()
    setup_logging(settings.log_level)
    wizard = get_wizard()

    # Initialize session state for two-phase processing
    if "process_start_time" not in st.session_state:
        st.session_state.process_start_time = None
    if "failed_after" not in st.session_state:
        st.session_state.failed_after = None

    # Sidebar configuration
    with st.sidebar:
        st.title("AI Recruiter")

        # Only show API key input if not in environment
        if settings.google_api_key:
            st.success("Google API key loaded from .env.local")
            api_key = None  # Will use env key
        else:
            api_key = st.text_input(
                "Google API Key",
                type="password",
                help="Enter your Gemini API key (or set GOOGLE_API_KEY in .env.local)",
                disabled=wizard.phase == Phase.ANALYZING,
            )

        st.caption(f"**Model:** {settings.model}")
        st.caption(
            "Your resume PDF and the job description are reviewed together in a "
            "single request. The AI recruiter answers with a match score, missing "
            "keywords, a cultural fit read and concrete rewrites."
        )

        st.divider()

        # LangSmith tracing status
        if settings.langsmith_enabled:
            st.success(f"LangSmith tracing: **{settings.langsmith_project}**")
            st.markdown(f"[View traces]({settings.langsmith_dashboard_url})")

    # Main content - Header
    st.title("RecruiterAI")
    st.markdown("See your application through a senior recruiter's eyes.")
    st.markdown(render_step_indicator(wizard.phase), unsafe_allow_html=True)

    state = wizard.state
    if isinstance(state, ResultsState):
        render_result(state.result, on_reset=reset_wizard)
        return

    analyzing = wizard.phase == Phase.ANALYZING

    # Input columns
    col1, col2 = st.columns(2)

    with col1:
        render_resume_input(wizard, disabled=analyzing)

    with col2:
        render_job_input(wizard, disabled=analyzing)

    st.divider()

    # Inline error from the last submit or analysis
    error = getattr(wizard.state, "error", None)
    if error:
        if error in (MISSING_RESUME_ERROR, MISSING_JOB_DESCRIPTION_ERROR):
            st.error(error)
        else:
            render_error_details(
                describe_error(error, settings.model), st.session_state.failed_after
            )

    _, col_btn2, _ = st.columns([1, 1, 1])
    with col_btn2:
        # Enabled only when both a resume and a job description are present
        analyze_button = st.button(
            "Analyze My Fit",
            type="primary",
            use_container_width=True,
            disabled=analyzing or not wizard.can_submit,
        )

    # PHASE 1: Button clicked - move to ANALYZING, start timer, rerun
    if analyze_button and wizard.phase == Phase.INPUT:
        if wizard.begin_analysis() is not None:
            st.session_state.process_start_time = time.time()
            st.session_state.failed_after = None
            st.session_state.api_key_override = api_key or None
        st.rerun()

    # PHASE 2: Analyzing - inputs are frozen, do the actual call
    if analyzing:
        start_time = st.session_state.process_start_time or time.time()

        with st.status("Reviewing your application...", expanded=True) as status:
            st.write("The AI recruiter is reading your resume against the role.")
            analyzer = create_analyzer(
                settings, api_key=st.session_state.get("api_key_override")
            )
            new_state = wizard.run(analyzer)
            elapsed = time.time() - start_time

            if isinstance(new_state, ResultsState):
                status.update(
                    label=f"Analysis complete in {format_elapsed_time(elapsed)}",
                    state="complete",
                )
            else:
                st.session_state.failed_after = elapsed
                status.update(
                    label=f"Analysis failed after {format_elapsed_time(elapsed)}",
                    state="error",
                )

        # Reset processing state and show the outcome
        st.session_state.process_start_time = None
        st.rerun()


if __name__ == "__main__":
    main()
