"""Resume upload component for Streamlit UI."""

import streamlit as st

from recruiter_ai.wizard.machine import Wizard


def _uploader_key() -> str:
    # Bumping the generation replaces the uploader with an empty one
    return f"resume_uploader_{st.session_state.get('uploader_generation', 0)}"


def clear_uploader() -> None:
    """Forget the current upload so the uploader renders empty."""
    st.session_state.uploader_generation = st.session_state.get("uploader_generation", 0) + 1
    st.session_state.last_resume_id = None


def render_resume_input(wizard: Wizard, disabled: bool = False) -> None:
    """Render the resume uploader and sync the selection into the wizard.

    Args:
        wizard: Wizard holding the current input state.
        disabled: Render read-only (while an analysis is running).
    """
    st.subheader("Your Resume")

    max_mb = wizard.max_document_bytes / (1024 * 1024)
    uploaded_file = st.file_uploader(
        f"Upload your resume (PDF, max {max_mb:g}MB)",
        type=["pdf"],
        help="Your resume is sent to the AI recruiter as a PDF. Nothing is stored.",
        key=_uploader_key(),
        disabled=disabled,
    )

    if not disabled:
        if uploaded_file is not None:
            # Only validate each file once per selection
            file_id = f"{uploaded_file.name}_{uploaded_file.size}"
            if st.session_state.get("last_resume_id") != file_id:
                st.session_state.last_resume_id = file_id
                wizard.select_document(
                    uploaded_file.name,
                    uploaded_file.getvalue(),
                    uploaded_file.type,
                )
        elif st.session_state.get("last_resume_id") is not None:
            # File removed from the uploader
            st.session_state.last_resume_id = None
            wizard.clear_document()

    state = wizard.state

    if getattr(state, "document_error", None):
        st.error(state.document_error)

    document = state.document
    if document is None:
        return

    col_name, col_clear = st.columns([4, 1])
    with col_name:
        st.success(f"**{document.filename}** - Ready for analysis")
    with col_clear:
        if st.button("Clear", key="clear_resume", disabled=disabled, use_container_width=True):
            wizard.clear_document()
            clear_uploader()
            st.rerun()
