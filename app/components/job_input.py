"""Job description input component for Streamlit UI."""

import streamlit as st

from recruiter_ai.wizard.machine import Wizard

SAMPLE_JOB = """# Senior Backend Engineer

**Company:** Northwind Logistics
**Location:** Remote (EU time zones)
**Type:** Full-time

## About the Role
We're hiring a Senior Backend Engineer to scale the platform that routes
thousands of shipments a day. You'll own services end to end, from design
to production.

## Requirements

### Required
- 5+ years building backend services in Python or Go
- Production experience with Kubernetes and Docker
- Strong PostgreSQL and data modelling skills
- Experience with event-driven systems (Kafka, RabbitMQ or similar)
- CI/CD pipelines and infrastructure as code (Terraform)
- Clear written communication in a distributed team

### Nice to Have
- Observability tooling (Prometheus, Grafana, OpenTelemetry)
- Experience mentoring engineers
- Logistics or supply-chain domain knowledge

## Responsibilities
- Design and operate reliable, well-tested services
- Lead technical design reviews
- Improve deployment and on-call practices
- Partner with product to shape the roadmap

## Benefits
- Competitive salary and equity
- Remote-first culture with yearly offsites
- Learning budget
"""

JOB_MODE_LABELS = {"text": "Paste Text", "url": "Job Link"}

URL_MODE_NOTE = (
    "Note: For the most accurate analysis, we recommend pasting the text directly, "
    "as some job boards (like LinkedIn) block automated readers."
)


def on_sample_job_change():
    """Handle sample job checkbox change."""
    if st.session_state.use_sample_job_checkbox:
        st.session_state.job_text_area = SAMPLE_JOB
    else:
        st.session_state.job_text_area = ""


def render_job_input(wizard: Wizard, disabled: bool = False) -> None:
    """Render the job description input and sync it into the wizard.

    Both the pasted text and the URL are kept while switching modes; only the
    active one is sent for analysis.

    Args:
        wizard: Wizard holding the current input state.
        disabled: Render read-only (while an analysis is running).
    """
    st.subheader("Job Description")

    job_description = wizard.state.job_description

    # Seed widget state from the wizard (e.g. after a failed analysis)
    if "job_mode_radio" not in st.session_state:
        st.session_state.job_mode_radio = job_description.mode
    if "job_text_area" not in st.session_state:
        st.session_state.job_text_area = job_description.text
    if "job_url_input" not in st.session_state:
        st.session_state.job_url_input = job_description.url

    mode = st.radio(
        "Input method",
        options=list(JOB_MODE_LABELS),
        format_func=JOB_MODE_LABELS.get,
        horizontal=True,
        key="job_mode_radio",
        disabled=disabled,
        label_visibility="collapsed",
    )

    if mode == "url":
        st.text_input(
            "Job posting URL",
            placeholder="https://company.com/careers/senior-engineer",
            key="job_url_input",
            disabled=disabled,
        )
        st.caption(URL_MODE_NOTE)
    else:
        st.checkbox(
            "Use sample job posting",
            key="use_sample_job_checkbox",
            on_change=on_sample_job_change,
            disabled=disabled,
        )
        job_text = st.text_area(
            "Paste the job description here",
            placeholder="Paste the job description here...",
            height=350,
            key="job_text_area",
            disabled=disabled,
        )
        if job_text:
            word_count = len(job_text.split())
            st.caption(f"{word_count} words")

    if disabled:
        return

    wizard.set_job_mode(mode)
    wizard.set_job_text(st.session_state.job_text_area)
    wizard.set_job_url(st.session_state.job_url_input)
