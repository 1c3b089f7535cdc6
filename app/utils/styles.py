"""Custom styles for the RecruiterAI Streamlit UI.

Step indicator, score card, keyword chips and improvement cards. Colours
follow the score bands: green for strong, amber for moderate, red for weak.
"""

import streamlit as st

BAND_COLORS = {
    "strong": "#16a34a",
    "moderate": "#d97706",
    "weak": "#dc2626",
}

APP_CSS = """
<style>
    /* Navbar step indicator */
    .step-indicator {
        display: flex;
        justify-content: center;
        gap: 2rem;
        padding: 0.5rem 0 1.5rem 0;
        font-size: 0.95rem;
    }
    .step-indicator .step {
        color: #9ca3af;
    }
    .step-indicator .step.active {
        color: #4f46e5;
        font-weight: 600;
    }
    .step-indicator .step.done {
        color: #16a34a;
    }

    /* Score card */
    .score-card {
        border-radius: 12px;
        padding: 1.5rem;
        text-align: center;
        border: 2px solid var(--band-color);
        margin-bottom: 1rem;
    }
    .score-card .score-value {
        font-size: 3rem;
        font-weight: 700;
        color: var(--band-color);
        line-height: 1.1;
    }
    .score-card .score-label {
        font-size: 1.1rem;
        font-weight: 600;
        color: var(--band-color);
    }

    /* Missing keyword chips */
    .keyword-chip {
        display: inline-block;
        padding: 0.2rem 0.7rem;
        margin: 0.2rem;
        border-radius: 999px;
        background: #fef2f2;
        color: #b91c1c;
        border: 1px solid #fecaca;
        font-size: 0.9rem;
    }

    /* Cultural fit box */
    .culture-box {
        border-left: 4px solid #4f46e5;
        background: #eef2ff;
        padding: 1rem;
        border-radius: 4px;
        color: #312e81;
    }

    /* Current weakness quote */
    .weakness-quote {
        color: #6b7280;
        font-style: italic;
        text-decoration: line-through;
    }

    @media (prefers-color-scheme: dark) {
        .culture-box {
            background: #1e1b4b;
            color: #c7d2fe;
        }
        .keyword-chip {
            background: #450a0a;
            color: #fecaca;
            border-color: #7f1d1d;
        }
    }
</style>
"""


def apply_custom_styles() -> None:
    """Apply the app stylesheet. Call once near the top of the script."""
    st.markdown(APP_CSS, unsafe_allow_html=True)
