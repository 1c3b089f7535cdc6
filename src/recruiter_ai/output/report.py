"""Fit analysis report formatting."""

from enum import Enum
from pathlib import Path

from recruiter_ai.models.analysis import AnalysisResult

STRONG_MATCH_THRESHOLD = 70
MODERATE_MATCH_THRESHOLD = 40

KEYWORD_COVERAGE_MESSAGE = "Great keyword coverage!"


class ScoreBand(str, Enum):
    """Match score tier."""

    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"

    @property
    def label(self) -> str:
        return _BAND_LABELS[self]


_BAND_LABELS = {
    ScoreBand.WEAK: "Low Match",
    ScoreBand.MODERATE: "Potential Match",
    ScoreBand.STRONG: "Strong Match",
}


def score_band(score: int) -> ScoreBand:
    """Band a 0-100 match score: below 40 weak, 40-69 moderate, 70+ strong."""
    if score >= STRONG_MATCH_THRESHOLD:
        return ScoreBand.STRONG
    if score >= MODERATE_MATCH_THRESHOLD:
        return ScoreBand.MODERATE
    return ScoreBand.WEAK


def save_markdown(content: str, output_path: str | Path) -> Path:
    """Save content to a markdown file.

    Args:
        content: Markdown content to save.
        output_path: Path to save the file.

    Returns:
        Path to the saved file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def format_analysis_report(result: AnalysisResult) -> str:
    """Format an analysis as a Markdown report.

    Args:
        result: Validated analysis result.

    Returns:
        Markdown text.
    """
    band = score_band(result.match_score)
    output = []

    output.append(f"## Analysis Report (Score: {result.match_score}% - {band.label})")
    output.append("")
    output.append(result.summary)
    output.append("")

    output.append("### Cultural Fit")
    output.append(result.cultural_fit_analysis)
    output.append("")

    output.append("### Missing Keywords")
    if result.missing_keywords:
        for keyword in result.missing_keywords:
            output.append(f"- {keyword}")
    else:
        output.append(KEYWORD_COVERAGE_MESSAGE)
    output.append("")

    output.append(f"### Suggested Improvements ({len(result.improvements)} high-impact tweaks found)")
    for improvement in result.improvements:
        output.append("")
        output.append(f"#### {improvement.section}")
        output.append(f'- **Current Weakness:** "{improvement.original_concept}"')
        output.append(f"- **Recommended:** {improvement.improved_rewrite}")
        output.append(f"- **Recruiter Insight:** {improvement.why_it_works}")

    return "\n".join(output)
