"""CLI entry point for RecruiterAI."""

import json
import time
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv

# Load environment variables from .env.local
# Path: main.py -> recruiter_ai/ -> src/ -> project root
load_dotenv(Path(__file__).parent.parent.parent / ".env.local")

import typer  # noqa: E402
from rich.console import Console  # noqa: E402
from rich.markdown import Markdown  # noqa: E402
from rich.panel import Panel  # noqa: E402

from recruiter_ai.config import get_settings  # noqa: E402
from recruiter_ai.exceptions import DocumentValidationError  # noqa: E402
from recruiter_ai.intake.document import load_document_from_path  # noqa: E402
from recruiter_ai.models.state import ResultsState  # noqa: E402
from recruiter_ai.output.error_details import describe_error  # noqa: E402
from recruiter_ai.output.report import (  # noqa: E402
    format_analysis_report,
    save_markdown,
    score_band,
)
from recruiter_ai.processors.analyzer import create_analyzer  # noqa: E402
from recruiter_ai.utils.logging import setup_logging  # noqa: E402
from recruiter_ai.wizard.machine import Wizard  # noqa: E402

BAND_COLORS = {"strong": "green", "moderate": "yellow", "weak": "red"}


def format_time(seconds: float) -> str:
    """Format seconds into human-readable time."""
    if seconds < 60:
        return f"{seconds:.1f}s"
    minutes = int(seconds // 60)
    secs = seconds % 60
    return f"{minutes}m {secs:.0f}s"


app = typer.Typer(
    name="recruiter-ai",
    help="RecruiterAI - AI-powered resume fit analysis for job applications",
    add_completion=False,
)
console = Console()


def read_file(path: Path) -> str:
    """Read file content as text."""
    if not path.exists():
        console.print(f"[red]Error:[/red] File not found: {path}")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


@app.command()
def analyze(
    resume: Annotated[Path, typer.Argument(help="Path to your resume (PDF, max 5MB)")],
    job: Annotated[
        Path | None,
        typer.Option("--job", "-j", help="Path to a job description text file"),
    ] = None,
    job_text: Annotated[
        str | None,
        typer.Option("--job-text", "-t", help="Job description text"),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option(
            "--url",
            "-u",
            help="Job posting URL (passed to the model as a hint, not fetched)",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Save the report as Markdown"),
    ] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the raw analysis JSON instead of the report")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show detailed progress")
    ] = False,
) -> None:
    """Analyze how well your resume fits a job description."""
    settings = get_settings()
    setup_logging("DEBUG" if verbose else settings.log_level)

    sources = [value for value in (job, job_text, url) if value is not None]
    if len(sources) != 1:
        console.print("[red]Error:[/red] Provide exactly one of --job, --job-text or --url")
        raise typer.Exit(1)

    if not as_json:
        console.print(
            Panel.fit(
                "[bold blue]RecruiterAI[/bold blue] - Analyzing your fit",
                border_style="blue",
            )
        )

    wizard = Wizard(max_document_bytes=settings.max_document_bytes)

    try:
        document = load_document_from_path(resume, max_bytes=settings.max_document_bytes)
    except DocumentValidationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from e
    wizard.attach_document(document)

    if url is not None:
        wizard.set_job_mode("url")
        wizard.set_job_url(url)
    else:
        wizard.set_job_text(read_file(job) if job is not None else job_text or "")

    if verbose:
        console.print(f"[dim]Resume:[/dim] {resume} ({document.size} bytes)")
        console.print(f"[dim]Job description:[/dim] {wizard.state.job_description.mode}")
        console.print(f"[dim]Model:[/dim] {settings.model}")
        console.print()

    analyzer = create_analyzer(settings)
    start_time = time.time()
    with console.status("Reviewing application...", spinner="dots"):
        state = wizard.submit(analyzer)
    elapsed = time.time() - start_time

    if not isinstance(state, ResultsState):
        console.print(f"[red]Error:[/red] {state.error}")
        details = describe_error(state.error or "", settings.model)
        console.print(f"[bold]{details['title']}:[/bold] {details['cause']}")
        for step in details["solution"]:
            console.print(f"  - {step}")
        raise typer.Exit(1)

    result = state.result

    if as_json:
        console.print_json(json.dumps(result.model_dump(by_alias=True)))
    else:
        band = score_band(result.match_score)
        color = BAND_COLORS[band.value]
        console.print(
            f"\n[bold]Match Score:[/bold] [{color}]{result.match_score}% ({band.label})[/{color}]"
        )
        console.print(f"[dim]Analyzed in {format_time(elapsed)}[/dim]\n")
        report = format_analysis_report(result)
        console.print(Panel(Markdown(report), title="Analysis Report", border_style="blue"))

    if output is not None:
        save_markdown(format_analysis_report(result), output)
        console.print(f"\n[green]Report saved to:[/green] {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from recruiter_ai import __version__

    console.print(f"RecruiterAI v{__version__}")


if __name__ == "__main__":
    app()
