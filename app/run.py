"""Launcher for the RecruiterAI web UI.

Usage:
    python app/run.py [streamlit options]

Extra arguments are passed to ``streamlit run``, e.g. ``--server.port 8502``.
"""

import subprocess
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    """Launch the Streamlit web UI and return its exit code."""
    app_path = Path(__file__).parent / "app.py"
    extra_args = sys.argv[1:] if argv is None else argv
    stop_hint = "⌃C (Control+C)" if sys.platform == "darwin" else "Ctrl+C"
    print(f"Starting RecruiterAI. Press {stop_hint} to stop the server")
    try:
        completed = subprocess.run(
            [sys.executable, "-m", "streamlit", "run", str(app_path), *extra_args],
            check=False,
        )
    except KeyboardInterrupt:
        return 0
    return completed.returncode


if __name__ == "__main__":
    sys.exit(main())
