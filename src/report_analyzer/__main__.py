"""Package entry point.

Preferred invocation is via the installed console script:

    report-analyzer ...

For convenience we also support:

    python -m report_analyzer ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m report_analyzer`."""

    app()


if __name__ == "__main__":
    main()
