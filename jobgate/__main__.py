"""Entry point for `python -m jobgate`.

Usage:
    python -m jobgate plan job.json
"""

from __future__ import annotations

from jobgate.cli import cli

cli(prog_name="jobgate")
