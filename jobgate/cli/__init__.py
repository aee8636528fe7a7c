"""jobgate command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``jobgate`` script).
"""

from jobgate.cli.main import cli

__all__ = ["cli"]
