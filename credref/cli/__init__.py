"""credref command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``credref`` script).
"""

from credref.cli.main import cli

__all__ = ["cli"]
