"""Entry point for `python -m credref`.

Usage:
    python -m credref entries
    python -m credref resolve https://charts.example.com --type kubernetes.io/basic-auth
"""

from __future__ import annotations

from credref.cli import cli

cli()
