"""Allow `python -m archrule`."""

from __future__ import annotations

from archrule.presentation.cli import main

main()
