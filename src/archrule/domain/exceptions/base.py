"""Root of the archrule exception hierarchy."""

from __future__ import annotations


class ArchRuleError(Exception):
    """Base for every error archrule raises on purpose.

    Catch this to separate tool failures from unexpected crashes.
    """
