"""Reporters for architecture check results.

PlainTextReporter and JSONReporter use stdlib only;
ConsoleReporter renders with rich.
"""

from archrule.application.reporters._base import BaseReporter
from archrule.application.reporters.console import ConsoleConfig, ConsoleReporter
from archrule.application.reporters.json_reporter import JSONReporter
from archrule.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
