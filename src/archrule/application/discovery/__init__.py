"""Discovery: which files to analyze and which belong to the use-case layer."""

from archrule.application.discovery.layers import is_use_case_file, is_use_case_path
from archrule.application.discovery.sources import discover_sources, read_source

__all__ = [
    "discover_sources",
    "is_use_case_file",
    "is_use_case_path",
    "read_source",
]
