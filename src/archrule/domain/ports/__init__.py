"""Domain ports (interfaces/protocols)."""

from archrule.domain.ports.reporter import ReporterProtocol
from archrule.domain.ports.rule import RuleProtocol
from archrule.domain.ports.source_parser import SourceParserPort

__all__ = [
    "SourceParserPort",
    "RuleProtocol",
    "ReporterProtocol",
]
