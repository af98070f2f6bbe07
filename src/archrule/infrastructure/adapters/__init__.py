"""Infrastructure adapters."""

from archrule.infrastructure.adapters.ast_parser import ASTSourceParser

__all__ = ["ASTSourceParser"]
