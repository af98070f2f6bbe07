"""AST analyzers for extracting use-case declarations."""

from archrule.infrastructure.analyzers.base import (
    is_void_annotation,
    make_location,
    unparse_node,
)
from archrule.infrastructure.analyzers.context import AnalysisContext
from archrule.infrastructure.analyzers.declaration_walker import DeclarationWalker
from archrule.infrastructure.analyzers.type_signature import (
    camel_words,
    ends_with_word,
    expand_signature,
    signature_identifiers,
    split_identifiers,
)

__all__ = [
    "AnalysisContext",
    "DeclarationWalker",
    "camel_words",
    "ends_with_word",
    "expand_signature",
    "is_void_annotation",
    "make_location",
    "signature_identifiers",
    "split_identifiers",
    "unparse_node",
]
