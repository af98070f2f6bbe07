"""Infrastructure layer: AST analysis, parsing and configuration I/O."""
