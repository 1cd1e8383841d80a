"""Core business logic layer.

Subpackages:
- ingredients: quantity parsing, unit normalization, categories, line parser
- shopping: consolidation, list building and the repository-driven manager
- formatting: fraction pretty-printing, plain text and reminder app export
"""
__all__ = ["ingredients", "shopping", "formatting"]
