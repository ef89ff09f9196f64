"""HTML parsing."""

from readit_core.parsing.document import parse_document

__all__ = ["parse_document"]
