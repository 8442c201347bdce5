"""SQL text generation."""

from .builders import format_identifier, format_literal, needs_quoting
from .serializer import SqlSerializer, to_insert_sql

__all__ = ["SqlSerializer", "format_identifier", "format_literal", "needs_quoting", "to_insert_sql"]
