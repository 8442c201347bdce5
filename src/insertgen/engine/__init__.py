"""SQL dialect descriptors."""

from .dialects import ANSI, DIALECTS, Casing, DialectSpec, dialect_from_sqlalchemy, get_dialect

__all__ = ["ANSI", "DIALECTS", "Casing", "DialectSpec", "dialect_from_sqlalchemy", "get_dialect"]
