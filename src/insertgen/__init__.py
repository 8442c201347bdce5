"""Public insertgen API."""

from __future__ import annotations

from .config import SerializerBuilder, SerializerConfig, create_config
from .engine.dialects import ANSI, DIALECTS, Casing, DialectSpec, dialect_from_sqlalchemy, get_dialect
from .sql.serializer import SqlSerializer, to_insert_sql
from .table.schema import Field, Schema, field, schema
from .utils.exceptions import ConfigError, InsertGenError, SchemaError

__version__ = "0.1.0"

__all__ = [
    "ANSI",
    "Casing",
    "ConfigError",
    "DIALECTS",
    "DialectSpec",
    "Field",
    "InsertGenError",
    "Schema",
    "SchemaError",
    "SerializerBuilder",
    "SerializerConfig",
    "SqlSerializer",
    "__version__",
    "create_config",
    "dialect_from_sqlalchemy",
    "field",
    "get_dialect",
    "schema",
    "to_insert_sql",
]
