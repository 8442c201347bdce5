"""Dialect registry and helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy.engine import Connection, Engine

from ..utils.exceptions import ConfigError


class Casing(Enum):
    """Case a SQL engine applies to bare (unquoted) identifiers."""

    UPPER = "upper"
    LOWER = "lower"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class DialectSpec:
    name: str
    identifier_delimiters: str = '""'
    unquoted_casing: Casing = Casing.UPPER
    supports_bulk_insert: bool = True

    @property
    def open_quote(self) -> str:
        return self.identifier_delimiters[0]

    @property
    def close_quote(self) -> str:
        return self.identifier_delimiters[-1]


ANSI = DialectSpec(name="ansi")

DIALECTS: dict[str, DialectSpec] = {
    "ansi": ANSI,
    "postgresql": DialectSpec(name="postgresql", unquoted_casing=Casing.LOWER),
    "postgres": DialectSpec(name="postgresql", unquoted_casing=Casing.LOWER),
    "redshift": DialectSpec(name="redshift", unquoted_casing=Casing.LOWER),
    "mysql": DialectSpec(name="mysql", identifier_delimiters="`", unquoted_casing=Casing.UNCHANGED),
    "mysql+pymysql": DialectSpec(
        name="mysql", identifier_delimiters="`", unquoted_casing=Casing.UNCHANGED
    ),
    "mariadb": DialectSpec(
        name="mariadb", identifier_delimiters="`", unquoted_casing=Casing.UNCHANGED
    ),
    "sqlite": DialectSpec(name="sqlite", unquoted_casing=Casing.UNCHANGED),
    "duckdb": DialectSpec(name="duckdb", unquoted_casing=Casing.UNCHANGED),
    # Multi-row VALUES lists are not accepted by Oracle INSERT
    "oracle": DialectSpec(name="oracle", supports_bulk_insert=False),
    "mssql": DialectSpec(name="mssql", identifier_delimiters="[]", unquoted_casing=Casing.UNCHANGED),
    "sqlserver": DialectSpec(
        name="mssql", identifier_delimiters="[]", unquoted_casing=Casing.UNCHANGED
    ),
    "db2": DialectSpec(name="db2"),
    "h2": DialectSpec(name="h2"),
    "hsqldb": DialectSpec(name="hsqldb"),
    "snowflake": DialectSpec(name="snowflake"),
    "bigquery": DialectSpec(
        name="bigquery", identifier_delimiters="`", unquoted_casing=Casing.UNCHANGED
    ),
    "clickhouse": DialectSpec(
        name="clickhouse", identifier_delimiters="`", unquoted_casing=Casing.UNCHANGED
    ),
}


def get_dialect(name: str) -> DialectSpec:
    try:
        return DIALECTS[name.lower()]
    except KeyError as exc:
        raise ConfigError(
            f"Unknown dialect '{name}'", context={"known": ", ".join(sorted(DIALECTS))}
        ) from exc


def dialect_from_sqlalchemy(obj: Any) -> DialectSpec:
    """Build a :class:`DialectSpec` from a SQLAlchemy engine, connection or dialect.

    Catalogue entries take precedence. Dialects missing from the catalogue are
    described from the SQLAlchemy dialect's own identifier preparer and
    capability flags.

    Args:
        obj: ``sqlalchemy.engine.Engine``, ``Connection`` or ``Dialect``

    Returns:
        The matching dialect descriptor
    """
    if isinstance(obj, (Engine, Connection)):
        sa_dialect = obj.dialect
    else:
        sa_dialect = obj

    name = getattr(sa_dialect, "name", None)
    if not name:
        raise ConfigError(f"Object {obj!r} is not a SQLAlchemy dialect")
    if name.lower() in DIALECTS:
        return DIALECTS[name.lower()]

    preparer = sa_dialect.identifier_preparer
    delimiters = preparer.initial_quote
    if preparer.final_quote != preparer.initial_quote:
        delimiters += preparer.final_quote
    casing = Casing.UPPER if sa_dialect.requires_name_normalize else Casing.UNCHANGED
    return DialectSpec(
        name=name,
        identifier_delimiters=delimiters,
        unquoted_casing=casing,
        supports_bulk_insert=bool(sa_dialect.supports_multivalues_insert),
    )
