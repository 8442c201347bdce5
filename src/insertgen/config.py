"""Runtime configuration objects for insertgen."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .engine.dialects import ANSI, Casing, DialectSpec, dialect_from_sqlalchemy, get_dialect
from .utils.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_QUOTE = "'"
DEFAULT_SQL_IDENTIFIER = '""'
DEFAULT_TABLE_NAME = "MyTable"


@dataclass(frozen=True)
class SerializerConfig:
    """Resolved, immutable options for :class:`~insertgen.sql.serializer.SqlSerializer`."""

    schema_name: str = ""
    table_name: str = DEFAULT_TABLE_NAME
    string_quote: str = DEFAULT_QUOTE
    open_id: str = '"'
    close_id: str = '"'
    casing: Casing = Casing.UPPER
    batch_mode: bool = False
    keyword_upper: bool = True


class SerializerBuilder:
    """Collects serializer options and materializes a :class:`SerializerConfig`.

    ``dialect()`` overwrites the identifier delimiters and the casing with the
    dialect's values, so call ``casing()`` or ``sql_quote_identifier()``
    afterwards to override them. When no dialect is given the ANSI descriptor
    is used.

    Example:
        >>> from insertgen import SerializerBuilder
        >>> config = SerializerBuilder().dialect("postgresql").table_name("users").batch(True).build()
        >>> config.batch_mode
        True
    """

    def __init__(self) -> None:
        self._quote = DEFAULT_QUOTE
        self._sql_quote_identifier = DEFAULT_SQL_IDENTIFIER
        self._table_name = DEFAULT_TABLE_NAME
        self._schema_name = ""
        self._casing = Casing.UPPER
        self._batch = False
        self._keyword_upper_case = True
        self._dialect: DialectSpec | None = None

    def dialect(self, dialect: DialectSpec | str | Any) -> SerializerBuilder:
        """Accept a descriptor, a catalogue name, or a SQLAlchemy engine/connection/dialect."""
        if isinstance(dialect, str):
            dialect = get_dialect(dialect)
        elif not isinstance(dialect, DialectSpec):
            dialect = dialect_from_sqlalchemy(dialect)
        self._sql_quote_identifier = dialect.identifier_delimiters
        self._casing = dialect.unquoted_casing
        self._dialect = dialect
        return self

    def casing(self, casing: Casing | str) -> SerializerBuilder:
        self._casing = casing
        return self

    def quote(self, quote: str) -> SerializerBuilder:
        self._quote = quote
        return self

    def sql_quote_identifier(self, sql_quote_identifier: str) -> SerializerBuilder:
        self._sql_quote_identifier = sql_quote_identifier
        return self

    def table_name(self, table_name: str) -> SerializerBuilder:
        self._table_name = table_name
        return self

    def schema_name(self, schema_name: str) -> SerializerBuilder:
        self._schema_name = schema_name
        return self

    def batch(self, batch: bool) -> SerializerBuilder:
        self._batch = batch
        return self

    def keyword_upper_case(self, keyword_upper_case: bool) -> SerializerBuilder:
        self._keyword_upper_case = keyword_upper_case
        return self

    def build(self) -> SerializerConfig:
        """Validate the collected options and return a frozen config.

        Raises:
            ConfigError: If the identifier delimiter string is not one or two
                characters, the string quote is not a single character, or the
                table name is empty
        """
        delimiters = self._sql_quote_identifier
        if not isinstance(delimiters, str) or len(delimiters) not in (1, 2):
            raise ConfigError(
                "Identifier delimiter string must have length 1 or 2",
                context={"sql_quote_identifier": delimiters},
            )
        if not isinstance(self._quote, str) or len(self._quote) != 1:
            raise ConfigError(
                "String quote must be a single character", context={"quote": self._quote}
            )
        if not self._table_name:
            raise ConfigError("Table name is required and cannot be empty")
        casing = _coerce_casing(self._casing)

        dialect = self._dialect if self._dialect is not None else ANSI
        config = SerializerConfig(
            schema_name=self._schema_name or "",
            table_name=self._table_name,
            string_quote=self._quote,
            open_id=delimiters[0],
            close_id=delimiters[-1],
            casing=casing,
            batch_mode=bool(self._batch) and dialect.supports_bulk_insert,
            keyword_upper=bool(self._keyword_upper_case),
        )
        if self._batch and not config.batch_mode:
            logger.debug("Dialect %s has no bulk insert; batch mode disabled", dialect.name)
        logger.debug("Built serializer config: %s", config)
        return config


def _coerce_casing(value: object) -> Casing:
    """Accept a :class:`Casing` or its name/value, case-insensitively."""
    if isinstance(value, Casing):
        return value
    if isinstance(value, str):
        key = value.strip().upper()
        if key in Casing.__members__:
            return Casing[key]
    raise ConfigError(
        f"Invalid casing {value!r}",
        suggestion="Use Casing.UPPER, Casing.LOWER or Casing.UNCHANGED.",
        context={"valid": ", ".join(c.value for c in Casing)},
    )


_OPTION_SETTERS = (
    "dialect",
    "casing",
    "quote",
    "sql_quote_identifier",
    "table_name",
    "schema_name",
    "batch",
    "keyword_upper_case",
)


def create_config(**options: object) -> SerializerConfig:
    """Convenience helper building a config from keyword options.

    Keys are named after the :class:`SerializerBuilder` setters. ``dialect`` is
    applied first so that explicit ``casing`` / ``sql_quote_identifier``
    options override it regardless of argument order.

    Args:
        **options: Valid keys include:
            - dialect: DialectSpec or catalogue name (default: ANSI)
            - casing: Casing for unquoted identifiers
            - quote: String literal quote character (default: "'")
            - sql_quote_identifier: Identifier delimiters, one or two chars
            - table_name: Target table (default: "MyTable")
            - schema_name: Optional schema qualifier
            - batch: Emit a single multi-row INSERT when supported
            - keyword_upper_case: Upper-case INSERT INTO / VALUES (default: True)

    Returns:
        SerializerConfig instance

    Raises:
        ConfigError: For unknown option names or invalid values
    """
    unknown = sorted(set(options) - set(_OPTION_SETTERS))
    if unknown:
        raise ConfigError(f"Unknown option(s): {', '.join(unknown)}")

    builder = SerializerBuilder()
    for name in _OPTION_SETTERS:
        if name in options:
            getattr(builder, name)(options[name])
    return builder.build()
