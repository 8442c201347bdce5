"""Serialize records into SQL INSERT statements."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from io import StringIO
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..config import SerializerConfig, SerializerBuilder, create_config
from ..utils.exceptions import ConfigError
from .builders import comma_separated, emit_identifier, format_identifier, format_literal

if TYPE_CHECKING:
    from ..table.schema import Schema

logger = logging.getLogger(__name__)

T = TypeVar("T")

INSERT_INTO_UP = "INSERT INTO "
INSERT_INTO_LW = "insert into "
VALUES_UP = "VALUES "
VALUES_LW = "values "
CATALOG_SEPARATOR = "."
# Aligns continuation tuples under the first one, i.e. len("VALUES ").
CONTINUATION = ",\n       ("


class SqlSerializer(Generic[T]):
    """Render records of type ``T`` as INSERT statements.

    In batch mode a run produces one ``INSERT ... VALUES (...),(...)``
    statement; otherwise one statement per record, concatenated with no
    separator and with ``;`` only after the last one.

    Example:
        >>> from insertgen import SqlSerializer, create_config, field, schema
        >>> s = schema(field("id", lambda r: r[0]), field("name", lambda r: r[1]))
        >>> SqlSerializer(create_config(batch=True)).generate([(1, "a"), (2, "b")], s)
        'INSERT INTO "MyTable" ("id", "name")\\nVALUES (1, \\'a\\'),\\n       (2, \\'b\\');'
    """

    def __init__(self, config: SerializerConfig | None = None):
        self.config = config if config is not None else SerializerConfig()

    @classmethod
    def from_builder(cls, builder: SerializerBuilder) -> SqlSerializer[T]:
        return cls(builder.build())

    def apply(self, record: T | None, schema: Schema[T], row_index: int) -> str:
        """Render one row.

        Row 0, and every row outside batch mode, gets the full ``INSERT INTO``
        header; later batch rows get a continuation tuple. The statement is
        never terminated here.

        Args:
            record: Input record handed to each field projector
            schema: Fields in column order
            row_index: Zero-based position of the record in the run

        Returns:
            The rendered text, or ``""`` for a schema with no fields
        """
        fields = schema.fields
        if not fields:
            return ""
        config = self.config
        out = StringIO()
        if not config.batch_mode or row_index == 0:
            self._write_header(out, schema)
        else:
            out.write(CONTINUATION)

        values = comma_separated(
            format_literal(f.project(record), config.string_quote)
            for f in fields
            if f.has_projector
        )
        out.write(values)
        out.write(")")
        return out.getvalue()

    def _write_header(self, out: StringIO, schema: Schema[T]) -> None:
        config = self.config
        out.write(INSERT_INTO_UP if config.keyword_upper else INSERT_INTO_LW)
        if config.schema_name:
            emit_identifier(out, config.schema_name, config)
            out.write(CATALOG_SEPARATOR)
        emit_identifier(out, config.table_name, config)
        out.write(" (")
        out.write(comma_separated(format_identifier(f.name, config) for f in schema.fields))
        out.write(")")
        out.write("\n" if config.batch_mode else " ")
        out.write(VALUES_UP if config.keyword_upper else VALUES_LW)
        out.write("(")

    def generate(self, records: Iterable[T], schema: Schema[T]) -> str:
        """Render every record and terminate the output with ``;``.

        Args:
            records: Any iterable of input records, consumed once in order
            schema: Fields in column order

        Returns:
            The full text; ``""`` when no row produced output
        """
        out = StringIO()
        rows = 0
        for i, record in enumerate(records):
            out.write(self.apply(record, schema, i))
            rows += 1
        return self._finish(out, rows)

    def generate_rows(self, schema: Schema[Any], limit: int) -> str:
        """Render ``limit`` rows with no input record.

        Projectors receive ``None``, which suits generators that ignore their
        input.

        Raises:
            ConfigError: If ``limit`` is negative
        """
        if limit < 0:
            raise ConfigError("Row limit cannot be negative", context={"limit": limit})
        out = StringIO()
        for i in range(limit):
            out.write(self.apply(None, schema, i))
        return self._finish(out, limit)

    def _finish(self, out: StringIO, rows: int) -> str:
        if out.tell() > 0:
            out.write(";")
        logger.debug(
            "Generated %d row(s) for %s in %s mode",
            rows,
            self.config.table_name,
            "batch" if self.config.batch_mode else "per-row",
        )
        return out.getvalue()


def to_insert_sql(records: Iterable[T], schema: Schema[T], **options: object) -> str:
    """Render ``records`` with a serializer built from keyword ``options``.

    See :func:`insertgen.config.create_config` for the accepted options.
    """
    return SqlSerializer(create_config(**options)).generate(records, schema)
