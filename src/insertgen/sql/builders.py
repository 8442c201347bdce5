"""Helper utilities for SQL generation."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from io import StringIO
from typing import TYPE_CHECKING, Iterable, TextIO

from ..engine.dialects import Casing

if TYPE_CHECKING:
    from ..config import SerializerConfig


def comma_separated(values: Iterable[str]) -> str:
    return ", ".join(values)


def needs_quoting(name: str | None, config: SerializerConfig) -> bool:
    """Return True when ``name`` must be delimited to survive unquoted casing.

    A character forces quoting when it is lower case under ``Casing.UPPER``,
    upper case under ``Casing.LOWER``, or equal to either delimiter.
    """
    if not name:
        return False
    for ch in name:
        if ch == config.open_id or ch == config.close_id:
            return True
        if config.casing is Casing.UPPER and ch.islower():
            return True
        if config.casing is Casing.LOWER and ch.isupper():
            return True
    return False


def emit_identifier(out: TextIO, name: str | None, config: SerializerConfig) -> None:
    """Write ``name`` to ``out``, delimited when :func:`needs_quoting` says so.

    Embedded delimiter characters are doubled by prefixing the opening
    delimiter, so with ``[]`` the name ``a]b`` becomes ``[a[]b]``.
    """
    if not name:
        return
    if not needs_quoting(name, config):
        out.write(name)
        return
    out.write(config.open_id)
    for ch in name:
        if ch == config.open_id or ch == config.close_id:
            out.write(config.open_id)
        out.write(ch)
    out.write(config.close_id)


def format_identifier(name: str | None, config: SerializerConfig) -> str:
    buf = StringIO()
    emit_identifier(buf, name, config)
    return buf.getvalue()


class LiteralKind(Enum):
    NULL = "null"
    NUMBER = "number"
    BOOL = "bool"
    STR = "str"


@dataclass(frozen=True)
class SqlLiteral:
    """A projected value tagged with how it is rendered."""

    kind: LiteralKind
    text: str

    @property
    def quoted(self) -> bool:
        return self.kind is LiteralKind.STR


NULL_LITERAL = SqlLiteral(LiteralKind.NULL, "null")


def classify_value(value: object) -> SqlLiteral:
    """Map a Python value onto its literal kind and text form.

    ``bool`` is checked before numbers because it subclasses ``int``. Integers,
    any other ``numbers.Real`` (including numpy floats) and ``Decimal`` use
    ``str()``; ``Fraction``, ``complex`` and other number types are quoted as
    strings.
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return SqlLiteral(LiteralKind.BOOL, "true" if value else "false")
    if isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, Fraction):
        return SqlLiteral(LiteralKind.NUMBER, str(value))
    return SqlLiteral(LiteralKind.STR, str(value))


def emit_literal(out: TextIO, value: object, string_quote: str = "'") -> None:
    literal = value if isinstance(value, SqlLiteral) else classify_value(value)
    if not literal.quoted:
        out.write(literal.text)
        return
    out.write(string_quote)
    for ch in literal.text:
        if ch == string_quote:
            out.write(string_quote)
        out.write(ch)
    out.write(string_quote)


def format_literal(value: object, string_quote: str = "'") -> str:
    buf = StringIO()
    emit_literal(buf, value, string_quote)
    return buf.getvalue()
