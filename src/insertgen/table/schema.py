"""Schema definition primitives for INSERT generation."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from ..utils.exceptions import SchemaError

T = TypeVar("T")

Projector = Callable[[T], Any]


@dataclass(frozen=True)
class Field(Generic[T]):
    """A named column, optionally able to project a value from a record.

    Records are opaque to the serializer; only the projector interprets them.
    A field without a projector still contributes its name to the column list
    but is left out of every value tuple.
    """

    name: str
    projector: Projector[T] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise SchemaError("Field name must be a non-empty string", context={"name": self.name})
        if self.projector is not None and not callable(self.projector):
            raise SchemaError(
                f"Projector for field '{self.name}' is not callable",
                suggestion="Pass a function taking the input record, or None.",
            )

    @property
    def has_projector(self) -> bool:
        return self.projector is not None

    def project(self, record: T | None) -> Any:
        if self.projector is None:
            raise SchemaError(f"Field '{self.name}' has no projector")
        return self.projector(record)


@dataclass(frozen=True)
class Schema(Generic[T]):
    """Ordered sequence of fields; the order is the column order."""

    fields: Sequence[Field[T]] = ()

    def __post_init__(self) -> None:
        fields = tuple(self.fields)
        for entry in fields:
            if not isinstance(entry, Field):
                raise SchemaError(f"Schema entries must be Field instances, got {type(entry)!r}")
        object.__setattr__(self, "fields", fields)

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)

    @classmethod
    def from_mapping(cls, projectors: Mapping[str, Projector[T] | None]) -> Schema[T]:
        """Build a schema from an ordered ``{name: projector}`` mapping.

        Example:
            >>> from insertgen.table.schema import Schema
            >>> s = Schema.from_mapping({"id": lambda r: r["id"], "note": None})
            >>> s.names
            ['id', 'note']
        """
        return cls(tuple(Field(name, projector) for name, projector in projectors.items()))


def field(name: str, projector: Projector[T] | None = None) -> Field[T]:
    """Convenience helper for creating field definitions."""
    return Field(name=name, projector=projector)


def schema(*fields: Field[T]) -> Schema[T]:
    """Convenience helper for creating a schema from fields in column order."""
    return Schema(fields)
