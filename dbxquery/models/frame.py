"""Tabular frame model consumed by visualization."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.enums import FieldType


class FrameField(BaseModel):
    """Named, typed column."""

    name: str
    type: FieldType
    values: tuple[Any, ...] = ()

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.values)


class Frame(BaseModel):
    """Named set of equally long columns."""

    name: str
    fields: tuple[FrameField, ...] = ()

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_row_counts(self) -> Frame:
        lengths = {len(f) for f in self.fields}
        if len(lengths) > 1:
            raise ValueError(
                f"frame {self.name!r} has fields of differing lengths: {sorted(lengths)}"
            )
        return self

    @classmethod
    def from_rows(
        cls,
        name: str,
        schema: Sequence[tuple[str, FieldType]],
        rows: Iterable[Sequence[Any]],
    ) -> Frame:
        """Build a frame from row tuples.

        ``None`` cells are replaced with the column type's zero value.

        Raises:
            ValueError: If a row does not match the schema width
        """
        columns: list[list[Any]] = [[] for _ in schema]
        for index, row in enumerate(rows):
            if len(row) != len(schema):
                raise ValueError(f"row {index} has {len(row)} values, expected {len(schema)}")
            for column, value, (_, field_type) in zip(columns, row, schema):
                column.append(field_type.zero_value if value is None else value)

        return cls(
            name=name,
            fields=tuple(
                FrameField(name=field_name, type=field_type, values=tuple(column))
                for (field_name, field_type), column in zip(schema, columns)
            ),
        )

    @property
    def row_count(self) -> int:
        return len(self.fields[0]) if self.fields else 0

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def field(self, name: str) -> FrameField:
        """Get a field by name.

        Raises:
            KeyError: If the frame has no such field
        """
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(name)

    def rows(self) -> list[tuple[Any, ...]]:
        return list(zip(*(f.values for f in self.fields)))

    def to_json(self) -> bytes:
        return self.model_dump_json().encode()
