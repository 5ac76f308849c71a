"""Input record schema models.

The plugin only needs to know which fields an input record carries, so the
models here are a thin layer over column names and type names. Schemas can be
built from YAML dictionaries or from PyArrow schemas.
"""

from typing import Any, Optional, Protocol, runtime_checkable

import pyarrow as pa
from pydantic import BaseModel, Field

# String type names to Arrow types
STRING_TO_ARROW_TYPE: dict[str, pa.DataType] = {
    "str": pa.string(),
    "string": pa.string(),
    "int": pa.int64(),
    "integer": pa.int64(),
    "float": pa.float64(),
    "double": pa.float64(),
    "bool": pa.bool_(),
    "boolean": pa.bool_(),
    "bytes": pa.binary(),
    "datetime": pa.timestamp("us"),
    "timestamp": pa.timestamp("us"),
    "date": pa.date32(),
}

_CANONICAL_NAMES = ("str", "int", "float", "bool", "bytes", "datetime", "date")


def string_to_arrow_type(type_name: str) -> pa.DataType:
    """Convert string type name to Arrow type.

    Raises:
        ValueError: If type_name is not supported
    """
    arrow_type = STRING_TO_ARROW_TYPE.get(type_name.lower())
    if arrow_type is None:
        raise ValueError(
            f"Unsupported type name: {type_name}. "
            f"Supported types: {list(STRING_TO_ARROW_TYPE.keys())}"
        )
    return arrow_type


def arrow_type_to_string(arrow_type: pa.DataType) -> str:
    """Convert Arrow type to canonical string name."""
    for name, mapped_type in STRING_TO_ARROW_TYPE.items():
        if arrow_type.equals(mapped_type) and name in _CANONICAL_NAMES:
            return name
    return str(arrow_type)


@runtime_checkable
class FieldLookup(Protocol):
    """Anything that can answer whether it carries a named field."""

    def has_field(self, name: str) -> bool: ...


class Column(BaseModel):
    """Schema definition for a single input field."""

    name: str = Field(description="Field name")
    type: str = Field(default="str", description="Field type (e.g., 'str', 'int')")
    nullable: bool = Field(default=True, description="Whether field allows nulls")


class Schema(BaseModel):
    """Input record schema."""

    columns: list[Column] = Field(
        default_factory=list, description="List of field definitions"
    )

    def get_column(self, name: str) -> Optional[Column]:
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def get_column_names(self) -> list[str]:
        return [col.name for col in self.columns]

    def has_field(self, name: str) -> bool:
        return self.get_column(name) is not None

    def to_arrow_schema(self) -> pa.Schema:
        return pa.schema(
            [
                pa.field(col.name, string_to_arrow_type(col.type), nullable=col.nullable)
                for col in self.columns
            ]
        )

    @classmethod
    def from_arrow_schema(cls, arrow_schema: pa.Schema) -> "Schema":
        return cls(
            columns=[
                Column(
                    name=field.name,
                    type=arrow_type_to_string(field.type),
                    nullable=field.nullable,
                )
                for field in arrow_schema
            ]
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Schema":
        """Build a schema from a YAML-style dictionary.

        Columns may be given as mappings or as bare field names.
        """
        entries = data.get("columns") or []
        if not isinstance(entries, list):
            raise TypeError(
                f"Schema columns must be a list, got {type(entries).__name__}"
            )
        columns = []
        for entry in entries:
            if isinstance(entry, str):
                columns.append(Column(name=entry))
            else:
                columns.append(Column(**entry))
        return cls(columns=columns)


def has_field(schema: Any, name: str) -> bool:
    """Return True if the schema carries a field with the given name.

    Args:
        schema: A Schema, a pyarrow.Schema, or any FieldLookup.
        name: Field name to look for.

    Raises:
        TypeError: If the schema type is not supported.
    """
    if isinstance(schema, pa.Schema):
        return name in schema.names
    if isinstance(schema, FieldLookup):
        return schema.has_field(name)
    raise TypeError(f"Unsupported schema type: {type(schema).__name__}")
