# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

"""
BigQuery table schemas, in the shape of the BigQuery REST API's ``TableSchema``.

See https://cloud.google.com/bigquery/docs/reference/rest/v2/tables#TableSchema
"""

from __future__ import annotations
import json
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Sequence, Union
from ..url import URL

NULLABLE = "NULLABLE"
REQUIRED = "REQUIRED"
REPEATED = "REPEATED"


@dataclass(frozen=True)
class TableFieldSchema:
    name: str
    type: str
    mode: str | None = None
    fields: tuple[TableFieldSchema, ...] = field(default_factory=tuple)
    description: str | None = None

    @property
    def effective_mode(self) -> str:
        # N.b. BigQuery treats a missing mode as NULLABLE
        return self.mode if self.mode is not None else NULLABLE

    @classmethod
    def from_api_repr(cls, resource: Mapping[str, Any]) -> TableFieldSchema:
        name = resource.get("name")
        if not name:
            raise ValueError(f"BigQuery field has no name: {resource}")
        field_type = resource.get("type")
        if not field_type:
            raise ValueError(f"BigQuery field {name} has no type.")
        mode = resource.get("mode")
        return cls(
            name=name,
            type=field_type.upper(),
            mode=mode.upper() if mode else None,
            fields=tuple(cls.from_api_repr(f) for f in resource.get("fields", [])),
            description=resource.get("description"),
        )

    def to_api_repr(self) -> dict[str, Any]:
        resource: dict[str, Any] = {"name": self.name, "type": self.type}
        if self.mode is not None:
            resource["mode"] = self.mode
        if self.fields:
            resource["fields"] = [f.to_api_repr() for f in self.fields]
        if self.description is not None:
            resource["description"] = self.description
        return resource


@dataclass(frozen=True)
class TableSchema:
    fields: tuple[TableFieldSchema, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[TableFieldSchema]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    @classmethod
    def from_api_repr(
        cls, resource: Union[Mapping[str, Any], Sequence[Mapping[str, Any]]]
    ) -> TableSchema:
        """
        Builds a schema from ``{"fields": [...]}`` or a bare list of fields, the
        form written by ``bq show --schema``.
        """
        if isinstance(resource, Mapping):
            fields = resource.get("fields", [])
        else:
            fields = resource
        return cls(tuple(TableFieldSchema.from_api_repr(f) for f in fields))

    def to_api_repr(self) -> dict[str, Any]:
        return {"fields": [f.to_api_repr() for f in self.fields]}


def table_schema(
    schema: Union[str, Mapping[str, Any], Sequence[Any], TableSchema],
) -> TableSchema:
    """
    Converts a JSON string, dictionary or list of fields to a TableSchema.
    """
    if isinstance(schema, TableSchema):
        return schema
    if isinstance(schema, str):
        return TableSchema.from_api_repr(json.loads(schema))
    return TableSchema.from_api_repr(schema)


def read_table_schema(url: URL) -> TableSchema:
    """
    Reads a JSON table schema file from the given URL.
    """
    with url as f:
        return table_schema(f.read().decode("utf-8"))
