# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

"""
Converts Avro generic records into BigQuery table rows.

The conversion follows BigQuery's Avro export mapping, so that a record read back
from an exported Avro file yields the same row as BigQuery's JSON export: INTEGER
values become decimal strings, TIMESTAMP values become ``YYYY-MM-DD HH:MM:SS[.ffffff]
UTC`` strings and null values are left out of the row.

See https://cloud.google.com/bigquery/docs/exporting-data#avro_export_details
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Mapping, Sequence, Union
from avro.schema import Schema, UnionSchema
from ..errors import (
    BadUnionError,
    NullInRequiredError,
    SchemaMismatchError,
    UnsupportedModeError,
    UnsupportedTypeError,
)
from ..io.schema import avro_record_fields, non_null_branch
from .schema import NULLABLE, REPEATED, REQUIRED, TableFieldSchema, TableSchema
from .timestamp import datetime_to_micros, format_timestamp

# The Avro type BigQuery exports each column type as
TABLE_TYPE_TO_AVRO_TYPE = {
    "STRING": "string",
    "INTEGER": "long",
    "FLOAT": "double",
    "BOOLEAN": "boolean",
    "TIMESTAMP": "long",
    "RECORD": "record",
}

TIMESTAMP_RANGE = "timestamp within 0001..9999"


def avro_record_to_table_row(
    record: Mapping[str, Any],
    schema: Schema,
    table_schema: Union[TableSchema, Sequence[TableFieldSchema]],
) -> dict[str, Any]:
    """
    Converts an Avro record into a BigQuery table row.

    :param record: The record, as decoded by ``avro.io.DatumReader``.
    :param schema: The Avro record schema the record was decoded with.
    :param table_schema: The BigQuery schema of the table the record was exported from.
    :return: The row, with keys in table schema order and null values omitted.
    """
    if isinstance(table_schema, TableSchema):
        return _convert_record(record, schema, table_schema.fields)
    return _convert_record(record, schema, table_schema)


def _convert_record(
    record: Mapping[str, Any],
    schema: Schema,
    fields: Sequence[TableFieldSchema],
) -> dict[str, Any]:
    avro_fields = avro_record_fields(schema)
    row: dict[str, Any] = {}
    for field_schema in fields:
        avro_field = avro_fields.get(field_schema.name)
        if avro_field is None:
            raise SchemaMismatchError(
                f"BigQuery field {field_schema.name} is not a field of Avro record "
                f"{getattr(schema, 'fullname', schema.type)}",
                field_schema.name,
            )
        value = _convert_cell(
            avro_field.type, field_schema, record.get(avro_field.name)
        )
        # N.b. BigQuery's JSON export leaves null values out of the row
        if value is not None:
            row[avro_field.name] = value
    return row


def _convert_cell(schema: Schema, field_schema: TableFieldSchema, value: Any) -> Any:
    mode = field_schema.effective_mode
    if mode == REQUIRED:
        return _convert_required(schema, field_schema, value)
    elif mode == REPEATED:
        return _convert_repeated(schema, field_schema, value)
    elif mode == NULLABLE:
        return _convert_nullable(schema, field_schema, value)
    raise UnsupportedModeError(
        f"Unsupported BigQuery field mode {field_schema.mode} for field "
        f"{field_schema.name}",
        field_schema.name,
        actual=field_schema.mode,
    )


def _convert_repeated(
    schema: Schema, field_schema: TableFieldSchema, value: Any
) -> list[Any]:
    # REPEATED fields are exported as Avro arrays of the element type
    if schema.type != "array":
        raise SchemaMismatchError(
            f"BigQuery REPEATED field {field_schema.name} should be Avro array, "
            f"not {schema.type}",
            field_schema.name,
            expected="array",
            actual=schema.type,
        )
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise SchemaMismatchError(
            f"Expected a list for BigQuery REPEATED field {field_schema.name}, "
            f"got {type(value).__name__}",
            field_schema.name,
            expected="list",
            actual=type(value).__name__,
        )
    items = schema.items  # type: ignore[attr-defined]
    return [_convert_required(items, field_schema, element) for element in value]


def _convert_nullable(
    schema: Schema, field_schema: TableFieldSchema, value: Any
) -> Any:
    # NULLABLE fields are exported as a union of null and the column's type
    branch = None
    if isinstance(schema, UnionSchema):
        branch = non_null_branch(schema)
    if branch is None:
        raise BadUnionError(
            f"BigQuery NULLABLE field {field_schema.name} should be an Avro union of "
            f"null and another type, not {schema}",
            field_schema.name,
            expected="union",
            actual=str(schema),
        )
    if value is None:
        return None
    return _convert_required(branch, field_schema, value)


def _mismatch(
    field_schema: TableFieldSchema, expected: str, value: Any
) -> SchemaMismatchError:
    actual = type(value).__name__
    return SchemaMismatchError(
        f"Expected {expected} for BigQuery {field_schema.type} field "
        f"{field_schema.name}, got {actual}",
        field_schema.name,
        expected=expected,
        actual=actual,
    )


def _convert_required(
    schema: Schema, field_schema: TableFieldSchema, value: Any
) -> Any:
    table_type = field_schema.type
    expected_avro_type = TABLE_TYPE_TO_AVRO_TYPE.get(table_type)
    if expected_avro_type is None:
        raise UnsupportedTypeError(
            f"Unexpected BigQuery field schema type {table_type} for field named "
            f"{field_schema.name}",
            field_schema.name,
            actual=table_type,
        )
    if value is None:
        raise NullInRequiredError(
            f"REQUIRED field {field_schema.name} should not be null",
            field_schema.name,
            expected=expected_avro_type,
            actual="null",
        )
    if schema.type != expected_avro_type:
        raise SchemaMismatchError(
            f"Expected Avro schema type {expected_avro_type}, not {schema.type}, "
            f"for BigQuery {table_type} field {field_schema.name}",
            field_schema.name,
            expected=expected_avro_type,
            actual=schema.type,
        )
    if table_type == "STRING":
        if not isinstance(value, str):
            raise _mismatch(field_schema, "str", value)
        return value
    elif table_type == "INTEGER":
        if not isinstance(value, int) or isinstance(value, bool):
            raise _mismatch(field_schema, "int", value)
        return str(value)
    elif table_type == "FLOAT":
        if not isinstance(value, float):
            raise _mismatch(field_schema, "float", value)
        return value
    elif table_type == "BOOLEAN":
        if not isinstance(value, bool):
            raise _mismatch(field_schema, "bool", value)
        return value
    elif table_type == "TIMESTAMP":
        # N.b. longs with a timestamp-micros/millis logical type decode to datetimes
        if isinstance(value, datetime):
            return format_timestamp(datetime_to_micros(value))
        if not isinstance(value, int) or isinstance(value, bool):
            raise _mismatch(field_schema, "int", value)
        try:
            return format_timestamp(value)
        except OverflowError as e:
            raise SchemaMismatchError(
                f"TIMESTAMP field {field_schema.name} value {value} is outside "
                f"0001-01-01..9999-12-31",
                field_schema.name,
                expected=TIMESTAMP_RANGE,
                actual=str(value),
            ) from e
    else:
        if not isinstance(value, Mapping):
            raise _mismatch(field_schema, "dict", value)
        return _convert_record(value, schema, field_schema.fields)
