# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import json
from typing import Union
from avro.schema import Field, RecordSchema, Schema, UnionSchema, parse


def avro_schema(schema: Union[str, dict, Schema]) -> Schema:
    """
    Converts a JSON string or dictionary schema to an Avro Schema object.

    :param schema: The schema to convert. Schema objects are returned unchanged.
    :return: An Avro Schema object.
    """
    if isinstance(schema, Schema):
        return schema
    if isinstance(schema, str):
        return parse(schema)
    return parse(json.dumps(schema))


def avro_record_fields(schema: Schema) -> dict[str, Field]:
    """
    Indexes the fields of an Avro record schema by name.

    :raises ValueError: If the schema is not a record.
    """
    if not isinstance(schema, RecordSchema):
        raise ValueError(f"Expected an Avro record schema, not {schema.type}.")
    return {field.name: field for field in schema.fields}


def non_null_branch(schema: UnionSchema) -> Schema | None:
    """
    Returns the non-null branch of a two-branch union with null, whatever its position.

    :return: The other branch, or None unless the union is [null, T] or [T, null].
    """
    branches = schema.schemas
    if len(branches) != 2:
        return None
    types = [branch.type for branch in branches]
    if types.count("null") != 1:
        return None
    return branches[1] if types[0] == "null" else branches[0]
