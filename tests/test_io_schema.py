# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import json
import pytest
from avro.schema import RecordSchema, UnionSchema
from avrobq.io import avro_schema, avro_record_fields, non_null_branch

USER = {
    "type": "record",
    "name": "User",
    "namespace": "com.example",
    "fields": [
        {"name": "name", "type": "string"},
        {"name": "age", "type": ["null", "long"]},
    ],
}


def union(*branches) -> UnionSchema:
    schema = avro_schema(
        {"type": "record", "name": "R", "fields": [{"name": "u", "type": branches}]}
    )
    return avro_record_fields(schema)["u"].type


def test_avro_schema_from_dict_and_str():
    from_dict = avro_schema(USER)
    from_str = avro_schema(json.dumps(USER))
    assert isinstance(from_dict, RecordSchema)
    assert from_dict.fullname == "com.example.User"
    assert from_dict.to_json() == from_str.to_json()
    assert avro_schema(from_dict) is from_dict


def test_avro_record_fields():
    fields = avro_record_fields(avro_schema(USER))
    assert list(fields) == ["name", "age"]
    assert fields["name"].type.type == "string"
    assert fields["age"].type.type == "union"


def test_avro_record_fields_not_a_record():
    with pytest.raises(ValueError):
        avro_record_fields(avro_schema({"type": "array", "items": "string"}))


@pytest.mark.parametrize(
    "branches,expected",
    [
        (("null", "string"), "string"),
        (("string", "null"), "string"),
        (("null", {"type": "array", "items": "long"}), "array"),
    ],
)
def test_non_null_branch(branches, expected):
    branch = non_null_branch(union(*branches))
    assert branch is not None
    assert branch.type == expected


@pytest.mark.parametrize(
    "branches",
    [
        ("string", "long"),
        ("null", "string", "long"),
        ("string",),
    ],
)
def test_non_null_branch_rejected(branches):
    assert non_null_branch(union(*branches)) is None
