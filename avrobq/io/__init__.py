# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .schema import avro_record_fields, avro_schema, non_null_branch
from .header import AvroMetadata, read_avro_metadata, read_avro_metadata_from_stream
from .reader import avro_reader, avro_records, avro_table_rows

__all__ = [
    "AvroMetadata",
    "avro_reader",
    "avro_record_fields",
    "avro_records",
    "avro_schema",
    "avro_table_rows",
    "non_null_branch",
    "read_avro_metadata",
    "read_avro_metadata_from_stream",
]
