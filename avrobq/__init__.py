# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

"""
Python utilities for Avro container file headers and BigQuery Avro exports.

Basic Usage Examples
--------------------

Reading an Avro file header:
    >>> from avrobq import parse_url, read_avro_metadata
    >>>
    >>> # Only the header is read, not the data blocks
    >>> metadata = read_avro_metadata(parse_url('gs://bucket/export/rows-000.avro'))
    >>> metadata.codec
    'deflate'
    >>> metadata.sync_marker.hex()
    '5f0c...'
    >>> schema = metadata.schema()

Converting records to BigQuery rows:
    >>> from avrobq import avro_record_to_table_row, avro_schema, table_schema
    >>>
    >>> schema = avro_schema({
    ...     'type': 'record',
    ...     'name': 'Row',
    ...     'fields': [
    ...         {'name': 'id', 'type': 'long'},
    ...         {'name': 'ts', 'type': ['null', 'long']},
    ...     ]
    ... })
    >>> fields = table_schema([
    ...     {'name': 'id', 'type': 'INTEGER', 'mode': 'REQUIRED'},
    ...     {'name': 'ts', 'type': 'TIMESTAMP'},
    ... ])
    >>> avro_record_to_table_row({'id': 42, 'ts': 1452062291123456}, schema, fields)
    {'id': '42', 'ts': '2016-01-06 06:38:11.123456 UTC'}

Reading a whole export as rows:
    >>> from avrobq import avro_table_rows
    >>>
    >>> for row in avro_table_rows(parse_url('rows-000.avro'), fields):
    ...     print(row)
"""

from .errors import (
    AvroBigQueryError,
    BadUnionError,
    InvalidFormatError,
    NullInRequiredError,
    SchemaMismatchError,
    UnsupportedModeError,
    UnsupportedTypeError,
)
from .url import URL, parse_url, flatten_urls
from .io import (
    AvroMetadata,
    avro_reader,
    avro_records,
    avro_schema,
    avro_table_rows,
    read_avro_metadata,
    read_avro_metadata_from_stream,
)
from .bigquery import (
    TableFieldSchema,
    TableSchema,
    avro_record_to_table_row,
    format_timestamp,
    read_table_schema,
    table_schema,
)

__all__ = [
    "AvroBigQueryError",
    "AvroMetadata",
    "BadUnionError",
    "InvalidFormatError",
    "NullInRequiredError",
    "SchemaMismatchError",
    "TableFieldSchema",
    "TableSchema",
    "URL",
    "UnsupportedModeError",
    "UnsupportedTypeError",
    "avro_reader",
    "avro_record_to_table_row",
    "avro_records",
    "avro_schema",
    "avro_table_rows",
    "flatten_urls",
    "format_timestamp",
    "parse_url",
    "read_avro_metadata",
    "read_avro_metadata_from_stream",
    "read_table_schema",
    "table_schema",
]
