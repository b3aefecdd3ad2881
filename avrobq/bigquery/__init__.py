# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .schema import (
    NULLABLE,
    REPEATED,
    REQUIRED,
    TableFieldSchema,
    TableSchema,
    read_table_schema,
    table_schema,
)
from .rows import TABLE_TYPE_TO_AVRO_TYPE, avro_record_to_table_row
from .timestamp import datetime_to_micros, format_timestamp

__all__ = [
    "NULLABLE",
    "REPEATED",
    "REQUIRED",
    "TABLE_TYPE_TO_AVRO_TYPE",
    "TableFieldSchema",
    "TableSchema",
    "avro_record_to_table_row",
    "datetime_to_micros",
    "format_timestamp",
    "read_table_schema",
    "table_schema",
]
