# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
import logging
import shutil
import tempfile
from ..url import URL
from avro.datafile import DataFileReader
from avro.io import DatumReader
from contextlib import contextmanager
from typing import TYPE_CHECKING, Generator, IO, Any, Sequence, Union, cast

if TYPE_CHECKING:
    from ..bigquery.schema import TableFieldSchema, TableSchema

logger = logging.getLogger(__name__)

SPOOL_MAX_SIZE = 64 * 1024 * 1024


@contextmanager
def _seekable(f: IO[bytes]) -> Generator[IO[bytes], None, None]:
    is_seekable = getattr(f, "seekable", None)
    if is_seekable is not None and is_seekable():
        yield f
        return
    # N.b. DataFileReader seeks, so remote streams are copied to a local buffer first
    with tempfile.SpooledTemporaryFile(max_size=SPOOL_MAX_SIZE) as buf:
        shutil.copyfileobj(f, buf)
        logger.debug("Spooled %d bytes to a local buffer", buf.tell())
        buf.seek(0)
        yield cast(IO[bytes], buf)


@contextmanager
def avro_reader(url: URL) -> Generator[DataFileReader, None, None]:
    """
    Opens an Avro DataFileReader for the given URL.

    :param url: The URL of the Avro file to read.
    :return: A DataFileReader object.
    """
    with url as f, _seekable(f) as seekable_f:
        with DataFileReader(seekable_f, DatumReader()) as reader:
            yield reader


def avro_records(url: URL) -> Generator[dict[str, Any], None, None]:
    with avro_reader(url) as reader:
        for record in reader:
            yield cast(dict[str, Any], record)


def avro_table_rows(
    url: URL, table_schema: Union[TableSchema, Sequence[TableFieldSchema]]
) -> Generator[dict[str, Any], None, None]:
    """
    Reads the records of an Avro file as BigQuery table rows.

    Records are converted against the writer's schema stored in the file.

    :param url: The URL of the Avro file, e.g. a BigQuery Avro export.
    :param table_schema: The BigQuery schema of the exported table.
    """
    from ..bigquery.rows import avro_record_to_table_row

    count = 0
    with avro_reader(url) as reader:
        schema = reader.datum_reader.writers_schema
        for record in reader:
            yield avro_record_to_table_row(
                cast(dict[str, Any], record), schema, table_schema
            )
            count += 1
    logger.debug("Read %d rows from %s", count, url)
