# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import json
import logging
import sys
from typing import IO, Sequence
from ..bigquery import TableSchema, read_table_schema
from ..io import avro_table_rows
from ..url import URL, parse_url, flatten_urls

logger = logging.getLogger(__name__)


class ToJsonTool:
    """
    Dumps Avro data file(s) as BigQuery JSON export rows, one per line.
    """

    def name(self) -> str:
        return "tojson"

    def configure(self, subparsers: argparse._SubParsersAction) -> None:
        parser = subparsers.add_parser(
            self.name(),
            help="Dumps Avro data file(s) as BigQuery JSON rows, one per line.",
        )
        parser.add_argument(
            "--table-schema",
            required=True,
            help="URL of a BigQuery JSON table schema (e.g. from bq show --schema).",
        )
        parser.add_argument("url", nargs="+", help="URL of the Avro data file.")

    def to_json(
        self, urls: Sequence[URL], table_schema: TableSchema, out: IO[str]
    ) -> int:
        count = 0
        for url in urls:
            logger.debug("Reading %s", url)
            for row in avro_table_rows(url, table_schema):
                out.write(json.dumps(row))
                out.write("\n")
                count += 1
        return count

    def run(self, args: argparse.Namespace) -> None:
        table_schema = read_table_schema(parse_url(args.table_schema))
        urls = flatten_urls([parse_url(url) for url in args.url])
        count = self.to_json(urls, table_schema, sys.stdout)
        logger.info("Wrote %d rows from %d file(s)", count, len(urls))
