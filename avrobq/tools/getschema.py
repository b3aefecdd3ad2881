# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import json
import logging
import sys
from ..errors import InvalidFormatError
from ..io import read_avro_metadata
from ..url import parse_url

logger = logging.getLogger(__name__)


class GetSchemaTool:
    """
    Prints the schema of an Avro data file to stdout.
    """

    def name(self) -> str:
        return "getschema"

    def configure(self, subparsers: argparse._SubParsersAction) -> None:
        parser = subparsers.add_parser(
            self.name(),
            help="Prints out schema of an Avro data file.",
        )
        parser.add_argument(
            "url", help="URL of the Avro data file, or a directory/prefix of them."
        )

    def run(self, args: argparse.Namespace) -> None:
        for url in parse_url(args.url).expand():
            if not url.exists() or url.size() == 0:
                logger.debug("Skipping empty file %s", url)
                continue
            schema = read_avro_metadata(url).schema()
            json.dump(schema.to_json(), sys.stdout, indent=2)
            sys.stdout.write("\n")
            return
        raise InvalidFormatError(f"Could not read schema from {args.url}")
