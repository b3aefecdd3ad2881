# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import json
import sys
from ..io import AvroMetadata, read_avro_metadata
from ..url import parse_url


class GetMetaTool:
    """
    Prints the header metadata of an Avro data file to stdout.
    """

    def name(self) -> str:
        return "getmeta"

    def configure(self, subparsers: argparse._SubParsersAction) -> None:
        parser = subparsers.add_parser(
            self.name(),
            help="Prints out the codec, sync marker and schema of an Avro data file.",
        )
        parser.add_argument("url", help="URL of the Avro data file.")
        parser.add_argument(
            "--format",
            choices=["text", "json"],
            default="text",
            help="Output format.",
        )

    def format_metadata(self, metadata: AvroMetadata, output_format: str) -> str:
        fields = {
            "codec": metadata.codec,
            "sync_marker": metadata.sync_marker.hex(),
            "schema": metadata.schema_text,
        }
        if output_format == "json":
            return json.dumps(fields)
        return "\n".join(f"{key}: {value}" for key, value in fields.items())

    def run(self, args: argparse.Namespace) -> None:
        metadata = read_avro_metadata(parse_url(args.url))
        sys.stdout.write(self.format_metadata(metadata, args.format) + "\n")
