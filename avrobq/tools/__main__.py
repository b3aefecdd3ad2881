#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import argparse

from ..errors import AvroBigQueryError
from .base import Tool, select_tool
from .getmeta import GetMetaTool
from .getschema import GetSchemaTool
from .tojson import ToJsonTool

TOOLS: list[Tool] = [
    GetMetaTool(),
    GetSchemaTool(),
    ToJsonTool(),
]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="avrobq.tools",
        description="Tools for reading Avro headers and BigQuery Avro exports.",
    )
    parser.add_argument("--debug", action="store_true")
    subparsers = parser.add_subparsers(dest="tool", required=True)
    for tool in TOOLS:
        tool.configure(subparsers)
    args = parser.parse_args(argv)
    logging.basicConfig(
        format="%(levelname)s:%(message)s",
        level=logging.DEBUG if args.debug else logging.INFO,
    )
    try:
        select_tool(TOOLS, args.tool).run(args)
    except AvroBigQueryError as e:
        logging.getLogger(__name__).error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
