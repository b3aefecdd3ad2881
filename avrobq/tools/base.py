# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Protocol
import argparse


class Tool(Protocol):
    """
    A subcommand of ``python -m avrobq.tools``.
    """

    def name(self) -> str:
        """
        The subcommand name the tool is selected by.
        """
        ...

    def configure(self, subparsers: argparse._SubParsersAction) -> None:
        """
        Adds the tool's subparser and arguments.
        """
        ...

    def run(self, args: argparse.Namespace) -> None:
        """
        Runs the tool, writing its output to stdout.
        """
        ...


def select_tool(tools: list[Tool], tool_name: str) -> Tool:
    for tool in tools:
        if tool.name() == tool_name:
            return tool
    raise ValueError(f"Tool {tool_name} not found.")
