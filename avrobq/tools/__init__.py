# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .getmeta import GetMetaTool
from .getschema import GetSchemaTool
from .tojson import ToJsonTool

__all__ = [
    "GetMetaTool",
    "GetSchemaTool",
    "ToJsonTool",
]
