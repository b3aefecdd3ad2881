# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .base import URL
from .file import FileURL
from .factory import parse_url
from .utils import flatten_urls

__all__ = ["URL", "FileURL", "parse_url", "flatten_urls"]
