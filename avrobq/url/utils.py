# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from typing import Sequence, Union
from .base import URL


def flatten_urls(
    urls: Union[None, URL, Sequence[URL | None]], expand: bool = True
) -> Sequence[URL]:
    """
    Turns the URL arguments of a tool into the list of files to read.

    None entries are dropped, each URL is expanded (globs, directories,
    prefixes) and the result keeps the first occurrence of each URL.

    :param urls: A URL, a list of URLs, or None.
    :param expand: Set to False to keep the URLs as given.
    """
    given = [urls] if isinstance(urls, URL) else [u for u in urls or () if u]
    deduped: dict[str, URL] = {}
    for url in given:
        for concrete in url.expand() if expand else [url]:
            deduped.setdefault(concrete.url, concrete)
    return list(deduped.values())
