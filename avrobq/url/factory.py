# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from importlib import import_module
from urllib.parse import urlparse
from .base import URL

# Scheme -> (module, class), imported on first use.
URL_SCHEMES: dict[str, tuple[str, str]] = {
    "": (".file", "FileURL"),
    "file": (".file", "FileURL"),
    "gs": (".google", "GoogleCloudStorageURL"),
    "http": (".http", "HttpURL"),
    "https": (".http", "HttpURL"),
    "s3": (".s3", "S3URL"),
}


def parse_url(url: str) -> URL:
    """
    Parse a URL string and return the matching readable URL.

    Bare paths and file:// URLs are local files; gs://, s3://, http:// and
    https:// are remote objects.

    :param url: The URL string to parse.
    :return: An instance of URL.
    :raises ValueError: If the scheme is not supported.
    """
    scheme = urlparse(url).scheme
    try:
        module_name, class_name = URL_SCHEMES[scheme]
    except KeyError:
        raise ValueError(f"Unsupported URL scheme: {scheme}") from None
    url_class = getattr(import_module(module_name, __package__), class_name)
    return url_class(url)
