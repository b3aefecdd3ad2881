# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence, IO
from urllib.parse import urlparse


class URL(ABC):
    """
    A readable binary resource identified by a URL string.
    """

    def __init__(self, url: str) -> None:
        self.url = url
        self.parsed_url = urlparse(url)
        self.stream: IO[bytes] | None = None

    def __repr__(self) -> str:
        return self.url

    def __str__(self) -> str:
        return self.url

    def __eq__(self, value: object) -> bool:
        if type(value) is not type(self):
            return False
        return self.url == value.url  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.url))

    @abstractmethod
    def expand(self) -> Sequence[URL]:
        """
        Expands the URL into all the URLs that represent concrete resources.
        """
        ...

    @abstractmethod
    def exists(self) -> bool:
        """
        Returns True if the URL exists, False otherwise.
        """
        ...

    @abstractmethod
    def size(self) -> int:
        """
        Returns the size of the URL in bytes.
        """
        ...

    @abstractmethod
    def open(self) -> IO[bytes]:
        """
        Opens the URL as a binary stream positioned at its first byte.
        """
        ...

    def close(self) -> None:
        """
        Releases the stream returned by open(), if any.
        """
        if self.stream is not None:
            try:
                self.stream.close()
            finally:
                self.stream = None

    def __enter__(self) -> IO[bytes]:
        return self.open()

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
