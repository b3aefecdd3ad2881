# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .base import URL
from typing import Sequence, override, IO
import glob
import os


def _has_wildcard(path: str) -> bool:
    return "*" in path or "?" in path or "[" in path


class FileURL(URL):
    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.prefix = "file://" if self.parsed_url.scheme == "file" else ""
        self.path = self.parsed_url.path

    def _child(self, path: str) -> "FileURL":
        return FileURL(self.prefix + path)

    @override
    def expand(self) -> Sequence[URL]:
        if _has_wildcard(self.path):
            return [self._child(match) for match in sorted(glob.glob(self.path))]
        if os.path.isdir(self.path):
            acc: list[URL] = []
            for root, dirnames, filenames in os.walk(self.path):
                dirnames.sort()
                for filename in sorted(filenames):
                    acc.append(self._child(os.path.join(root, filename)))
            return acc
        # A single file, or one that does not exist yet
        return [self]

    @override
    def exists(self) -> bool:
        return os.path.exists(self.path)

    @override
    def size(self) -> int:
        if os.path.isdir(self.path):
            return sum(
                os.path.getsize(os.path.join(root, filename))
                for root, _, filenames in os.walk(self.path)
                for filename in filenames
            )
        return os.path.getsize(self.path)

    @override
    def open(self) -> IO[bytes]:
        if os.path.isdir(self.path):
            raise ValueError(f"Cannot open directory {self.path} for reading.")
        self.stream = open(self.path, mode="rb")
        return self.stream
