# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

from .base import URL
from typing import Any, Sequence, override, IO, cast
import requests


class HttpURL(URL):
    """
    A read-only HTTP(S) resource, streamed so that only the bytes read are fetched.
    """

    def __init__(
        self,
        url: str,
        read_http_method: str = "GET",
        timeout: float | None = 30,
    ) -> None:
        super().__init__(url)
        self.read_http_method = read_http_method
        self.timeout = timeout
        self._current_response: requests.Response | None = None

    @override
    def expand(self) -> Sequence[URL]:
        # N.b. no way to "expand" an HTTP URL, i.e. discover sub resources
        return [self]

    @override
    def exists(self) -> bool:
        try:
            response = requests.head(self.url, timeout=self.timeout)
            return response.ok
        except requests.RequestException:
            return False

    @override
    def size(self) -> int:
        response = requests.head(self.url, timeout=self.timeout)
        response.raise_for_status()
        return int(response.headers.get("Content-Length", 0))

    @override
    def open(self) -> IO[bytes]:
        res = requests.request(
            self.read_http_method, self.url, stream=True, timeout=self.timeout
        )
        try:
            res.raise_for_status()
        except requests.HTTPError:
            res.close()
            raise
        # N.b. undo any Content-Encoding so callers see the object's own bytes
        res.raw.decode_content = True
        self._current_response = res
        self.stream = cast(IO[Any], res.raw)
        return self.stream

    @override
    def close(self) -> None:
        try:
            if self._current_response is not None:
                self._current_response.close()
        finally:
            self._current_response = None
            self.stream = None
