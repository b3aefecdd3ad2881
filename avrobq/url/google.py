# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import logging
import os
from contextlib import contextmanager
from google.api_core.exceptions import NotFound
from google.auth.credentials import AnonymousCredentials
from google.cloud import storage  # type: ignore
from typing import Any, Generator, Sequence, cast, override, IO

from .base import URL

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 1024 * 1024


def _create_client() -> storage.Client:
    client_options = {}
    api_endpoint = os.getenv("GOOGLE_CLOUD_STORAGE_API_ENDPOINT")
    if api_endpoint:
        client_options["api_endpoint"] = api_endpoint
    use_anonymous_credentials = (
        os.getenv("GOOGLE_CLOUD_STORAGE_USE_ANONYMOUS_CREDENTIALS") == "true"
    )
    return storage.Client(
        client_options=client_options,
        credentials=AnonymousCredentials() if use_anonymous_credentials else None,
    )


@contextmanager
def google_cloud_storage_client() -> Generator[storage.Client, None, None]:
    client = _create_client()
    try:
        yield client
    finally:
        client.close()


class GoogleCloudStorageURL(URL):
    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.bucket = self.parsed_url.netloc
        self.path = self.parsed_url.path.lstrip("/")
        self._current_client: storage.Client | None = None

    @override
    def expand(self) -> Sequence[URL]:
        with google_cloud_storage_client() as client:
            try:
                prefix = self.path
                if prefix and not prefix.endswith("/"):
                    # N.b. list with a trailing slash so a plain object matches nothing
                    # and falls through to returning self.
                    prefix += "/"
                blobs = client.bucket(self.bucket).list_blobs(prefix=prefix)
                urls: list[URL] = [
                    GoogleCloudStorageURL(f"gs://{self.bucket}/{blob.name}")
                    for blob in blobs
                    if not blob.name.endswith("/")
                ]
            except NotFound:
                return [self]
        return urls or [self]

    @override
    def exists(self) -> bool:
        with google_cloud_storage_client() as client:
            return client.bucket(self.bucket).blob(self.path).exists()

    @override
    def size(self) -> int:
        with google_cloud_storage_client() as client:
            blob = client.bucket(self.bucket).get_blob(self.path)
            if blob is None:
                return 0
            return blob.size if blob.size is not None else 0

    @override
    def open(self) -> IO[bytes]:
        client = _create_client()
        try:
            blob = client.bucket(self.bucket).blob(self.path)
            reader = blob.open("rb", chunk_size=READ_CHUNK_SIZE)
        except Exception:
            client.close()
            raise
        logger.debug("Streaming gs://%s/%s", self.bucket, self.path)
        self._current_client = client
        self.stream = cast(IO[Any], reader)
        return self.stream

    @override
    def close(self) -> None:
        try:
            super().close()
        finally:
            if self._current_client is not None:
                self._current_client.close()
                self._current_client = None
