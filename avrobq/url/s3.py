# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import boto3
import logging
from botocore.exceptions import ClientError
from contextlib import contextmanager
from mypy_boto3_s3 import S3Client
from typing import Any, Generator, Sequence, override, IO, cast
from .base import URL

logger = logging.getLogger(__name__)


@contextmanager
def s3_client() -> Generator[S3Client, None, None]:
    client = boto3.client("s3")
    try:
        yield client
    finally:
        client.close()


def _is_404(e: ClientError) -> bool:
    return e.response.get("Error", {}).get("Code") in ("404", "NoSuchKey")


class S3URL(URL):
    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.bucket = self.parsed_url.netloc
        self.path = self.parsed_url.path.lstrip("/")
        self._current_client: S3Client | None = None

    @override
    def expand(self) -> Sequence[URL]:
        prefix = self.path
        if prefix and not prefix.endswith("/"):
            # N.b. list with a trailing slash so a plain object matches nothing and
            # falls through to returning self.
            prefix += "/"
        urls: list[URL] = []
        with s3_client() as client:
            paginator = client.get_paginator("list_objects_v2")
            for page in paginator.paginate(Bucket=self.bucket, Prefix=prefix):
                for obj in page.get("Contents", []):
                    key = obj.get("Key")
                    if key and not key.endswith("/"):
                        urls.append(S3URL(f"s3://{self.bucket}/{key}"))
        return urls or [self]

    @override
    def exists(self) -> bool:
        with s3_client() as client:
            try:
                client.head_object(Bucket=self.bucket, Key=self.path)
                return True
            except ClientError as e:
                if _is_404(e):
                    return False
                raise

    @override
    def size(self) -> int:
        with s3_client() as client:
            try:
                response = client.head_object(Bucket=self.bucket, Key=self.path)
                return response["ContentLength"]
            except ClientError as e:
                if _is_404(e):
                    return 0
                raise

    @override
    def open(self) -> IO[bytes]:
        client = boto3.client("s3")
        try:
            response = client.get_object(Bucket=self.bucket, Key=self.path)
        except Exception:
            client.close()
            raise
        logger.debug("Streaming s3://%s/%s", self.bucket, self.path)
        self._current_client = client
        self.stream = cast(IO[Any], response["Body"])
        return self.stream

    @override
    def close(self) -> None:
        try:
            super().close()
        finally:
            if self._current_client is not None:
                self._current_client.close()
                self._current_client = None
