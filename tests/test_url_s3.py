# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import os
import tempfile
import boto3
import pytest
from avro.datafile import DataFileWriter
from avro.io import DatumWriter
from avrobq.io import avro_schema, avro_records, read_avro_metadata
from avrobq.url import parse_url
from avrobq.url.s3 import S3URL
from moto import mock_aws
from faker import Faker

faker = Faker()

SCHEMA = avro_schema(
    {
        "type": "record",
        "name": "User",
        "fields": [
            {"name": "name", "type": "string"},
            {"name": "age", "type": "int"},
            {
                "name": "emails",
                "type": {"type": "array", "items": "string"},
            },
        ],
    }
)


def avro_bytes(count: int, codec: str = "null") -> bytes:
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "users.avro")
        with open(path, "wb") as f, DataFileWriter(
            f, DatumWriter(), SCHEMA, codec=codec
        ) as writer:
            for _ in range(count):
                writer.append(
                    {
                        "name": faker.name(),
                        "age": faker.random_int(min=18, max=80),
                        "emails": [faker.email() for _ in range(3)],
                    }
                )
        with open(path, "rb") as f:
            return f.read()


@pytest.fixture
def s3_bucket(monkeypatch):
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    with mock_aws():
        s3 = boto3.client("s3", region_name="us-east-1")
        s3.create_bucket(Bucket="test-bucket")
        yield s3


class TestS3URL:
    def test_parse(self):
        url = parse_url("s3://test-bucket/test/avro/users.avro")
        assert isinstance(url, S3URL)
        assert url.bucket == "test-bucket"
        assert url.path == "test/avro/users.avro"

    def test_exists_and_size(self, s3_bucket):
        url = parse_url("s3://test-bucket/test/text/file.txt")
        assert url.exists() is False
        assert url.size() == 0
        s3_bucket.put_object(
            Bucket="test-bucket", Key="test/text/file.txt", Body=b"This is a test."
        )
        assert url.exists() is True
        assert url.size() == len(b"This is a test.")

    def test_expand(self, s3_bucket):
        for i in range(3):
            s3_bucket.put_object(
                Bucket="test-bucket", Key=f"test/part-{i}.avro", Body=b"x"
            )
        s3_bucket.put_object(Bucket="test-bucket", Key="testing/other.avro", Body=b"x")
        expanded = parse_url("s3://test-bucket/test").expand()
        assert [u.url for u in expanded] == [
            f"s3://test-bucket/test/part-{i}.avro" for i in range(3)
        ]
        single = parse_url("s3://test-bucket/test/part-0.avro")
        assert single.expand() == [single]

    def test_read_metadata(self, s3_bucket):
        s3_bucket.put_object(
            Bucket="test-bucket", Key="users.avro", Body=avro_bytes(100, "deflate")
        )
        url = parse_url("s3://test-bucket/users.avro")
        metadata = read_avro_metadata(url)
        assert metadata.codec == "deflate"
        assert metadata.schema().to_json() == SCHEMA.to_json()
        assert url.stream is None

    def test_read_records(self, s3_bucket):
        s3_bucket.put_object(
            Bucket="test-bucket", Key="users.avro", Body=avro_bytes(250)
        )
        records = list(avro_records(parse_url("s3://test-bucket/users.avro")))
        assert len(records) == 250
        assert all(len(record["emails"]) == 3 for record in records)
