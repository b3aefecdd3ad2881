# SPDX-FileCopyrightText: 2026 Greg Brandt <brandt.greg@gmail.com>
#
# SPDX-License-Identifier: Apache-2.0

import functools
import http.server
import os
import socketserver
import tempfile
import threading
import pytest
import requests
from avro.datafile import DataFileWriter
from avro.io import DatumWriter
from avrobq.io import avro_schema, avro_records, read_avro_metadata
from avrobq.url import parse_url
from avrobq.url.http import HttpURL
from faker import Faker

faker = Faker()

SCHEMA = avro_schema(
    {
        "type": "record",
        "name": "User",
        "fields": [
            {"name": "name", "type": "string"},
            {"name": "age", "type": "long"},
        ],
    }
)


class QuietHTTPRequestHandler(http.server.SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        pass


@pytest.fixture(scope="module")
def http_file_server():
    with tempfile.TemporaryDirectory() as tmp:
        with open(os.path.join(tmp, "users.avro"), "wb") as f, DataFileWriter(
            f, DatumWriter(), SCHEMA, codec="deflate"
        ) as writer:
            for _ in range(500):
                writer.append(
                    {"name": faker.name(), "age": faker.random_int(min=18, max=80)}
                )
        handler = functools.partial(QuietHTTPRequestHandler, directory=tmp)
        httpd = socketserver.TCPServer(("localhost", 0), handler)
        port = httpd.server_address[1]
        thread = threading.Thread(target=httpd.serve_forever, daemon=True)
        thread.start()
        yield {"url": f"http://localhost:{port}", "root": tmp}
        httpd.shutdown()
        httpd.server_close()
        thread.join()


class TestHttpURL:
    def test_parse(self, http_file_server):
        assert isinstance(parse_url(f"{http_file_server['url']}/users.avro"), HttpURL)

    def test_exists_and_size(self, http_file_server):
        url = parse_url(f"{http_file_server['url']}/users.avro")
        assert url.exists()
        assert url.size() == os.path.getsize(
            os.path.join(http_file_server["root"], "users.avro")
        )
        assert not parse_url(f"{http_file_server['url']}/missing.avro").exists()
        assert url.expand() == [url]

    def test_read_metadata(self, http_file_server):
        url = parse_url(f"{http_file_server['url']}/users.avro")
        metadata = read_avro_metadata(url)
        assert metadata.codec == "deflate"
        assert metadata.schema().to_json() == SCHEMA.to_json()
        assert len(metadata.sync_marker) == 16
        assert url.stream is None

    def test_read_records(self, http_file_server):
        url = parse_url(f"{http_file_server['url']}/users.avro")
        assert len(list(avro_records(url))) == 500

    def test_missing(self, http_file_server):
        url = parse_url(f"{http_file_server['url']}/missing.avro")
        with pytest.raises(requests.HTTPError):
            read_avro_metadata(url)
