"""Shared pytest fixtures for all tests."""

import re
from urllib.parse import parse_qs

import httpx
import pytest
from cli.config import Config

SHARE_FRAGMENT = (
    '<div class="result-container">'
    '<div class="dim result-label">Upload Complete:</div>'
    '<div class="copy-box">'
    '<input type="text" value="files.example.com/AbCdEfGhIjKlMnOpQrStUv.bin" id="share-url" readonly onclick="this.select()">'
    '<button onclick="copyToClipboard(this)">Copy</button>'
    '</div></div>'
)


def parse_form(request: httpx.Request) -> dict:
    """
    Decode form fields of a captured request.

    Multipart values come back as bytes, urlencoded values as str.
    """
    content_type = request.headers.get('content-type', '')
    body = request.read()
    if content_type.startswith('application/x-www-form-urlencoded'):
        return {k: v[0] for k, v in parse_qs(body.decode()).items()}

    boundary = content_type.split('boundary=')[1].encode()
    fields = {}
    for part in body.split(b'--' + boundary):
        head, sep, value = part.partition(b'\r\n\r\n')
        if not sep:
            continue
        match = re.search(rb'name="([^"]+)"', head)
        if not match:
            continue
        if value.endswith(b'\r\n'):
            value = value[:-2]
        fields[match.group(1).decode()] = value
    return fields


class FakeServer:
    """
    Records chunk and finish requests and answers them like a safebin server.

    Args:
        fail_chunk_at: Chunk index that gets a 500 response
        error_chunk_at: Chunk index whose request raises a transport error
        finish_status: Status code for the finish request
        finish_error: Raise a transport error on the finish request
    """

    def __init__(self, fail_chunk_at=None, error_chunk_at=None, finish_status=200,
                 finish_error=False, direct_status=200):
        self.fail_chunk_at = fail_chunk_at
        self.error_chunk_at = error_chunk_at
        self.finish_status = finish_status
        self.finish_error = finish_error
        self.direct_status = direct_status
        self.requests = []
        self.chunks = []
        self.finish_calls = []
        self.direct_calls = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        fields = parse_form(request)
        self.requests.append((request.url.path, fields, request.headers))

        if request.url.path == '/upload/chunk':
            index = int(fields['index'])
            if index == self.error_chunk_at:
                raise httpx.ConnectError("connection reset", request=request)
            self.chunks.append((fields['upload_id'].decode(), index, fields['chunk']))
            if index == self.fail_chunk_at:
                return httpx.Response(500)
            return httpx.Response(200)

        if request.url.path == '/upload/finish':
            self.finish_calls.append(fields)
            if self.finish_error:
                raise httpx.ReadTimeout("timed out", request=request)
            if self.finish_status != 200:
                return httpx.Response(self.finish_status, text="<div class=\"error-text\">Error</div>")
            return httpx.Response(200, text=SHARE_FRAGMENT)

        if request.url.path == '/':
            self.direct_calls.append(fields)
            if self.direct_status != 200:
                return httpx.Response(self.direct_status)
            return httpx.Response(200, text=SHARE_FRAGMENT)

        return httpx.Response(404)

    @property
    def chunk_indexes(self) -> list:
        return [index for _, index, _ in self.chunks]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler), base_url='http://test')


class RecordingSink:
    """UploadSink that keeps every report in order."""

    def __init__(self):
        self.events = []

    def report_progress(self, fraction):
        self.events.append(('progress', fraction))

    def report_result(self, payload):
        self.events.append(('result', payload))

    def report_error(self, reason):
        self.events.append(('error', reason))

    @property
    def progress(self) -> list:
        return [value for kind, value in self.events if kind == 'progress']

    @property
    def outcomes(self) -> list:
        return [(kind, value) for kind, value in self.events if kind != 'progress']


@pytest.fixture
def fake_server():
    """FakeServer answering every request successfully."""
    return FakeServer()


@pytest.fixture
def sink():
    """Fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .safebin directory
    """
    config_dir = tmp_path / '.safebin'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a small sample file.

    Returns:
        Path to sample text file
    """
    file_path = tmp_path / 'test.txt'
    file_path.write_text('Sample content for testing')
    return file_path


@pytest.fixture
def binary_file(tmp_path):
    """
    Create a 2500-byte file with non-repeating content.

    Returns:
        Path to the file
    """
    file_path = tmp_path / 'data.bin'
    file_path.write_bytes(bytes(i % 251 for i in range(2500)))
    return file_path
