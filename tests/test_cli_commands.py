"""Tests for CLI command handlers and the parser."""

import pytest
from unittest.mock import Mock
from cli.commands import handle_config, handle_send, handle_server, handle_upload
from cli.config import Config
from cli.models import ConfigCommand, SendCommand, ServerCommand, UploadCommand
from cli.parser import ParseError, parse_command
from cli.client import SafebinClient


def test_handle_upload():
    """Test upload command handler with mocked client."""
    mock_client = Mock(spec=SafebinClient)
    mock_client.upload_files.return_value = "Upload complete: http://host/abc.txt"

    cmd = UploadCommand(file_list=('a.txt', 'b.bin'))
    result = handle_upload(cmd, client=mock_client)

    assert 'Upload complete' in result
    mock_client.upload_files.assert_called_once_with(['a.txt', 'b.bin'])


def test_handle_send():
    """Test send command handler with mocked client."""
    mock_client = Mock(spec=SafebinClient)
    mock_client.send_file.return_value = "Upload complete: http://host/abc.txt"

    result = handle_send(SendCommand(file_path='a.txt'), client=mock_client)

    assert 'Upload complete' in result
    mock_client.send_file.assert_called_once_with('a.txt')


def test_handle_server_show():
    """Test server command without URL shows the current server."""
    mock_client = Mock(spec=SafebinClient)
    mock_client.config = Mock(spec=Config)
    mock_client.config.get_base_url.return_value = 'http://localhost:8080'

    result = handle_server(ServerCommand(), client=mock_client)

    assert result == 'Server: http://localhost:8080'
    mock_client.set_server.assert_not_called()


def test_handle_server_set():
    """Test server command with URL switches servers."""
    mock_client = Mock(spec=SafebinClient)
    mock_client.config = Mock(spec=Config)
    mock_client.config.get_base_url.return_value = 'http://other:9000'

    result = handle_server(ServerCommand(url='http://other:9000'), client=mock_client)

    assert 'Server set to http://other:9000' in result
    mock_client.set_server.assert_called_once_with('http://other:9000')


def test_handle_config():
    """Test config command handler."""
    mock_client = Mock(spec=SafebinClient)
    mock_client.describe_config.return_value = "Server: x"

    assert handle_config(ConfigCommand(), client=mock_client) == "Server: x"


def test_parse_upload_multiple_files():
    """upload takes one or more files, quoting allowed."""
    cmd = parse_command('upload a.txt "my file.bin"')

    assert cmd == UploadCommand(file_list=('a.txt', 'my file.bin'))


@pytest.mark.parametrize("line, message", [
    ("", "Empty command"),
    ("upload", "at least one file"),
    ("send", "exactly 1 argument"),
    ("send a b", "exactly 1 argument"),
    ("server a b", "at most 1 argument"),
    ("server localhost:8080", "must start with http"),
    ("config extra", "no arguments"),
    ("download x", "Unknown command"),
    ('upload "unterminated', "Invalid syntax"),
])
def test_parse_errors(line, message):
    """Malformed commands raise ParseError with a helpful message."""
    with pytest.raises(ParseError) as exc_info:
        parse_command(line)
    assert message in str(exc_info.value)


def test_parse_send_server_config():
    """Other commands parse into their request types."""
    assert parse_command('send a.txt') == SendCommand(file_path='a.txt')
    assert parse_command('server') == ServerCommand()
    assert parse_command('server https://x.org') == ServerCommand(url='https://x.org')
    assert parse_command('config') == ConfigCommand()
