"""Command handler functions for CLI operations."""

from pathlib import Path
from typing import Optional

from common.logging_config import get_logger
from cli.client import SafebinClient
from cli.config import Config
from cli.models import ConfigCommand, SendCommand, ServerCommand, UploadCommand

logger = get_logger(__name__)


_client: Optional[SafebinClient] = None


def get_client() -> SafebinClient:
    """
    Get or create global SafebinClient instance.

    Returns:
        SafebinClient instance
    """
    global _client
    if _client is None:
        logger.debug("Creating new SafebinClient instance")
        config = Config(Path.home() / '.safebin' / 'config.json')
        _client = SafebinClient(config)
    return _client


def handle_upload(cmd: UploadCommand, client: Optional[SafebinClient] = None) -> str:
    """
    Handle 'upload' command.

    Args:
        cmd: UploadCommand with file_list
        client: Optional SafebinClient for dependency injection (testing)

    Returns:
        Share links or error messages, one line per file
    """
    logger.info(f"Executing upload command: {len(cmd.file_list)} files")
    if client is None:
        client = get_client()
    result = client.upload_files(list(cmd.file_list))
    logger.debug("Upload command completed")
    return result


def handle_send(cmd: SendCommand, client: Optional[SafebinClient] = None) -> str:
    """
    Handle 'send' command.

    Args:
        cmd: SendCommand with file_path
        client: Optional SafebinClient for dependency injection (testing)

    Returns:
        Share link or error message
    """
    if client is None:
        client = get_client()
    return client.send_file(cmd.file_path)


def handle_server(cmd: ServerCommand, client: Optional[SafebinClient] = None) -> str:
    """Handle 'server' command: show the URL, or switch to a new one."""
    if client is None:
        client = get_client()
    if cmd.url is None:
        return f"Server: {client.config.get_base_url()}"
    client.set_server(cmd.url)
    logger.info(f"Server set to {client.config.get_base_url()}")
    return f"Server set to {client.config.get_base_url()}"


def handle_config(cmd: ConfigCommand, client: Optional[SafebinClient] = None) -> str:
    """Handle 'config' command."""
    if client is None:
        client = get_client()
    return client.describe_config()
