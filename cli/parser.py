"""Command parser for CLI input."""

import shlex

from cli.models import (
    CommandRequest,
    ConfigCommand,
    SendCommand,
    ServerCommand,
    UploadCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Upload/Send/Server/Config)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]

    if command_name == "upload":
        return _parse_upload(tokens[1:])
    elif command_name == "send":
        return _parse_send(tokens[1:])
    elif command_name == "server":
        return _parse_server(tokens[1:])
    elif command_name == "config":
        return _parse_config(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_upload(args: list[str]) -> UploadCommand:
    """Parse 'upload <file> [file...]' command."""
    if not args:
        raise ParseError("upload requires at least one file")

    return UploadCommand(file_list=tuple(args))


def _parse_send(args: list[str]) -> SendCommand:
    """Parse 'send <file>' command."""
    if len(args) != 1:
        raise ParseError("send requires exactly 1 argument: <file>")

    return SendCommand(file_path=args[0])


def _parse_server(args: list[str]) -> ServerCommand:
    """Parse 'server [url]' command."""
    if len(args) > 1:
        raise ParseError("server takes at most 1 argument: [url]")
    if not args:
        return ServerCommand()

    url = args[0]
    if not url.startswith(("http://", "https://")):
        raise ParseError(f"Server URL must start with http:// or https:// - did you mean 'http://{url}'?")
    return ServerCommand(url=url)


def _parse_config(args: list[str]) -> ConfigCommand:
    """Parse 'config' command."""
    if args:
        raise ParseError("config takes no arguments")

    return ConfigCommand()
