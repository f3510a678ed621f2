"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class UploadCommand:
    """Upload files in chunks."""

    file_list: tuple[str, ...]
    command: Literal["upload"] = "upload"


@dataclass(frozen=True)
class SendCommand:
    """Upload one file in a single request."""

    file_path: str
    command: Literal["send"] = "send"


@dataclass(frozen=True)
class ServerCommand:
    """Show or set the server URL."""

    url: str | None = None
    command: Literal["server"] = "server"


@dataclass(frozen=True)
class ConfigCommand:
    """Show configuration."""

    command: Literal["config"] = "config"


CommandRequest = UploadCommand | SendCommand | ServerCommand | ConfigCommand
