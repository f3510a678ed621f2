"""Utility functions and the terminal sink for CLI operations."""

import html
import re
import sys
from typing import Optional, TextIO

from cli.constants import GREEN, PROGRESS_BAR_WIDTH, RED, RESET
from uploader.exceptions import UploadError

SHARE_URL_RE = re.compile(r'id=["\']share-url["\']', re.IGNORECASE)
INPUT_VALUE_RE = re.compile(r'<input\b[^>]*>', re.IGNORECASE | re.DOTALL)
VALUE_ATTR_RE = re.compile(r'value=["\']([^"\']*)["\']', re.IGNORECASE)
TAG_RE = re.compile(r'<[^>]+>')


class TerminalSink:
    """UploadSink that draws a progress bar and prints results to a stream."""

    def __init__(self, filename: str, scheme: str = "http", stream: Optional[TextIO] = None):
        """
        Initialize the terminal sink.

        Args:
            filename: Display name for the file
            scheme: URL scheme prefixed to share links
            stream: Output stream (defaults to stdout)
        """
        self.filename = filename
        self.scheme = scheme
        self.stream = stream or sys.stdout
        self.progress: list[float] = []
        self.message: Optional[str] = None
        self._bar_open = False

    def report_progress(self, fraction: float) -> None:
        """Redraw the progress bar."""
        self.progress.append(fraction)
        filled = int(PROGRESS_BAR_WIDTH * fraction)
        bar = '#' * filled + '-' * (PROGRESS_BAR_WIDTH - filled)
        self.stream.write(f"\rUploading {self.filename}: [{bar}] ({GREEN}{fraction * 100:.1f}%{RESET})")
        self.stream.flush()
        self._bar_open = True

    def report_result(self, payload: str) -> None:
        """Show the share link, or the fragment's text if no link is present."""
        self._close_bar()
        link = extract_share_link(payload, self.scheme)
        if link:
            self.message = f"Upload complete: {link}"
        else:
            self.message = f"Upload complete: {fragment_text(payload)}"

    def report_error(self, reason: UploadError) -> None:
        """Show the error message."""
        self._close_bar()
        self.message = f"{RED}{reason}{RESET}"

    def _close_bar(self) -> None:
        if self._bar_open:
            self.stream.write('\n')
            self.stream.flush()
            self._bar_open = False


def extract_share_link(payload: str, scheme: str = "http") -> Optional[str]:
    """
    Pull the share link out of a result fragment.

    The server puts ``host/slug.ext`` in the value of the ``share-url`` input;
    the scheme is added the same way the web page's copy button does.

    Args:
        payload: HTML fragment returned by the finalize request
        scheme: URL scheme to prefix

    Returns:
        Full URL, or None if the fragment has no share-url input
    """
    for tag in INPUT_VALUE_RE.findall(payload):
        if not SHARE_URL_RE.search(tag):
            continue
        match = VALUE_ATTR_RE.search(tag)
        if match:
            value = html.unescape(match.group(1)).strip()
            if '://' in value:
                return value
            return f"{scheme}://{value}"
    return None


def fragment_text(payload: str) -> str:
    """Collapse an HTML fragment to its visible text."""
    text = html.unescape(TAG_RE.sub(' ', payload))
    return ' '.join(text.split())


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"
