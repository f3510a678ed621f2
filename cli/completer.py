"""Custom completer for the safebin CLI with local file autocompletion."""

import os
from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS

FILE_COMMANDS = ("upload", "send")


class SafebinCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Local file path completion for 'upload' and 'send' arguments
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on cursor position and context.

        For the first token, completes command names.
        For 'upload'/'send' arguments, completes paths relative to the cwd.
        """
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        command = tokens[0].lower()
        if command not in FILE_COMMANDS:
            return
        if command == "send" and (len(tokens) > 2 or (len(tokens) == 2 and is_typing_new_token)):
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        already_typed = set(tokens[1:])
        if not is_typing_new_token:
            already_typed.discard(current_word)

        yield from self._complete_paths(current_word, already_typed)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_paths(self, partial: str, exclude: set) -> Iterable[Completion]:
        """
        Complete file and directory paths.

        Directories are offered with a trailing separator so the user can
        keep descending; hidden entries only show when the partial name
        starts with a dot.
        """
        directory, prefix = os.path.split(partial)
        base = Path(os.path.expanduser(directory)) if directory else Path.cwd()

        if not base.is_dir():
            return

        try:
            entries = sorted(base.iterdir(), key=lambda p: p.name)
        except OSError:
            return

        for entry in entries:
            name = entry.name
            if not name.startswith(prefix):
                continue
            if name.startswith(".") and not prefix.startswith("."):
                continue
            candidate = os.path.join(directory, name) if directory else name
            if entry.is_dir():
                yield Completion(candidate + os.sep, start_position=-len(partial))
            elif entry.is_file() and candidate not in exclude:
                yield Completion(candidate, start_position=-len(partial))
