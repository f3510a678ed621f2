"""CLI constants and configuration."""

from prompt_toolkit.styles import Style

COMMANDS = ["upload", "send", "server", "config", "clear", "exit", "help"]

STYLE = Style.from_dict(
    {
        "prompt": "#2E9E6B bold",
        "command": "#0088ff bold",
    }
)

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"

PROGRESS_BAR_WIDTH = 30

LOGO = f"""{GREEN}
  ___  __ _ / _| ___| |__ (_)_ __
 / __|/ _` | |_ / _ \\ '_ \\| | '_ \\
 \\__ \\ (_| |  _|  __/ |_) | | | | |
 |___/\\__,_|_|  \\___|_.__/|_|_| |_|
{RESET}"""

WELCOME_TITLE = "safebin CLI - chunked file uploads"
WELCOME_HELP = "Type 'help' for commands or 'exit' to quit.\n"

PROMPT_TEXT = "safebin> "

HELP_TEXT = """Available commands:
  upload <file> [file...]             Upload files in chunks (each file is a new attempt)
  send <file>                         Upload a file in a single request
  server [url]                        Show or set the server URL
  config                              Show current configuration
  clear                               Clear screen and redisplay welcome message
  help                                Show this help
  exit                                Exit REPL

Examples:
  upload video.mp4
  upload "my notes.txt" archive.tar.gz
  send small.txt
  server http://localhost:8080"""
