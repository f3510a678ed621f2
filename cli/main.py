"""CLI entry point."""

import shlex
import sys
import os

from common.logging_config import setup_logging
from cli.parser import ParseError, parse_command
from cli.repl import dispatch_command, repl_loop


def run_once(args: list[str]) -> int:
    """Run a single command given on the command line and return an exit code."""
    try:
        cmd_obj = parse_command(shlex.join(args))
    except ParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    result = dispatch_command(cmd_obj)
    print(result)
    return 1 if result.startswith("Error") or "\nError" in result else 0


def main() -> None:
    """Entry point for CLI."""
    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', 'WARNING')

    logger = setup_logging('cli', log_level=log_level)

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    args = sys.argv[1:]
    logger.info("CLI starting...")
    try:
        if args:
            sys.exit(run_once(args))
        repl_loop()
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")


if __name__ == "__main__":
    main()
