"""Entry point: runs one command-line operation or the interactive interface."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from uebernotes.argparser import CommandLineArgs, CommandLineError
from uebernotes.cli import CLI
from uebernotes.logsetup import LINUX_LOGGER, init_logging
from uebernotes.models import Config
from uebernotes.tui import TUI

_log = logging.getLogger(LINUX_LOGGER)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    arguments = sys.argv[1:] if argv is None else list(argv)
    init_logging()

    args = CommandLineArgs()
    try:
        args.parse(arguments)
    except CommandLineError as exc:
        _log.error("Command line error: %s", exc)
        print(f"Command line error: {exc}", file=sys.stderr)
        return 1

    if args.has("help"):
        print(args.help())
        return 0

    config = Config(args.value("database"), not args.has_operation())
    _log.info("Using database: %s", config.database)
    _log.info("Using cache: %s", config.use_caching)

    if args.has_operation():
        _log.debug("CLI mode")
        cli = CLI(config)
        try:
            return 0 if cli.run(args) else 1
        except CommandLineError as exc:
            _log.error("Command line error: %s", exc)
            print(f"Command line error: {exc}", file=sys.stderr)
            return 1
        finally:
            cli.close()

    _log.debug("TUI mode")
    tui = TUI(config)
    try:
        return 0 if tui.run() else 1
    finally:
        tui.close()


if __name__ == "__main__":
    sys.exit(main())