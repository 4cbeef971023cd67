"""Entry point for the SoloForge menu shell."""

import sys

from common.config import load_config
from common.logging_setup import setup_logging, get_logger
from shell.app import AppContext, Application
from ui_service.terminal import TerminalSurface

logger = get_logger(__name__)

EXIT_INTERRUPTED = 130


def main() -> None:
    """Start the shell and run until the user confirms quit."""
    try:
        config = load_config()
        setup_logging(config.log_level, config.log_file)
        surface = TerminalSurface()
        surface.ensure_ready()
        app = Application(AppContext(surface=surface, config=config))
        exit_code = app.run()
    except KeyboardInterrupt:
        print("\n\nCancelled.")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        logger.exception("SoloForge stopped on an unexpected error")
        print(f"\nError: {e}")
        sys.exit(1)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
