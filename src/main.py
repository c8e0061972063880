import logging
import sys
from typing import Optional, Sequence

from app_config import (
    AppConfigurationError,
    apply_environment_overrides,
    load_app_config,
    load_environment_overrides,
)
from auth import AuthorizationError, ClientSecretNotFoundError
from calendar_api import CalendarError
from cli import CommandDispatcher, CommandInputError, parse_invocation
from transport import TransportError

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure logging for the application."""
    resolved = logging.getLevelName(level.upper())
    logging.basicConfig(
        level=resolved if isinstance(resolved, int) else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logger = logging.getLogger("calendar_cli")
    if not isinstance(resolved, int):
        logger.warning("Unknown log level %r, using WARNING", level)
    return logger


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a single calendar command."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        overrides = load_environment_overrides()
        app_config = apply_environment_overrides(load_app_config(), overrides)
    except AppConfigurationError as error:
        setup_logging().error("App configuration error: %s", error)
        return EXIT_FAILURE

    logger = setup_logging(app_config.logging.level)
    if app_config.source_file:
        logger.info("Loaded config: %s", app_config.source_file)

    try:
        invocation = parse_invocation(args)
    except CommandInputError as error:
        logger.error("Invalid arguments: %s", error)
        return EXIT_USAGE

    dispatcher = CommandDispatcher(config=app_config, logger=logger)
    try:
        dispatcher.run(invocation)
    except ClientSecretNotFoundError as error:
        logger.error("Startup error: %s", error)
        return EXIT_FAILURE
    except AuthorizationError as error:
        logger.error("Authorization error: %s", error)
        return EXIT_FAILURE
    except (CalendarError, TransportError) as error:
        logger.error("Calendar request failed: %s", error)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        return 130
    except Exception as error:
        logger.error(f"Unexpected error: {error}", exc_info=True)
        return EXIT_FAILURE
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
