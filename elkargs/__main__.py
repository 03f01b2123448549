# elkargs/__main__.py

import logging
import sys
from typing import Optional, Sequence

from elkargs.config.settings import Settings
from elkargs.config.logging_config import configure_logging
from elkargs.utils.commandline import parse_args

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    # ------------------------------------------------------------------ #
    # 1. Settings & CLI arguments
    # ------------------------------------------------------------------ #
    settings = Settings()
    cli = parse_args(argv, strict=settings.strict)

    if cli.debug.as_bool:
        # --debug on the command line wins over the environment
        settings.debug = True

    # ------------------------------------------------------------------ #
    # 2. Logging
    # ------------------------------------------------------------------ #
    configure_logging(settings)
    result = cli.result
    logger.debug("Parse result: %r", result)

    if result.missing_value is not None:
        logger.error("Missing value for flag %s.", result.missing_value_token)
    for token in result.unknown:
        if settings.strict:
            logger.error("Unknown flag %s.", token)
        else:
            logger.debug("Ignored unknown flag %s.", token)

    # ------------------------------------------------------------------ #
    # 3. Output
    # ------------------------------------------------------------------ #
    print(f"Verbose: {int(cli.verbose.as_bool)}")
    print(f"Message: {cli.message.as_string}")

    return int(result.status)


if __name__ == "__main__":
    sys.exit(main())
